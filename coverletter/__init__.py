"""
Cover letter generation and single-page PDF layout.
"""
