"""
Errors surfaced to the caller. Truncation of an over-long letter is not an
error; it is reported through ``RenderResult.truncated``.
"""

from __future__ import annotations

from typing import Optional


class CoverLetterError(Exception):
    """Base class for user-visible failures."""


class ValidationError(CoverLetterError):
    """Required form fields are missing."""


class GenerationError(CoverLetterError):
    """The generation backend failed or returned a malformed payload."""

    def __init__(self, message: str, status_code: Optional[int] = None, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details


class LayoutPreconditionError(CoverLetterError):
    """A PDF was requested without the letter text or the applicant's name."""


class BusyError(CoverLetterError):
    """A request arrived while the previous one is still running."""
