"""
PDF output for laid-out letters.
"""

from __future__ import annotations

import io
import logging

from pypdf import PdfReader
from reportlab.lib.colors import HexColor
from reportlab.pdfgen import canvas

from coverletter.config import DEFAULT_STYLE, PageStyle
from coverletter.layout import RenderResult
from coverletter.ops import RuleOp, TextOp

logger = logging.getLogger(__name__)

MEDIA_TYPE = "application/pdf"


def render_pdf(result: RenderResult, style: PageStyle = DEFAULT_STYLE, title: str = "Cover Letter") -> bytes:
    """Draw the operations onto a single page and return the PDF bytes."""
    buffer = io.BytesIO()
    pdf = canvas.Canvas(buffer, pagesize=(style.page_width, style.page_height))
    pdf.setTitle(title)

    for op in result.ops:
        # engine y runs down from the top, reportlab's runs up from the bottom
        y = style.page_height - op.y
        if isinstance(op, TextOp):
            pdf.setFont(op.font, op.size)
            pdf.setFillColor(HexColor(op.color))
            pdf.drawString(op.x, y, op.text)
        elif isinstance(op, RuleOp):
            pdf.setStrokeColor(HexColor(op.color))
            pdf.setLineWidth(op.width)
            pdf.line(op.x1, y, op.x2, y)

    pdf.showPage()
    pdf.save()
    data = buffer.getvalue()
    logger.debug("Rendered %d draw ops into %d bytes", len(result.ops), len(data))
    return data


def count_pages(pdf_bytes: bytes) -> int:
    return len(PdfReader(io.BytesIO(pdf_bytes)).pages)
