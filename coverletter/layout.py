"""
Single-page letter layout: header, body and the closing name line.
"""

from __future__ import annotations

import datetime as dt
import logging
from dataclasses import dataclass, field
from typing import Optional

from coverletter.config import DEFAULT_STYLE, PageStyle
from coverletter.errors import LayoutPreconditionError
from coverletter.header import HeaderRecord, compose_header
from coverletter.ops import DrawOp, TextOp
from coverletter.paginate import RenderCursor, paginate

logger = logging.getLogger(__name__)


@dataclass
class RenderResult:
    ops: list[DrawOp] = field(default_factory=list)
    truncated: bool = False
    final_y: float = 0.0
    signed: bool = False


def place_signature(y: float, full_name: str, style: PageStyle = DEFAULT_STYLE) -> Optional[tuple[float, TextOp]]:
    """Closing name line under the body, or None when the page is too full."""
    if y + style.signature_reserve >= style.bottom:
        return None
    y += style.body_line_height * 0.5
    return y, TextOp(full_name, style.margin, y, style.font, style.body_size, style.body_color)


def layout_letter(
    header: HeaderRecord,
    text: str,
    today: Optional[dt.date] = None,
    style: PageStyle = DEFAULT_STYLE,
) -> RenderResult:
    """
    Lay out a generated letter on one page.

    Content that does not fit is dropped and ``truncated`` is set; the
    header block is always drawn.
    """
    if not header.full_name:
        raise LayoutPreconditionError("Full name is required to build the PDF.")
    if not text or not text.strip():
        raise LayoutPreconditionError("Cover letter content is missing for PDF generation.")

    today = today or dt.date.today()
    y, ops = compose_header(header, today, style)

    body = paginate(text.strip().split("\n"), RenderCursor(y=y, line_height=style.body_line_height), style)
    result = RenderResult(ops=ops + body.ops, truncated=body.truncated, final_y=body.cursor.y)

    signature = place_signature(result.final_y, header.full_name, style)
    if signature is not None:
        result.final_y, name_op = signature
        result.ops.append(name_op)
        result.signed = True
    else:
        logger.info("No room for the closing name line")

    if result.truncated:
        logger.warning("Letter for %s truncated to fit one page", header.full_name)
    return result
