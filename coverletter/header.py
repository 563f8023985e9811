"""
Applicant header: name, contact line, rule and date.
"""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass

from reportlab.lib.units import mm

from coverletter.config import DEFAULT_STYLE, PageStyle
from coverletter.ops import DrawOp, RuleOp, TextOp

LINKEDIN_PREFIX = "linkedin.com/in/"


def normalize_linkedin(value: str) -> str:
    value = value.strip()
    if not value:
        return ""
    lowered = value.lower()
    if lowered.startswith(LINKEDIN_PREFIX) or lowered.startswith("http"):
        return value
    return f"{LINKEDIN_PREFIX}{value}"


def normalize_website(value: str) -> str:
    value = value.strip()
    if not value:
        return ""
    return value if value.startswith("http") else f"https://{value}"


@dataclass(frozen=True)
class HeaderRecord:
    full_name: str
    location: str = ""
    phone: str = ""
    email: str = ""
    linkedin: str = ""
    website: str = ""

    def __post_init__(self):
        for field in ("full_name", "location", "phone", "email", "linkedin", "website"):
            object.__setattr__(self, field, (getattr(self, field) or "").strip())

    def contact_line(self, separator: str = DEFAULT_STYLE.contact_separator) -> str:
        parts = [
            self.location,
            self.phone,
            self.email,
            normalize_linkedin(self.linkedin),
            normalize_website(self.website),
        ]
        return separator.join(p for p in parts if p)


def format_date(day: dt.date) -> str:
    """``October 19, 2026``"""
    return f"{day.strftime('%B')} {day.day}, {day.year}"


def compose_header(
    record: HeaderRecord, today: dt.date, style: PageStyle = DEFAULT_STYLE
) -> tuple[float, list[DrawOp]]:
    """
    Lay out the header block from the top margin down.

    Returns the y position where the body starts and the draw operations.
    The block is always drawn in full; it fits on an empty page.
    """
    ops: list[DrawOp] = []
    x = style.margin
    y = style.margin

    ops.append(TextOp(record.full_name, x, y, style.bold_font, style.name_size, style.accent_color))
    y += style.line_height(style.name_size) * 0.7

    contact = record.contact_line(style.contact_separator)
    if contact:
        ops.append(TextOp(contact, x, y, style.font, style.contact_size, style.accent_color))
        y += style.line_height(style.contact_size) * 0.9

    y += 2.5 * mm
    ops.append(RuleOp(x, style.page_width - style.margin, y, style.header_rule_width, style.accent_color))
    y += 6 * mm

    ops.append(TextOp(format_date(today), x, y, style.font, style.date_size, style.body_color))
    y += style.line_height(style.date_size) + 5 * mm
    return y, ops
