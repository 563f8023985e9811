"""
Configuration for the cover letter service and the PDF page style.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv
from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm

from coverletter import fonts

load_dotenv()
fonts.register_fonts()

# ── Generation backend ───────────────────────────────────────────────────────
DEFAULT_MODEL = "gpt-4o-mini"
DEFAULT_ENDPOINT = "http://localhost:8000/api/generate-cover-letter"


@dataclass(frozen=True)
class Settings:
    api_key: Optional[str]
    base_url: Optional[str]
    model: str
    max_tokens: int
    temperature: float
    endpoint: str
    timeout: float


def load_settings() -> Settings:
    """Read settings from the environment (and a local .env file)."""
    return Settings(
        api_key=os.environ.get("COVERLETTER_API_KEY") or os.environ.get("OPENAI_API_KEY"),
        base_url=os.environ.get("COVERLETTER_BASE_URL") or None,
        model=os.environ.get("COVERLETTER_MODEL", DEFAULT_MODEL),
        max_tokens=int(os.environ.get("COVERLETTER_MAX_TOKENS", "1024")),
        temperature=float(os.environ.get("COVERLETTER_TEMPERATURE", "0.7")),
        endpoint=os.environ.get("COVERLETTER_ENDPOINT", DEFAULT_ENDPOINT),
        timeout=float(os.environ.get("COVERLETTER_TIMEOUT", "60")),
    )


# ── Page style ───────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class PageStyle:
    page_width: float = A4[0]
    page_height: float = A4[1]
    margin: float = 20 * mm

    accent_color: str = "#26A69A"
    body_color: str = "#1A202C"
    font: str = fonts.REGULAR
    bold_font: str = fonts.BOLD

    body_size: float = 10.5
    heading_size: float = 14
    name_size: float = 20
    contact_size: float = 9
    date_size: float = 10

    line_spacing: float = 1.15
    paragraph_gap: float = 2 * mm
    bullet_indent: float = 4 * mm
    bullet_glyph: str = "• "
    contact_separator: str = "  |  "

    header_rule_width: float = 0.5 * mm
    separator_rule_width: float = 0.8 * mm
    separator_advance: float = 5 * mm
    signature_reserve_lines: float = 2.5

    @property
    def content_width(self) -> float:
        return self.page_width - 2 * self.margin

    @property
    def bottom(self) -> float:
        """Lowest baseline allowed, measured from the top of the page."""
        return self.page_height - self.margin

    def line_height(self, size: float) -> float:
        return size * self.line_spacing

    @property
    def body_line_height(self) -> float:
        return self.line_height(self.body_size)

    @property
    def signature_reserve(self) -> float:
        return self.body_line_height * self.signature_reserve_lines


DEFAULT_STYLE = PageStyle()
