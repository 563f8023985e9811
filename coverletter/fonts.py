"""
TrueType fonts bundled with the package (DejaVu Sans, Unicode coverage for
Latin Extended, Greek, Cyrillic and common symbols).
"""

from __future__ import annotations

from pathlib import Path

from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont

FONTS_DIR = Path(__file__).parent / "fonts"

REGULAR = "DejaVuSans"
BOLD = "DejaVuSans-Bold"

FONT_FILES = {
    REGULAR: "DejaVuSans.ttf",
    BOLD: "DejaVuSans-Bold.ttf",
}


def register_fonts(fonts_dir: Path = FONTS_DIR) -> None:
    """Register the regular/bold pair with reportlab; safe to call repeatedly."""
    registered = set(pdfmetrics.getRegisteredFontNames())
    for name, fname in FONT_FILES.items():
        if name in registered:
            continue
        path = fonts_dir / fname
        if not path.exists():
            raise FileNotFoundError(f"Font file missing: {path}")
        pdfmetrics.registerFont(TTFont(name, str(path)))

    pdfmetrics.registerFontFamily(REGULAR, normal=REGULAR, bold=BOLD, italic=REGULAR, boldItalic=BOLD)
