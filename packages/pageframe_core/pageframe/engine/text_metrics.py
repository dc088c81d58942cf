"""

Text width measurement for the standard PDF fonts.

Uses ReportLab's AFM metrics, so measured widths match what a viewer
renders for the non-embedded standard Type1 fonts.

"""

from __future__ import annotations

from functools import lru_cache

from reportlab.pdfbase import pdfmetrics

STANDARD_FONTS = frozenset({
    "Helvetica",
    "Helvetica-Bold",
    "Helvetica-Oblique",
    "Helvetica-BoldOblique",
    "Courier",
    "Courier-Bold",
    "Courier-Oblique",
    "Courier-BoldOblique",
    "Times-Roman",
    "Times-Bold",
    "Times-Italic",
    "Times-BoldItalic",
})


def winansi_safe(text: str) -> str:
    """Replace characters the WinAnsi-encoded standard fonts cannot show."""
    return text.encode("cp1252", errors="replace").decode("cp1252")


class FontMetrics:
    """Width oracle for one standard font."""

    def __init__(self, font_name: str):
        if font_name not in STANDARD_FONTS:
            raise ValueError(f"Not a standard PDF font: {font_name}")
        self.font_name = font_name

    def width(self, text: str, font_size: float) -> float:
        """Width of ``text`` at ``font_size`` in points."""
        if not text:
            return 0.0
        return _string_width(winansi_safe(text), self.font_name, font_size)

    def measurer(self, font_size: float):
        """Return a one-argument measure function bound to ``font_size``."""
        return lambda text: self.width(text, font_size)

    def __repr__(self) -> str:
        return f"FontMetrics({self.font_name!r})"


@lru_cache(maxsize=4096)
def _string_width(text: str, font_name: str, font_size: float) -> float:
    return pdfmetrics.stringWidth(text, font_name, font_size)
