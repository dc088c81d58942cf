"""
Page layout for a framed capture.

All geometry of an output page is derived once from the element rect,
the source URL and the spacing overrides:

    +--------------------------------------------------+
    | margin.top      (hint text ........ timestamp)   |
    |   +------------------------------------------+   |
    |   | padding                                  |   |
    |   |    +------------------------------+      |   |
    |   |    | cropped content              |      |   |
    |   |    +------------------------------+      |   |
    |   +------------------------------------------+   |
    | bottom_margin   (label + icon, URL lines)        |
    +--------------------------------------------------+

The bottom margin grows with the number of wrapped URL lines but never
drops below the configured ``margin.bottom``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from ..models.geometry import DEFAULT_MARGIN, DEFAULT_PADDING, ElementRect, Spacing
from .geometry import PX_TO_PT
from .line_breaker import wrap_text
from .text_metrics import FontMetrics

LABEL_FONT_SIZE = 9.0
URL_FONT_SIZE = 12.0
TOP_BANNER_FONT_SIZE = 9.0
LINE_GAP = 2.0
TEXT_BLOCK_PAD = 5.0
LABEL_TO_URL_GAP = 4.0
TEXT_PAD_X = 10.0
PANEL_RADIUS = 12.0


@dataclass(frozen=True, slots=True)
class PageLayout:
    """Resolved geometry and typography of one output page, in points."""

    page_width: float
    page_height: float
    margin: Spacing
    padding: Spacing
    bottom_margin: float
    content_width: float
    content_height: float
    padded_width: float
    padded_height: float
    text_x: float
    text_pad_x: float
    label_font_size: float
    url_font_size: float
    top_banner_font_size: float
    label_row_height: float
    url_row_height: float
    label_to_url_gap: float
    text_block_pad: float
    url_lines: Tuple[str, ...]

    @property
    def footer_height(self) -> float:
        """Height needed by the label row and all URL lines."""
        return (
            self.text_block_pad
            + self.label_row_height
            + self.label_to_url_gap
            + len(self.url_lines) * self.url_row_height
        )

    @property
    def panel_x(self) -> float:
        return self.margin.left

    @property
    def panel_y(self) -> float:
        return self.bottom_margin

    @property
    def content_x(self) -> float:
        return self.margin.left + self.padding.left

    @property
    def content_y(self) -> float:
        return self.bottom_margin + self.padding.bottom

    @property
    def available_text_width(self) -> float:
        return self.padded_width - 2 * self.text_pad_x


def compute_layout(
    rect: ElementRect,
    url: str,
    mono_metrics: FontMetrics,
    margin: Optional[Spacing] = None,
    padding: Optional[Spacing] = None,
) -> PageLayout:
    """Derive every page dimension from the captured element.

    Args:
        rect: Bounding box of the captured element in CSS pixels
        url: Source URL, pre-wrapped for the footer
        mono_metrics: Metrics of the monospaced footer font
        margin: Optional margin override (defaults to 16pt per side)
        padding: Optional padding override (defaults to 20pt per side)

    Returns:
        PageLayout
    """
    margin = margin or DEFAULT_MARGIN
    padding = padding or DEFAULT_PADDING

    content_width = rect.width * PX_TO_PT
    content_height = rect.height * PX_TO_PT
    padded_width = content_width + padding.left + padding.right
    padded_height = content_height + padding.top + padding.bottom

    label_row_height = LABEL_FONT_SIZE + LINE_GAP
    url_row_height = URL_FONT_SIZE + LINE_GAP

    available_text_width = padded_width - TEXT_PAD_X * 2
    url_lines = tuple(
        wrap_text(url, available_text_width, mono_metrics.measurer(URL_FONT_SIZE), url_mode=True)
    )

    footer_height = TEXT_BLOCK_PAD + label_row_height + LABEL_TO_URL_GAP + len(url_lines) * url_row_height
    bottom_margin = max(margin.bottom, footer_height)

    return PageLayout(
        page_width=padded_width + margin.left + margin.right,
        page_height=padded_height + margin.top + bottom_margin,
        margin=margin,
        padding=padding,
        bottom_margin=bottom_margin,
        content_width=content_width,
        content_height=content_height,
        padded_width=padded_width,
        padded_height=padded_height,
        text_x=margin.left + TEXT_PAD_X,
        text_pad_x=TEXT_PAD_X,
        label_font_size=LABEL_FONT_SIZE,
        url_font_size=URL_FONT_SIZE,
        top_banner_font_size=TOP_BANNER_FONT_SIZE,
        label_row_height=label_row_height,
        url_row_height=url_row_height,
        label_to_url_gap=LABEL_TO_URL_GAP,
        text_block_pad=TEXT_BLOCK_PAD,
        url_lines=url_lines,
    )
