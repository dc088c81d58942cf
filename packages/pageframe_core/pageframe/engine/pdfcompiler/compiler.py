"""Main PDF composer - turns capture records into framed pages."""

from __future__ import annotations

import io
import logging
from datetime import datetime, timezone
from typing import Callable, Iterable, Optional

from pypdf import PdfWriter
from pypdf.generic import DecodedStreamObject, DictionaryObject, NameObject

from ...config import ComposerOptions
from ...models.page_input import PageInput
from ...utils.color_utils import contrast_color, parse_css_color
from ...utils.dates import format_capture_timestamp
from ..geometry import PX_TO_PT, Rect, external_link_icon_lines, rounded_rect_path
from ..layout_engine import PANEL_RADIUS, PageLayout, compute_layout
from .annotations import add_launch_url_annotation
from .objects import PdfStream
from .resources import PdfFontRegistry, PdfGraphicsStateRegistry, add_indirect_object, embed_source_page

logger = logging.getLogger(__name__)

# Gap between the footer label and the external-link glyph
ICON_GAP = 4.0
# Nudge lifting banner text to the visual center of the top margin
BANNER_BASELINE_NUDGE = 1.5
# Glyph sits slightly below the label baseline
ICON_BASELINE_DROP = 1.5


class PdfComposer:
    """Composer that owns one output document and appends framed pages to it."""

    def __init__(
        self,
        options: Optional[ComposerOptions] = None,
        title: Optional[str] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """Initialize the composer.

        Args:
            options: Texts, fonts and opacity (defaults to ComposerOptions())
            title: Optional document title written to the /Info dictionary
            clock: Returns the capture moment for each page (defaults to now, UTC)
        """
        self.options = options or ComposerOptions()
        self.title = title
        self.clock = clock or (lambda: datetime.now(timezone.utc))

        self.writer = PdfWriter()
        self.font_registry = PdfFontRegistry(self.writer)
        self.graphics_states = PdfGraphicsStateRegistry(self.writer)

        # Fonts are registered once and shared by every page
        self.regular_font = self.font_registry.register_font(self.options.regular_font)
        self.mono_font = self.font_registry.register_font(self.options.mono_font)
        self.secondary_state = self.graphics_states.opacity(self.options.secondary_opacity)

        self.page_count = 0

    def compose_page(self, page_input: PageInput) -> PageLayout:
        """Append one framed page for ``page_input`` and return its layout."""
        layout = compute_layout(
            page_input.rect,
            page_input.url,
            self.mono_font.metrics,
            margin=page_input.margin,
            padding=page_input.padding,
        )

        rect = page_input.rect
        source = embed_source_page(
            self.writer,
            page_input.raw_pdf,
            (rect.left * PX_TO_PT, rect.top * PX_TO_PT, rect.right * PX_TO_PT, rect.bottom * PX_TO_PT),
        )

        accent = page_input.dominant_color
        text_color = contrast_color(accent).to_pdf()

        stream = PdfStream()
        self._draw_background(stream, layout, accent.to_pdf())
        self._draw_panel(stream, layout, parse_css_color(rect.background_color).to_pdf())
        stream.add_xobject(
            "/Src",
            layout.content_x - source.bbox[0],
            layout.content_y - source.bbox[1],
        )
        self._draw_top_banner(stream, layout, text_color)
        label_width = self._draw_footer(stream, layout, text_color)

        page = self.writer.add_blank_page(layout.page_width, layout.page_height)
        page[NameObject("/Resources")] = DictionaryObject({
            NameObject("/Font"): self.font_registry.resources_dict(),
            NameObject("/ExtGState"): self.graphics_states.resources_dict(),
            NameObject("/XObject"): DictionaryObject({NameObject("/Src"): source.ref}),
        })
        page[NameObject("/Contents")] = add_indirect_object(self.writer, self._content_object(stream))

        add_launch_url_annotation(
            self.writer, page, page_input.url, self._annotation_rect(layout, label_width)
        )

        self.page_count += 1
        logger.debug(
            "Composed page %d for %s (%.1f x %.1f pt, %d URL lines)",
            self.page_count, page_input.url, layout.page_width, layout.page_height, len(layout.url_lines),
        )
        return layout

    def to_bytes(self) -> bytes:
        """Serialize the document."""
        metadata = {"/Producer": self.options.producer}
        if self.title:
            metadata["/Title"] = self.title
        self.writer.add_metadata(metadata)

        buffer = io.BytesIO()
        self.writer.write(buffer)
        data = buffer.getvalue()
        logger.info("Composed %d page(s), %d bytes", self.page_count, len(data))
        return data

    def _content_object(self, stream: PdfStream):
        content = DecodedStreamObject()
        content.set_data(stream.get_bytes())
        return content.flate_encode()

    def _draw_background(self, stream: PdfStream, layout: PageLayout, color) -> None:
        stream.add_rect(0, 0, layout.page_width, layout.page_height, fill_color=color)

    def _draw_panel(self, stream: PdfStream, layout: PageLayout, color) -> None:
        path = rounded_rect_path(
            layout.panel_x, layout.panel_y, layout.padded_width, layout.padded_height, PANEL_RADIUS
        )
        stream.add_path(path, fill_color=color)

    def _draw_top_banner(self, stream: PdfStream, layout: PageLayout, color) -> None:
        size = layout.top_banner_font_size
        baseline = (
            layout.bottom_margin
            + layout.padded_height
            + (layout.margin.top - size) / 2
            + BANNER_BASELINE_NUDGE
        )
        captured = format_capture_timestamp(self.clock(), self.options.timezone)
        timestamp_text = f"{self.options.timestamp_prefix} {captured}"
        timestamp_width = self.regular_font.metrics.width(timestamp_text, size)
        timestamp_x = layout.page_width - layout.margin.right - layout.text_pad_x - timestamp_width

        stream.save_state()
        stream.set_graphics_state(self.secondary_state)
        stream.add_text(self.regular_font.alias, size, layout.text_x, baseline, self.options.hint_text, color)
        stream.add_text(self.regular_font.alias, size, timestamp_x, baseline, timestamp_text, color)
        stream.restore_state()

    def _draw_footer(self, stream: PdfStream, layout: PageLayout, color) -> float:
        """Draw label, glyph and URL lines; return the label width."""
        label_size = layout.label_font_size
        cursor_y = layout.bottom_margin - layout.text_block_pad - label_size
        label_width = self.regular_font.metrics.width(self.options.label_text, label_size)
        icon_size = label_size - 1

        stream.save_state()
        stream.set_graphics_state(self.secondary_state)
        stream.add_text(self.regular_font.alias, label_size, layout.text_x, cursor_y, self.options.label_text, color)
        stream.set_stroke_color(color)
        for x1, y1, x2, y2 in external_link_icon_lines(
            layout.text_x + label_width + ICON_GAP,
            cursor_y - ICON_BASELINE_DROP,
            icon_size,
        ):
            stream.add_line(x1, y1, x2, y2, width=icon_size / 12)
        stream.restore_state()

        cursor_y -= layout.label_row_height + layout.label_to_url_gap
        for line in layout.url_lines:
            stream.add_text(self.mono_font.alias, layout.url_font_size, layout.text_x, cursor_y, line, color)
            cursor_y -= layout.url_row_height
        return label_width

    def _annotation_rect(self, layout: PageLayout, label_width: float) -> Rect:
        top = layout.bottom_margin - layout.text_block_pad
        height = (
            layout.label_row_height
            + layout.label_to_url_gap
            + len(layout.url_lines) * layout.url_row_height
        )
        widths = [label_width + ICON_GAP + layout.label_font_size - 1]
        widths.extend(
            self.mono_font.metrics.width(line, layout.url_font_size) for line in layout.url_lines
        )
        return Rect(layout.text_x, top - height, max(widths), height)


def compose_document(
    pages: Iterable[PageInput],
    options: Optional[ComposerOptions] = None,
    title: Optional[str] = None,
    clock: Optional[Callable[[], datetime]] = None,
) -> bytes:
    """Compose every capture record into one PDF, in input order.

    Args:
        pages: Capture records, one output page each
        options: Composer options
        title: Optional document title
        clock: Optional source of capture timestamps

    Returns:
        Serialized PDF bytes

    Raises:
        CompilationError: If a source rendering cannot be read
    """
    composer = PdfComposer(options, title=title, clock=clock)
    for page_input in pages:
        composer.compose_page(page_input)
    return composer.to_bytes()
