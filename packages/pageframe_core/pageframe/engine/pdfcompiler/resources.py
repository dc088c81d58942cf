"""Resource management for the output PDF (fonts, graphics states, source pages)."""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from typing import Dict, Tuple

from pypdf import PdfReader, PdfWriter
from pypdf.errors import PdfReadError
from pypdf.generic import (
    ArrayObject,
    DecodedStreamObject,
    DictionaryObject,
    FloatObject,
    IndirectObject,
    NameObject,
    NumberObject,
)

from ...exceptions import CompilationError
from ..text_metrics import FontMetrics

logger = logging.getLogger(__name__)


def add_indirect_object(writer: PdfWriter, obj) -> IndirectObject:
    """Register ``obj`` as an indirect object of ``writer``'s document.

    pypdf keeps this operation private; every caller goes through here.
    """
    return writer._add_object(obj)


@dataclass
class PdfFont:
    """A standard Type1 font shared by every page of the document."""

    name: str  # Base font name (e.g., "Helvetica")
    alias: str  # PDF alias (e.g., "/F1")
    ref: IndirectObject
    metrics: FontMetrics


class PdfFontRegistry:
    """Registry for fonts embedded once per document."""

    def __init__(self, writer: PdfWriter):
        self.writer = writer
        self._fonts: Dict[str, PdfFont] = {}
        self._next_alias_num = 1

    def register_font(self, name: str) -> PdfFont:
        """Register a standard font and return its PdfFont.

        Args:
            name: Standard PDF font name

        Returns:
            PdfFont object (the same one for repeated calls)
        """
        if name not in self._fonts:
            metrics = FontMetrics(name)
            font_dict = DictionaryObject({
                NameObject("/Type"): NameObject("/Font"),
                NameObject("/Subtype"): NameObject("/Type1"),
                NameObject("/BaseFont"): NameObject(f"/{name}"),
                NameObject("/Encoding"): NameObject("/WinAnsiEncoding"),
            })
            alias = f"/F{self._next_alias_num}"
            self._next_alias_num += 1
            self._fonts[name] = PdfFont(
                name=name,
                alias=alias,
                ref=add_indirect_object(self.writer, font_dict),
                metrics=metrics,
            )
        return self._fonts[name]

    def resources_dict(self) -> DictionaryObject:
        """Build the /Font resource dictionary."""
        return DictionaryObject({
            NameObject(font.alias): font.ref for font in self._fonts.values()
        })


class PdfGraphicsStateRegistry:
    """Registry for /ExtGState entries keyed by opacity."""

    def __init__(self, writer: PdfWriter):
        self.writer = writer
        self._states: Dict[float, Tuple[str, IndirectObject]] = {}

    def opacity(self, value: float) -> str:
        """Return the alias of a graphics state applying ``value`` to fills and strokes."""
        key = round(value, 4)
        if key not in self._states:
            state = DictionaryObject({
                NameObject("/Type"): NameObject("/ExtGState"),
                NameObject("/ca"): FloatObject(key),
                NameObject("/CA"): FloatObject(key),
            })
            alias = f"/GS{len(self._states) + 1}"
            self._states[key] = (alias, add_indirect_object(self.writer, state))
        return self._states[key][0]

    def resources_dict(self) -> DictionaryObject:
        return DictionaryObject({
            NameObject(alias): ref for alias, ref in self._states.values()
        })


@dataclass
class SourcePage:
    """Source page wrapped as a form XObject, cropped to ``bbox``."""

    ref: IndirectObject
    bbox: Tuple[float, float, float, float]  # left, bottom, right, top in points


def _page_content_bytes(page) -> bytes:
    contents = page.get("/Contents")
    if contents is None:
        return b""
    contents = contents.get_object()
    if isinstance(contents, ArrayObject):
        return b"\n".join(part.get_object().get_data() for part in contents)
    return contents.get_data()


def load_source_page(raw_pdf: bytes):
    """Open the first page of a source PDF.

    Raises:
        CompilationError: If the bytes are not a readable PDF with at least one page
    """
    try:
        reader = PdfReader(io.BytesIO(raw_pdf))
        if len(reader.pages) == 0:
            raise CompilationError("Source PDF has no pages")
        return reader.pages[0]
    except (PdfReadError, KeyError, ValueError) as exc:
        raise CompilationError("Source PDF could not be read", str(exc)) from exc


def embed_source_page(
    writer: PdfWriter,
    raw_pdf: bytes,
    crop: Tuple[float, float, float, float],
) -> SourcePage:
    """Embed the first page of ``raw_pdf`` into ``writer`` as a form XObject.

    Args:
        writer: Destination document
        raw_pdf: Source PDF bytes
        crop: (left, top, right, bottom) of the region to keep, in points
            measured from the top-left corner of the source page

    Returns:
        SourcePage with the XObject reference and its bounding box in the
        source page's own user space
    """
    page = load_source_page(raw_pdf)

    media_box = page.mediabox
    origin_x = float(media_box.left)
    origin_y = float(media_box.bottom)
    page_height = float(media_box.height)
    left, top, right, bottom = crop
    bbox = (
        origin_x + left,
        origin_y + page_height - bottom,
        origin_x + right,
        origin_y + page_height - top,
    )

    form = DecodedStreamObject()
    form.set_data(_page_content_bytes(page))
    form.update({
        NameObject("/Type"): NameObject("/XObject"),
        NameObject("/Subtype"): NameObject("/Form"),
        NameObject("/FormType"): NumberObject(1),
        NameObject("/BBox"): ArrayObject([FloatObject(value) for value in bbox]),
    })
    resources = page.get("/Resources")
    if resources is not None:
        form[NameObject("/Resources")] = resources.clone(writer)

    ref = add_indirect_object(writer, form.flate_encode())
    logger.debug("Embedded source page, bbox=%s", bbox)
    return SourcePage(ref=ref, bbox=bbox)
