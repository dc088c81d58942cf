"""Link annotations for composed pages."""

from __future__ import annotations

from pypdf import PdfWriter
from pypdf.generic import (
    ArrayObject,
    DictionaryObject,
    FloatObject,
    IndirectObject,
    NameObject,
    NumberObject,
    TextStringObject,
)

from ..geometry import Rect
from .resources import add_indirect_object
from .utils import escape_js_string


def launch_url_script(url: str) -> str:
    """JavaScript opening ``url`` in a new viewer window."""
    return f"app.launchURL('{escape_js_string(url)}', true);"


def add_launch_url_annotation(writer: PdfWriter, page, url: str, rect: Rect) -> IndirectObject:
    """Attach an invisible link over ``rect`` that opens ``url`` in a new tab.

    A JavaScript action is used instead of /URI because viewers honor the
    new-window flag of ``app.launchURL`` and open /URI links in place.
    """
    action = DictionaryObject({
        NameObject("/Type"): NameObject("/Action"),
        NameObject("/S"): NameObject("/JavaScript"),
        NameObject("/JS"): TextStringObject(launch_url_script(url)),
    })
    annotation = DictionaryObject({
        NameObject("/Type"): NameObject("/Annot"),
        NameObject("/Subtype"): NameObject("/Link"),
        NameObject("/Rect"): ArrayObject([
            FloatObject(rect.left),
            FloatObject(rect.bottom),
            FloatObject(rect.right),
            FloatObject(rect.top),
        ]),
        NameObject("/Border"): ArrayObject([NumberObject(0), NumberObject(0), NumberObject(0)]),
        NameObject("/A"): add_indirect_object(writer, action),
    })
    ref = add_indirect_object(writer, annotation)

    annots = page.get("/Annots")
    if annots is None:
        page[NameObject("/Annots")] = ArrayObject([ref])
    else:
        annots.get_object().append(ref)
    return ref
