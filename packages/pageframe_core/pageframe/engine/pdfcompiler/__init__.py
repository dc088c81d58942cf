"""PDF composition: framed pages built on a pypdf object arena."""

from .annotations import add_launch_url_annotation, launch_url_script
from .compiler import PdfComposer, compose_document
from .objects import PdfStream
from .resources import PdfFont, PdfFontRegistry, PdfGraphicsStateRegistry, SourcePage, embed_source_page

__all__ = [
    "PdfComposer",
    "compose_document",
    "PdfStream",
    "PdfFont",
    "PdfFontRegistry",
    "PdfGraphicsStateRegistry",
    "SourcePage",
    "embed_source_page",
    "add_launch_url_annotation",
    "launch_url_script",
]
