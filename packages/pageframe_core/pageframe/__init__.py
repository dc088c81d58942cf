"""
pageframe - capture web page elements into framed, clickable PDF pages.

Example:
    >>> from pageframe import CaptureRequest, PlaywrightBrowser, LocalStorage, render_request
    >>> request = CaptureRequest.from_dict({"items": [{"url": "https://example.com"}]})
    >>> render_request(request, PlaywrightBrowser(), LocalStorage("out"))
"""

from .api import build_pdf, capture_request, render_request
from .capture import CaptureOrchestrator, LocalStorage, PlaywrightBrowser, build_file_name
from .config import CaptureSettings, ComposerOptions
from .engine import PageLayout, compute_layout, wrap_text
from .engine.pdfcompiler import PdfComposer, compose_document
from .exceptions import (
    CaptureError,
    CaptureFailedError,
    CompilationError,
    ElementNotFoundError,
    PageframeError,
    RequestValidationError,
    StorageError,
)
from .media import extract_vibrant_color
from .models import RGB, CaptureRequest, ElementRect, PageInput, Spacing
from .version import __version__

__all__ = [
    "__version__",
    "build_pdf",
    "capture_request",
    "render_request",
    "CaptureOrchestrator",
    "LocalStorage",
    "PlaywrightBrowser",
    "build_file_name",
    "CaptureSettings",
    "ComposerOptions",
    "PageLayout",
    "compute_layout",
    "wrap_text",
    "PdfComposer",
    "compose_document",
    "extract_vibrant_color",
    "RGB",
    "CaptureRequest",
    "ElementRect",
    "PageInput",
    "Spacing",
    "PageframeError",
    "RequestValidationError",
    "CaptureError",
    "CaptureFailedError",
    "ElementNotFoundError",
    "CompilationError",
    "StorageError",
]
