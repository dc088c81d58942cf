"""Value types shared by the capture and composition stages."""

from .color import BLACK, RGB, WHITE
from .geometry import DEFAULT_MARGIN, DEFAULT_PADDING, ElementRect, Spacing
from .page_input import PageInput
from .request import (
    DEFAULT_MAIN_SELECTOR,
    CaptureItem,
    CaptureOptions,
    CaptureRequest,
    DocumentSettings,
    SelectorSettings,
)

__all__ = [
    "BLACK",
    "WHITE",
    "RGB",
    "DEFAULT_MARGIN",
    "DEFAULT_PADDING",
    "ElementRect",
    "Spacing",
    "PageInput",
    "DEFAULT_MAIN_SELECTOR",
    "CaptureItem",
    "CaptureOptions",
    "CaptureRequest",
    "DocumentSettings",
    "SelectorSettings",
]
