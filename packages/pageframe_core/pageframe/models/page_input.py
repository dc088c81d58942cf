"""Capture record handed from the browser stage to the composer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .color import RGB
from .geometry import ElementRect, Spacing


@dataclass(frozen=True, slots=True)
class PageInput:
    """Everything needed to compose one output page.

    Attributes:
        raw_pdf: Single-page print rendering of the whole source document
        rect: Bounds of the captured element inside that rendering
        dominant_color: Accent color used for the page frame
        url: Source URL, repeated in the footer and bound to the annotation
        margin: Optional margin override (points)
        padding: Optional padding override (points)
    """

    raw_pdf: bytes
    rect: ElementRect
    dominant_color: RGB
    url: str
    margin: Optional[Spacing] = None
    padding: Optional[Spacing] = None

    def __repr__(self) -> str:
        return (
            f"PageInput(url={self.url!r}, raw_pdf=<{len(self.raw_pdf)} bytes>, "
            f"rect={self.rect!r}, dominant_color={self.dominant_color!r})"
        )
