"""Color value type."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True, slots=True)
class RGB:
    """Plain RGB color with integer channels in the 0-255 range."""

    r: int
    g: int
    b: int

    def to_pdf(self) -> Tuple[float, float, float]:
        """Return the color on the 0-1 scale used by PDF operators."""
        return (self.r / 255.0, self.g / 255.0, self.b / 255.0)


BLACK = RGB(0, 0, 0)
WHITE = RGB(255, 255, 255)
