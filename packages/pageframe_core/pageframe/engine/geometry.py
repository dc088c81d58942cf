"""Geometry primitives and helpers for page layout and vector drawing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

# CSS pixels are 1/96 inch, PDF points 1/72 inch
PX_TO_PT = 72 / 96

# Control point offset of a cubic Bezier approximating a quarter circle
BEZIER_CIRCLE_K = 0.5522848

# External-link glyph drawn on a 12x12 grid, y growing downward
ICON_GRID = 12.0
EXTERNAL_LINK_ICON: Tuple[Tuple[Tuple[float, float], Tuple[float, float]], ...] = (
    # open rectangle, top-right corner missing
    ((5, 2), (2, 2)),
    ((2, 2), (2, 9)),
    ((2, 9), (9, 9)),
    ((9, 9), (9, 7)),
    # arrow head
    ((7, 1), (11, 1)),
    ((11, 1), (11, 5)),
    # shaft
    ((11, 1), (5.5, 6.5)),
)


def px_to_pt(value: float) -> float:
    return value * PX_TO_PT


@dataclass(slots=True, frozen=True)
class Rect:
    """Axis-aligned rectangle in PDF space (origin bottom-left)."""

    x: float
    y: float
    width: float
    height: float

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y

    @property
    def top(self) -> float:
        return self.y + self.height


@dataclass(slots=True, frozen=True)
class PathSegment:
    """One path operation: ``m`` move, ``l`` line, ``c`` cubic curve, ``h`` close."""

    op: str
    points: Tuple[float, ...] = ()


def rounded_rect_path(x: float, y: float, width: float, height: float, radius: float) -> List[PathSegment]:
    """Closed rounded rectangle with (x, y) at the bottom-left corner.

    The radius is clamped to half of the shorter side.
    """
    r = max(0.0, min(radius, width / 2, height / 2))
    k = r * BEZIER_CIRCLE_K
    x2 = x + width
    y2 = y + height
    return [
        PathSegment("m", (x + r, y)),
        PathSegment("l", (x2 - r, y)),
        PathSegment("c", (x2 - r + k, y, x2, y + r - k, x2, y + r)),
        PathSegment("l", (x2, y2 - r)),
        PathSegment("c", (x2, y2 - r + k, x2 - r + k, y2, x2 - r, y2)),
        PathSegment("l", (x + r, y2)),
        PathSegment("c", (x + r - k, y2, x, y2 - r + k, x, y2 - r)),
        PathSegment("l", (x, y + r)),
        PathSegment("c", (x, y + r - k, x + r - k, y, x + r, y)),
        PathSegment("h"),
    ]


def external_link_icon_lines(x: float, y: float, size: float) -> List[Tuple[float, float, float, float]]:
    """Scale the icon grid to ``size`` with (x, y) at the icon's bottom-left.

    Returns:
        List of (x1, y1, x2, y2) line segments in PDF space
    """
    scale = size / ICON_GRID

    def px(gx: float) -> float:
        return x + gx * scale

    def py(gy: float) -> float:
        return y + (ICON_GRID - gy) * scale

    return [
        (px(x1), py(y1), px(x2), py(y2))
        for (x1, y1), (x2, y2) in EXTERNAL_LINK_ICON
    ]
