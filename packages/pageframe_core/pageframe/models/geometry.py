"""Spacing and element geometry captured from the browser."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..exceptions import RequestValidationError

SPACING_SIDES = ("top", "right", "bottom", "left")


@dataclass(frozen=True, slots=True)
class Spacing:
    """Margin or padding in PDF points, one value per side."""

    top: float
    right: float
    bottom: float
    left: float

    def __post_init__(self):
        for side in SPACING_SIDES:
            value = getattr(self, side)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise RequestValidationError(f"Spacing {side} must be a number", field_name=side)
            if not math.isfinite(value) or value < 0:
                raise RequestValidationError(
                    f"Spacing {side} must be a finite, non-negative number",
                    field_name=side,
                    details=repr(value),
                )

    @classmethod
    def uniform(cls, value: float) -> "Spacing":
        return cls(value, value, value, value)

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> Optional["Spacing"]:
        """Build spacing from a mapping; ``None`` stays ``None`` (use the default)."""
        if data is None:
            return None
        if not isinstance(data, Mapping):
            raise RequestValidationError("Spacing must be an object with top/right/bottom/left")
        missing = [side for side in SPACING_SIDES if side not in data]
        if missing:
            raise RequestValidationError(
                "Spacing is missing sides", details=", ".join(missing)
            )
        return cls(*(data[side] for side in SPACING_SIDES))

    def to_dict(self) -> dict:
        return {side: getattr(self, side) for side in SPACING_SIDES}


DEFAULT_MARGIN = Spacing.uniform(16)
DEFAULT_PADDING = Spacing.uniform(20)


@dataclass(frozen=True, slots=True)
class ElementRect:
    """Absolute, scroll-adjusted bounding box of the captured element in CSS pixels."""

    left: float
    top: float
    right: float
    bottom: float
    width: float
    height: float
    full_width: float
    full_height: float
    background_color: str = "rgb(255, 255, 255)"

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ElementRect":
        """Build a rect from the mapping returned by the isolation script."""
        return cls(
            left=float(data["left"]),
            top=float(data["top"]),
            right=float(data["right"]),
            bottom=float(data["bottom"]),
            width=float(data["width"]),
            height=float(data["height"]),
            full_width=float(data.get("fullWidth", data.get("full_width", 0))),
            full_height=float(data.get("fullHeight", data.get("full_height", 0))),
            background_color=str(
                data.get("backgroundColor", data.get("background_color", "rgb(255, 255, 255)"))
            ),
        )
