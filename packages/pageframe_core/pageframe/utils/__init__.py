"""Shared helpers: colors, timestamps, logging."""

from .color_utils import contrast_color, fix_gradient_transparency, parse_css_color, relative_luminance
from .dates import format_capture_timestamp

__all__ = [
    "contrast_color",
    "fix_gradient_transparency",
    "parse_css_color",
    "relative_luminance",
    "format_capture_timestamp",
]
