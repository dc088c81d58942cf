"""Color utilities: CSS color parsing, text contrast and gradient repair."""

from __future__ import annotations

import logging
import re
from typing import List, Optional, Tuple

from ..models.color import BLACK, RGB, WHITE

logger = logging.getLogger(__name__)

# Relative luminance above which black text wins over white text.
LUMINANCE_THRESHOLD = 0.179

_CSS_RGB_RE = re.compile(
    r"rgba?\(\s*(\d+(?:\.\d+)?)\s*[,\s]\s*(\d+(?:\.\d+)?)\s*[,\s]\s*(\d+(?:\.\d+)?)"
)

_TRANSPARENT_BLACK = (
    r"rgba\(\s*0\s*,\s*0\s*,\s*0\s*,\s*0(?:\.0*)?\s*\)"
    r"|rgba?\(\s*0\s+0\s+0\s*/\s*0(?:\.0*)?%?\s*\)"
)
_ANY_COLOR = (
    r"rgba?\(\s*(?P<r>\d+)\s*[,\s]\s*(?P<g>\d+)\s*[,\s]\s*(?P<b>\d+)"
    r"(?:\s*[,/]\s*[\d.]+%?)?\s*\)"
)
_STOP_RE = re.compile(f"(?P<clear>{_TRANSPARENT_BLACK})|(?P<color>{_ANY_COLOR})")
# Image layers; their contents are never color stops.
_URL_RE = re.compile(r"url\(\s*(?:\"[^\"]*\"|'[^']*'|[^)]*)\s*\)")


def parse_css_color(value: Optional[str], default: RGB = WHITE) -> RGB:
    """Convert a CSS ``rgb()``/``rgba()`` string to RGB, ignoring alpha.

    Args:
        value: Computed CSS color such as ``"rgb(255, 100, 50)"``
        default: Color returned for anything unparseable (named colors, hsl, ...)

    Returns:
        Parsed RGB or ``default``
    """
    if not value:
        return default
    match = _CSS_RGB_RE.search(value)
    if not match:
        logger.debug("Unparseable CSS color %r, using %s", value, default)
        return default
    r, g, b = (min(255, int(round(float(channel)))) for channel in match.groups())
    return RGB(r, g, b)


def _to_linear(channel: int) -> float:
    s = channel / 255.0
    return s / 12.92 if s <= 0.04045 else ((s + 0.055) / 1.055) ** 2.4


def relative_luminance(color: RGB) -> float:
    """WCAG 2.1 relative luminance of an sRGB color."""
    return (
        0.2126 * _to_linear(color.r)
        + 0.7152 * _to_linear(color.g)
        + 0.0722 * _to_linear(color.b)
    )


def contrast_color(background: RGB) -> RGB:
    """Return black or white, whichever reads better on ``background``."""
    return BLACK if relative_luminance(background) > LUMINANCE_THRESHOLD else WHITE


def fix_gradient_transparency(background_image: str) -> str:
    """Rewrite transparent-black gradient stops to the nearest opaque hue.

    ``rgba(0, 0, 0, 0)`` interpolates through dark tones when a gradient is
    rasterized for print. Each such stop takes the channels of the closest
    opaque stop (the preceding one on a tie) at zero alpha. Values without
    a gradient, without a transparent stop or without any opaque stop are
    returned unchanged. Text inside ``url(...)`` image layers is never
    treated as a stop.
    """
    if not background_image or "gradient" not in background_image:
        return background_image

    images = [match.span() for match in _URL_RE.finditer(background_image)]
    stops = [
        match for match in _STOP_RE.finditer(background_image)
        if not any(start <= match.start() < end for start, end in images)
    ]
    clear = [i for i, m in enumerate(stops) if m.group("clear")]
    opaque = [i for i, m in enumerate(stops) if m.group("color")]
    if not clear or not opaque:
        return background_image

    replacements: List[Tuple[int, int, str]] = []
    for index in clear:
        nearest = min(opaque, key=lambda j: (abs(j - index), j > index))
        source = stops[nearest]
        replacement = f"rgba({source.group('r')}, {source.group('g')}, {source.group('b')}, 0)"
        match = stops[index]
        replacements.append((match.start(), match.end(), replacement))

    parts = []
    cursor = 0
    for start, end, text in replacements:
        parts.append(background_image[cursor:start])
        parts.append(text)
        cursor = end
    parts.append(background_image[cursor:])
    return "".join(parts)
