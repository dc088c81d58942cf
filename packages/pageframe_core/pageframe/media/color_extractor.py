"""
Accent color extraction from element screenshots.

The scorer is deliberately biased toward saturated mid-tones rather than
the literal average color: near-transparent, near-gray, near-black and
near-white samples are dropped, the survivors are bucketed to a coarse
grid and each bucket is scored by ``saturation * ln(count + 1)``.
"""

from __future__ import annotations

import logging
import math
from typing import Dict, Tuple

from ..models.color import RGB
from .png_decoder import DecodedImage, decode_png

logger = logging.getLogger(__name__)

FALLBACK_COLOR = RGB(0, 0, 0)

MAX_SAMPLES = 10000
MIN_ALPHA = 200
MIN_CHROMA = 30
MIN_BRIGHTNESS = 40
MAX_BRIGHTNESS = 240
QUANTUM = 8


def quantize(value: int) -> int:
    """Round a channel half-up to the nearest multiple of 8."""
    return ((value + QUANTUM // 2) // QUANTUM) * QUANTUM


def hsl_saturation(r: int, g: int, b: int) -> float:
    high = max(r, g, b) / 255.0
    low = min(r, g, b) / 255.0
    if high == low:
        return 0.0
    lightness = (high + low) / 2.0
    denominator = 1.0 - abs(2.0 * lightness - 1.0)
    if denominator <= 0.0:
        return 0.0
    return (high - low) / denominator


def vibrant_color_from_pixels(image: DecodedImage) -> RGB:
    """Score sampled pixels of a decoded image and return the winning bucket."""
    pixel_count = image.width * image.height
    step = max(1, pixel_count // MAX_SAMPLES)
    channels = image.channels
    pixels = image.pixels
    buckets: Dict[Tuple[int, int, int], int] = {}

    for index in range(0, pixel_count, step):
        base = index * channels
        r, g, b = pixels[base], pixels[base + 1], pixels[base + 2]
        alpha = pixels[base + 3] if channels == 4 else 255
        if alpha < MIN_ALPHA:
            continue
        high = max(r, g, b)
        low = min(r, g, b)
        if high - low < MIN_CHROMA or high < MIN_BRIGHTNESS or high > MAX_BRIGHTNESS:
            continue
        key = (quantize(r), quantize(g), quantize(b))
        buckets[key] = buckets.get(key, 0) + 1

    if not buckets:
        logger.debug("No vibrant pixel among %d samples, using fallback", pixel_count // step)
        return FALLBACK_COLOR

    best = FALLBACK_COLOR
    best_score = -1.0
    for (r, g, b), count in buckets.items():
        score = hsl_saturation(r, g, b) * math.log1p(count)
        if score > best_score:
            best_score = score
            best = RGB(r, g, b)
    return best


def extract_vibrant_color(png_bytes: bytes) -> RGB:
    """Pick the accent color of a PNG screenshot.

    Never raises: unsupported or corrupt images yield ``FALLBACK_COLOR``.
    """
    image = decode_png(png_bytes)
    if image is None:
        return FALLBACK_COLOR
    color = vibrant_color_from_pixels(image)
    logger.debug("Accent color %s from %dx%d screenshot", color, image.width, image.height)
    return color
