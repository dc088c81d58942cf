"""Image decoding and accent color extraction."""

from .color_extractor import FALLBACK_COLOR, extract_vibrant_color, vibrant_color_from_pixels
from .png_decoder import DecodedImage, decode_png

__all__ = [
    "FALLBACK_COLOR",
    "extract_vibrant_color",
    "vibrant_color_from_pixels",
    "DecodedImage",
    "decode_png",
]
