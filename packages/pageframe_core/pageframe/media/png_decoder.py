"""
Minimal PNG decoder for 8-bit RGB and RGBA screenshots.

Only what the accent color scorer needs: chunk walking, IDAT inflation
and scanline defiltering. Anything else is reported as unsupported by
returning ``None``; the decoder never raises on malformed input.
"""

from __future__ import annotations

import logging
import struct
import zlib
from dataclasses import dataclass
from typing import List, Optional

logger = logging.getLogger(__name__)

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"

COLOR_TYPE_RGB = 2
COLOR_TYPE_RGBA = 6
CHANNELS_BY_COLOR_TYPE = {COLOR_TYPE_RGB: 3, COLOR_TYPE_RGBA: 4}

FILTER_NONE = 0
FILTER_SUB = 1
FILTER_UP = 2
FILTER_AVERAGE = 3
FILTER_PAETH = 4


@dataclass(slots=True)
class PngHeader:
    width: int
    height: int
    bit_depth: int
    color_type: int
    interlace: int = 0

    @property
    def supported(self) -> bool:
        return (
            self.bit_depth == 8
            and self.color_type in CHANNELS_BY_COLOR_TYPE
            and self.interlace == 0
            and self.width > 0
            and self.height > 0
        )


@dataclass(slots=True)
class DecodedImage:
    """Reconstructed pixel rows, packed without filter bytes."""

    width: int
    height: int
    channels: int
    pixels: bytearray

    def pixel(self, index: int) -> tuple:
        base = index * self.channels
        return tuple(self.pixels[base:base + self.channels])


def read_chunks(data: bytes) -> tuple[Optional[PngHeader], bytes]:
    """Walk the chunk list and return the header and concatenated IDAT payload.

    Args:
        data: Raw PNG bytes

    Returns:
        Tuple of (header or None, compressed image data)
    """
    if not data.startswith(PNG_SIGNATURE):
        return None, b""

    header: Optional[PngHeader] = None
    idat: List[bytes] = []
    offset = len(PNG_SIGNATURE)
    total = len(data)

    while offset + 8 <= total:
        length, = struct.unpack(">I", data[offset:offset + 4])
        chunk_type = data[offset + 4:offset + 8]
        start = offset + 8
        end = start + length
        if end > total:
            logger.debug("Truncated %r chunk at offset %d", chunk_type, offset)
            break
        payload = data[start:end]

        if chunk_type == b"IHDR" and length >= 13:
            width, height, bit_depth, color_type, _compression, _filter, interlace = struct.unpack(
                ">IIBBBBB", payload[:13]
            )
            header = PngHeader(width, height, bit_depth, color_type, interlace)
        elif chunk_type == b"IDAT":
            idat.append(payload)
        elif chunk_type == b"IEND":
            break

        # length + type + data + CRC (ignored)
        offset = end + 4

    return header, b"".join(idat)


def _paeth(a: int, b: int, c: int) -> int:
    p = a + b - c
    pa = abs(p - a)
    pb = abs(p - b)
    pc = abs(p - c)
    if pa <= pb and pa <= pc:
        return a
    if pb <= pc:
        return b
    return c


def unfilter_scanlines(raw: bytes, width: int, height: int, channels: int) -> bytearray:
    """Reverse the per-row PNG filters.

    Every row in ``raw`` is prefixed by one filter byte. Left, above and
    above-left neighbours come from already reconstructed bytes, and all
    arithmetic wraps at 8 bits.
    """
    stride = width * channels
    pixels = bytearray(height * stride)
    previous = bytearray(stride)

    for y in range(height):
        src = y * (stride + 1)
        filter_type = raw[src]
        line = raw[src + 1:src + 1 + stride]
        dst = y * stride
        current = bytearray(line)

        if filter_type == FILTER_SUB:
            for x in range(channels, stride):
                current[x] = (current[x] + current[x - channels]) & 0xFF
        elif filter_type == FILTER_UP:
            for x in range(stride):
                current[x] = (current[x] + previous[x]) & 0xFF
        elif filter_type == FILTER_AVERAGE:
            for x in range(stride):
                left = current[x - channels] if x >= channels else 0
                current[x] = (current[x] + ((left + previous[x]) >> 1)) & 0xFF
        elif filter_type == FILTER_PAETH:
            for x in range(stride):
                if x >= channels:
                    left = current[x - channels]
                    upper_left = previous[x - channels]
                else:
                    left = upper_left = 0
                current[x] = (current[x] + _paeth(left, previous[x], upper_left)) & 0xFF
        # FILTER_NONE and unknown selectors keep the raw bytes

        pixels[dst:dst + stride] = current
        previous = current

    return pixels


def decode_png(data: bytes) -> Optional[DecodedImage]:
    """Decode an 8-bit RGB/RGBA PNG.

    Returns:
        DecodedImage, or None when the image is unsupported or corrupt
    """
    header, compressed = read_chunks(data)
    if header is None:
        logger.debug("Not a PNG or missing IHDR chunk")
        return None
    if not header.supported:
        logger.debug(
            "Unsupported PNG format: bit depth %d, color type %d, interlace %d",
            header.bit_depth,
            header.color_type,
            header.interlace,
        )
        return None

    try:
        raw = zlib.decompress(compressed)
    except zlib.error as exc:
        logger.debug("Failed to inflate IDAT stream: %s", exc)
        return None

    channels = CHANNELS_BY_COLOR_TYPE[header.color_type]
    expected = header.height * (header.width * channels + 1)
    if len(raw) < expected:
        logger.debug("Inflated image data too short: %d < %d bytes", len(raw), expected)
        return None

    pixels = unfilter_scanlines(raw, header.width, header.height, channels)
    return DecodedImage(header.width, header.height, channels, pixels)
