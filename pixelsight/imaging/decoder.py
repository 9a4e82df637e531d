"""Image decoding — turn encoded image bytes into an RGBA PixelBuffer.

This is the I/O side of the system. The analysis engine never decodes; it
only receives the PixelBuffer produced here.
"""

from __future__ import annotations

import base64
import binascii
import io
import logging
import re
from pathlib import Path

import numpy as np
from PIL import Image, UnidentifiedImageError

from pixelsight.engine.errors import ImageDecodeError
from pixelsight.engine.pixels import PixelBuffer

logger = logging.getLogger(__name__)

_DATA_URL_RE = re.compile(r"^data:[^,]*;base64,", re.IGNORECASE)


def decode_image(raw: bytes) -> PixelBuffer:
    """Decode any Pillow-supported format into row-major RGBA8."""
    if not raw:
        raise ImageDecodeError("Empty image payload")
    try:
        with Image.open(io.BytesIO(raw)) as img:
            rgba = img.convert("RGBA")
    except (UnidentifiedImageError, OSError, ValueError) as e:
        raise ImageDecodeError(f"Cannot decode image: {e}") from e

    pixels = np.asarray(rgba, dtype=np.uint8)
    logger.debug("Decoded %dx%d image (%s)", rgba.width, rgba.height, rgba.mode)
    return PixelBuffer.from_array(pixels)


def decode_data_url(value: str) -> PixelBuffer:
    """Decode a ``data:image/...;base64,`` URL or a bare base64 string."""
    payload = value.strip()
    match = _DATA_URL_RE.match(payload)
    if match:
        payload = payload[match.end():]
    elif payload.startswith("data:"):
        raise ImageDecodeError("Only base64-encoded data URLs are supported")

    try:
        raw = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ImageDecodeError(f"Invalid base64 image data: {e}") from e
    return decode_image(raw)


def load_image(path: str | Path) -> PixelBuffer:
    """Read and decode an image file."""
    return decode_image(Path(path).read_bytes())

