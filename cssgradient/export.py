"""
Hand a PixelBuffer to Pillow for encoding.

The core never imports this module; it only exists for callers who want
PNG/JPEG/GIF files without wiring Pillow up themselves.
"""
from __future__ import annotations
import os
from typing import BinaryIO, Union

import numpy as np
from PIL import Image

from .gradients import render_to_buffer
from .parsing import parse_gradient
from .pixel_buffer import PixelBuffer
from .types.format_type import FormatType

PathOrFile = Union[str, os.PathLike, BinaryIO]

_FORMATS = {
    "png": "PNG",
    "jpg": "JPEG",
    "jpeg": "JPEG",
    "jpe": "JPEG",
    "gif": "GIF",
}
JPEG_QUALITY = 90


def image_format(name: str | None) -> str:
    """Pillow format name for an extension-like name; unknown names mean PNG."""
    return _FORMATS.get((name or "png").lower().lstrip("."), "PNG")


def to_image(buffer: PixelBuffer) -> Image.Image:
    """RGBA Pillow image sharing nothing with ``buffer``."""
    pixels = buffer.to_format(FormatType.INT).value
    return Image.fromarray(np.ascontiguousarray(pixels, dtype=np.uint8))


def save(buffer: PixelBuffer, fp: PathOrFile, format: str = "png") -> None:
    """
    Encode ``buffer`` and write it to a path or a binary file object.

    JPEG has no alpha channel, so the alpha is dropped before encoding.
    """
    pil_format = image_format(format)
    image = to_image(buffer)
    if pil_format == "JPEG":
        image.convert("RGB").save(fp, format=pil_format, quality=JPEG_QUALITY)
    elif pil_format == "PNG":
        image.save(fp, format=pil_format, compress_level=9)
    else:
        image.save(fp, format=pil_format)


def render_image(source: str, width: int, height: int, fp: PathOrFile, format: str = "png") -> None:
    """Parse ``source``, render it at ``width`` x ``height`` and save it."""
    save(render_to_buffer(parse_gradient(source), width, height), fp, format=format)
