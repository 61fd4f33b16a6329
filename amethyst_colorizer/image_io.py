# amethyst_colorizer/image_io.py
from __future__ import annotations

import io
from pathlib import Path

import numpy as np
from PIL import Image, ImageOps, UnidentifiedImageError

from .constants import PNG_COMPRESS_LEVEL
from .core_types import U8Image, assert_u8_image_rgba
from .errors import DecodeError, EncodeError

"""
Image I/O helpers. Everything is RGBA uint8 [H,W,4] in sRGB.
"""


def _to_rgba_array(im: Image.Image) -> U8Image:
    im = ImageOps.exif_transpose(im)
    return np.array(im.convert("RGBA"), dtype=np.uint8)


def decode_image(data: bytes) -> U8Image:
    """Decode any Pillow-readable image bytes. Raises DecodeError."""
    try:
        with Image.open(io.BytesIO(data)) as im:
            im.load()
            return _to_rgba_array(im)
    except (UnidentifiedImageError, OSError, SyntaxError, ValueError) as exc:
        raise DecodeError(f"not a readable image: {exc}") from exc


def load_image_rgba(path: Path) -> U8Image:
    """Load an image file as RGBA. Raises DecodeError."""
    try:
        with Image.open(path) as im:
            im.load()
            return _to_rgba_array(im)
    except (UnidentifiedImageError, OSError, SyntaxError, ValueError) as exc:
        raise DecodeError(f"{path}: not a readable image: {exc}") from exc


def encode_png(rgba: U8Image) -> bytes:
    """Encode RGBA to lossless PNG bytes. Raises EncodeError."""
    arr = assert_u8_image_rgba(rgba)
    buf = io.BytesIO()
    try:
        Image.fromarray(np.ascontiguousarray(arr)).save(
            buf, format="PNG", compress_level=PNG_COMPRESS_LEVEL
        )
    except (OSError, ValueError) as exc:
        raise EncodeError(f"PNG encoding failed: {exc}") from exc
    return buf.getvalue()


def save_png_rgba(path: Path, rgba: U8Image) -> Path:
    """Write an RGBA array as PNG. Forces a .png suffix."""
    if path.suffix.lower() != ".png":
        path = path.with_suffix(".png")
    path.write_bytes(encode_png(rgba))
    return path


def is_image_file(path: Path) -> bool:
    """True when Pillow can open and decode the first frame of path."""
    try:
        with Image.open(path) as im:
            im.seek(0)
            im.load()
        return True
    except (UnidentifiedImageError, OSError, SyntaxError, ValueError):
        return False


__all__ = [
    "decode_image",
    "load_image_rgba",
    "encode_png",
    "save_png_rgba",
    "is_image_file",
]
