# amethyst_colorizer/transform.py
from __future__ import annotations

"""
Hue remapping in CIE LCh.

Each visible pixel keeps its lightness, takes the dye's hue, and has its
chroma scaled by the dye's saturation. Transparent pixels are copied as-is.
Greys (chroma below ACHROMATIC_CHROMA) have no hue of their own; they are
given NEUTRAL_TINT_CHROMA before scaling so they pick up a tint of the target.
"""

from typing import Sequence

import numpy as np

from .colour_convert import lab_to_lch, lch_to_rgb_u8, rgb_to_lab, wheel_hue_to_lch_hue
from .constants import ACHROMATIC_CHROMA, NEUTRAL_TINT_CHROMA
from .core_types import HueDescriptor, RGBATuple, U8Image, assert_u8_image_rgba


def remap_lch(lch: np.ndarray, target: HueDescriptor) -> np.ndarray:
    """
    LCh[N,3] -> LCh[N,3] for one dye. L is untouched.
    """
    out = lch.astype(np.float32, copy=True)
    chroma = out[:, 1]
    chroma = np.where(chroma < ACHROMATIC_CHROMA, NEUTRAL_TINT_CHROMA, chroma)
    out[:, 1] = chroma * float(target.saturation)
    out[:, 2] = wheel_hue_to_lch_hue(float(target.hue))
    return out


def recolour_rgba(image: U8Image, target: HueDescriptor) -> U8Image:
    """
    Recolour an RGBA image for one dye.

    Args:
      image:  uint8 [H,W,4]; not modified
      target: dye descriptor
    Returns:
      new uint8 [H,W,4] with the same shape and alpha channel
    """
    src = assert_u8_image_rgba(image)
    out = src.copy()

    visible = src[..., 3] > 0
    if not np.any(visible):
        return out

    rgb = src[..., :3][visible]
    lch = lab_to_lch(rgb_to_lab(rgb))
    out[..., :3][visible] = lch_to_rgb_u8(remap_lch(lch, target))
    return out


def transform_pixel(pixel: Sequence[int], target: HueDescriptor) -> RGBATuple:
    """Single-pixel form of recolour_rgba. pixel is (r, g, b, a)."""
    if len(pixel) != 4:
        raise ValueError("pixel must be (r, g, b, a)")
    r, g, b, a = (int(c) for c in pixel)
    if a == 0:
        return (r, g, b, a)
    arr = np.array([[[r, g, b, a]]], dtype=np.uint8)
    res = recolour_rgba(arr, target)[0, 0]
    return (int(res[0]), int(res[1]), int(res[2]), int(res[3]))


__all__ = ["remap_lch", "recolour_rgba", "transform_pixel"]
