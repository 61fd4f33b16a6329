# amethyst_colorizer/colour_convert.py
from __future__ import annotations

"""
Colour conversions (sRGB, D65).

Exports:
  rgb_to_linear(srgb)
  linear_to_rgb(linear)
  rgb_to_lab(rgb)
  lab_to_linear_rgb(lab)
  lab_to_lch(lab)
  lch_to_lab(lch)
  lch_to_rgb_u8(lch, steps, epsilon)
  wheel_hue_to_lch_hue(hue_deg)
"""

import colorsys
from functools import lru_cache

import numpy as np

from .constants import GAMUT_EPSILON, GAMUT_SEARCH_STEPS
from .core_types import Lab, Lch

# Reference white (D65)
_WHITE = np.array([0.95047, 1.00000, 1.08883], dtype=np.float32)

# Linear RGB -> XYZ and back
_RGB_TO_XYZ = np.array(
    [
        [0.4124564, 0.3575761, 0.1804375],
        [0.2126729, 0.7151522, 0.0721750],
        [0.0193339, 0.1191920, 0.9503041],
    ],
    dtype=np.float32,
)
_XYZ_TO_RGB = np.array(
    [
        [3.2404542, -1.5371385, -0.4985314],
        [-0.9692660, 1.8760108, 0.0415560],
        [0.0556434, -0.2040259, 1.0572252],
    ],
    dtype=np.float32,
)

_E = 216.0 / 24389.0
_K = 24389.0 / 27.0


# sRGB <-> linear


def rgb_to_linear(srgb: np.ndarray) -> np.ndarray:
    """
    Convert sRGB (non-linear 0..1) to linear RGB (0..1). Vectorised.
    Args:
      srgb: array[...,3] in 0..1 (float)
    Returns:
      float32 array[...,3]
    """
    srgb_f = srgb.astype(np.float32, copy=False)
    linear = np.where(
        srgb_f <= 0.04045, srgb_f / 12.92, ((srgb_f + 0.055) / 1.055) ** 2.4
    )
    return linear.astype(np.float32, copy=False)


def linear_to_rgb(linear: np.ndarray) -> np.ndarray:
    """Linear RGB to sRGB (0..1). Input is clipped to [0, 1] first."""
    lin = np.clip(linear.astype(np.float32, copy=False), 0.0, 1.0)
    srgb = np.where(
        lin <= 0.0031308, lin * 12.92, 1.055 * np.power(lin, 1.0 / 2.4) - 0.055
    )
    return srgb.astype(np.float32, copy=False)


# sRGB <-> Lab (D65)


def rgb_to_lab(rgb: np.ndarray) -> Lab:
    """
    sRGB to CIE Lab (D65).
    uint8 input is read as 0..255, float input as 0..1. Preserves shape (...,3).
    """
    if rgb.dtype == np.uint8:
        rgb_f = rgb.astype(np.float32) / 255.0
    else:
        rgb_f = rgb.astype(np.float32, copy=False)

    linear = rgb_to_linear(rgb_f)
    xyz = linear @ _RGB_TO_XYZ.T
    t = xyz / _WHITE

    f = np.where(t > _E, np.cbrt(t), (_K * t + 16.0) / 116.0).astype(
        np.float32, copy=False
    )
    fx, fy, fz = f[..., 0], f[..., 1], f[..., 2]

    out = np.empty(rgb_f.shape, dtype=np.float32)
    out[..., 0] = 116.0 * fy - 16.0
    out[..., 1] = 500.0 * (fx - fy)
    out[..., 2] = 200.0 * (fy - fz)
    return out


def lab_to_linear_rgb(lab: Lab) -> np.ndarray:
    """
    CIE Lab (D65) to linear RGB, NOT clipped.
    Values outside [0, 1] mean the colour is outside the sRGB gamut.
    """
    lab_f = lab.astype(np.float32, copy=False)
    fy = (lab_f[..., 0] + 16.0) / 116.0
    fx = fy + lab_f[..., 1] / 500.0
    fz = fy - lab_f[..., 2] / 200.0
    f = np.stack([fx, fy, fz], axis=-1)

    f3 = f * f * f
    t = np.where(f3 > _E, f3, (116.0 * f - 16.0) / _K)
    xyz = t * _WHITE
    return (xyz @ _XYZ_TO_RGB.T).astype(np.float32, copy=False)


# Lab <-> LCh


def lab_to_lch(lab: Lab) -> Lch:
    """Lab[...,3] to LCh[...,3]; hue in [0, 360). Any leading shape."""
    lab_f = lab.astype(np.float32, copy=False)
    out = np.empty(lab_f.shape, dtype=np.float32)
    out[..., 0] = lab_f[..., 0]
    out[..., 1] = np.hypot(lab_f[..., 1], lab_f[..., 2])
    h = np.mod(np.degrees(np.arctan2(lab_f[..., 2], lab_f[..., 1])), 360.0)
    # float32 rounding can land a tiny negative angle on 360 exactly
    out[..., 2] = np.where(h >= 360.0, 0.0, h)
    return out


def lch_to_lab(lch: Lch) -> Lab:
    """LCh[...,3] to Lab[...,3]. Hue in degrees, any range."""
    orig_shape = lch.shape
    flat = lch.reshape(-1, 3).astype(np.float32, copy=False)
    rad = np.radians(flat[:, 2])
    a = flat[:, 1] * np.cos(rad)
    b = flat[:, 1] * np.sin(rad)
    lab = np.stack([flat[:, 0], a, b], axis=1).astype(np.float32, copy=False)
    return lab.reshape(orig_shape)


# Gamut handling


def _inside_gamut(linear: np.ndarray, epsilon: float) -> np.ndarray:
    """Row mask: True where every channel sits in [-eps, 1+eps]."""
    return np.all((linear >= -epsilon) & (linear <= 1.0 + epsilon), axis=-1)


def lch_to_rgb_u8(
    lch: Lch,
    steps: int = GAMUT_SEARCH_STEPS,
    epsilon: float = GAMUT_EPSILON,
) -> np.ndarray:
    """
    LCh[N,3] to sRGB uint8[N,3].

    Rows outside sRGB keep L and h while chroma is bisected down until they
    fit. Whatever error is left is clamped per channel.
    """
    rows = lch.reshape(-1, 3).astype(np.float32, copy=False)
    linear = lab_to_linear_rgb(lch_to_lab(rows))

    outside = ~_inside_gamut(linear, epsilon)
    if np.any(outside):
        stuck = rows[outside]
        lo = np.zeros(stuck.shape[0], dtype=np.float32)
        hi = np.ones(stuck.shape[0], dtype=np.float32)
        for _ in range(max(0, int(steps))):
            mid = 0.5 * (lo + hi)
            trial = stuck.copy()
            trial[:, 1] *= mid
            fits = _inside_gamut(lab_to_linear_rgb(lch_to_lab(trial)), epsilon)
            lo = np.where(fits, mid, lo)
            hi = np.where(fits, hi, mid)
        fitted = stuck.copy()
        fitted[:, 1] *= lo
        linear[outside] = lab_to_linear_rgb(lch_to_lab(fitted))

    srgb = linear_to_rgb(linear)
    return np.clip(np.rint(srgb * 255.0), 0, 255).astype(np.uint8)


# Hue descriptors


@lru_cache(maxsize=None)
def wheel_hue_to_lch_hue(hue_deg: float) -> float:
    """
    Perceptual (LCh) hue of the fully saturated sRGB colour at a colour-wheel hue.
    0 (pure red) maps to roughly 40 degrees.
    """
    r, g, b = colorsys.hsv_to_rgb((float(hue_deg) % 360.0) / 360.0, 1.0, 1.0)
    rgb = np.array([[r, g, b]], dtype=np.float32)
    return float(lab_to_lch(rgb_to_lab(rgb))[0, 2])


__all__ = [
    "rgb_to_linear",
    "linear_to_rgb",
    "rgb_to_lab",
    "lab_to_linear_rgb",
    "lab_to_lch",
    "lch_to_lab",
    "lch_to_rgb_u8",
    "wheel_hue_to_lch_hue",
]
