# amethyst_colorizer/palette_data.py
from __future__ import annotations

"""
Dye palette definitions.

Exports:
  PALETTE: list of (dye, hue, saturation, name) rows
  DYE_PALETTE: read-only mapping DyeColor -> HueDescriptor
  DYE_NAMES: read-only mapping DyeColor -> display name
  DYE_ORDER: tuple[DyeColor, ...]
  lookup(dye) -> HueDescriptor
"""

from types import MappingProxyType
from typing import List, Mapping, Tuple

from .core_types import DyeColor, HueDescriptor

# Hues are colour-wheel degrees. Neutrals carry a faint tint taken from the
# in-game dye swatches (white leans cyan, light gray leans warm, gray and
# black lean blue) so the four grey variants stay distinguishable.
PALETTE: List[Tuple[DyeColor, float, float, str]] = [
    (DyeColor.WHITE, 170.0, 0.03, "White"),
    (DyeColor.LIGHT_GRAY, 60.0, 0.05, "Light Gray"),
    (DyeColor.GRAY, 195.0, 0.10, "Gray"),
    (DyeColor.BLACK, 240.0, 0.12, "Black"),
    (DyeColor.BROWN, 25.0, 0.45, "Brown"),
    (DyeColor.RED, 0.0, 0.80, "Red"),
    (DyeColor.ORANGE, 30.0, 0.90, "Orange"),
    (DyeColor.YELLOW, 55.0, 0.90, "Yellow"),
    (DyeColor.LIME, 90.0, 0.85, "Lime"),
    (DyeColor.GREEN, 110.0, 0.60, "Green"),
    (DyeColor.CYAN, 185.0, 0.70, "Cyan"),
    (DyeColor.LIGHT_BLUE, 200.0, 0.80, "Light Blue"),
    (DyeColor.BLUE, 235.0, 0.90, "Blue"),
    (DyeColor.PURPLE, 275.0, 0.85, "Purple"),
    (DyeColor.MAGENTA, 300.0, 0.85, "Magenta"),
    (DyeColor.PINK, 330.0, 0.60, "Pink"),
]


def build_palette(
    rows: List[Tuple[DyeColor, float, float, str]] = PALETTE,
) -> Tuple[Mapping[DyeColor, HueDescriptor], Mapping[DyeColor, str]]:
    """
    Convert palette rows into read-only lookups:
      descriptors: DyeColor -> HueDescriptor, in DyeColor order
      names: DyeColor -> display name

    Raises ValueError unless every dye appears exactly once.
    """
    seen = [dye for dye, _h, _s, _n in rows]
    missing = [d.value for d in DyeColor if d not in seen]
    if missing or len(seen) != len(set(seen)):
        raise ValueError(f"palette must list every dye once (missing: {missing})")

    by_dye = {dye: (hue, sat, name) for dye, hue, sat, name in rows}
    descriptors = {d: HueDescriptor(by_dye[d][0], by_dye[d][1]) for d in DyeColor}
    names = {d: by_dye[d][2] for d in DyeColor}
    return MappingProxyType(descriptors), MappingProxyType(names)


DYE_PALETTE, DYE_NAMES = build_palette()
DYE_ORDER: Tuple[DyeColor, ...] = tuple(DyeColor)


def lookup(dye: DyeColor) -> HueDescriptor:
    """Descriptor for a dye. Total over DyeColor; KeyError for anything else."""
    return DYE_PALETTE[dye]


__all__ = [
    "PALETTE",
    "DYE_PALETTE",
    "DYE_NAMES",
    "DYE_ORDER",
    "build_palette",
    "lookup",
]
