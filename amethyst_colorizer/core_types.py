# amethyst_colorizer/core_types.py
from __future__ import annotations

"""
Core type aliases, dye identifiers, and small value objects.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping, Sequence, Tuple

import numpy as np
from numpy.typing import NDArray

from .errors import PartialFailure

# Basic aliases

RGBATuple = Tuple[int, int, int, int]

U8Image = NDArray[np.uint8]  # (H, W, 4) RGBA
Lab = NDArray[np.float32]  # (..., 3) CIE Lab
Lch = NDArray[np.float32]  # (..., 3) CIE LCh


class DyeColor(str, Enum):
    """The sixteen dyes. Declaration order is the canonical output order."""

    WHITE = "white"
    LIGHT_GRAY = "light_gray"
    GRAY = "gray"
    BLACK = "black"
    BROWN = "brown"
    RED = "red"
    ORANGE = "orange"
    YELLOW = "yellow"
    LIME = "lime"
    GREEN = "green"
    CYAN = "cyan"
    LIGHT_BLUE = "light_blue"
    BLUE = "blue"
    PURPLE = "purple"
    MAGENTA = "magenta"
    PINK = "pink"

    def __str__(self) -> str:
        return self.value

    @property
    def order(self) -> int:
        return _DYE_INDEX[self]


_DYE_INDEX = {dye: i for i, dye in enumerate(DyeColor)}


# Value objects


@dataclass(frozen=True)
class HueDescriptor:
    """
    Target colour of one dye.

    hue        : colour-wheel angle in degrees [0, 360); 0 red, 120 green, 240 blue
    saturation : chroma scale in [0, 1]; 0 gives a neutral variant
    """

    hue: float
    saturation: float

    def __post_init__(self) -> None:
        if not 0.0 <= float(self.hue) < 360.0:
            raise ValueError(f"hue must be in [0, 360), got {self.hue!r}")
        if not 0.0 <= float(self.saturation) <= 1.0:
            raise ValueError(f"saturation must be in [0, 1], got {self.saturation!r}")


@dataclass(frozen=True)
class RecoloredOutput:
    """One encoded dye variant."""

    dye: DyeColor
    data: bytes  # PNG
    width: int
    height: int


@dataclass(frozen=True)
class ManifestEntry:
    dye: DyeColor
    file_name: str


@dataclass(frozen=True)
class BatchResult:
    """
    Outcome of a batch run.

    Either every dye succeeded (outputs holds all of them in palette order and
    failures is empty) or at least one failed (outputs is empty and failures maps
    each failed dye to the exception that stopped it).
    """

    outputs: Tuple[RecoloredOutput, ...] = ()
    failures: Mapping[DyeColor, Exception] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.failures

    @property
    def failed_dyes(self) -> Tuple[DyeColor, ...]:
        return tuple(sorted(self.failures, key=lambda d: d.order))

    def unwrap(self) -> Tuple[RecoloredOutput, ...]:
        """
        Return the outputs, or raise PartialFailure naming the failed dyes.
        The first failed dye's exception becomes the __cause__.
        """
        if not self.ok:
            failed = self.failed_dyes
            raise PartialFailure(failed, self.failures) from self.failures[failed[0]]
        return self.outputs


# Small helpers


def rgb_to_hex(rgb: Sequence[int]) -> str:
    """RGB tuple to lowercase hex string '#rrggbb'."""
    return f"#{int(rgb[0]):02x}{int(rgb[1]):02x}{int(rgb[2]):02x}"


def parse_dye(name: str) -> DyeColor:
    """Parse 'light_gray', 'light-gray' or 'Light Gray' into a DyeColor."""
    key = name.strip().lower().replace("-", "_").replace(" ", "_")
    try:
        return DyeColor(key)
    except ValueError:
        choices = ", ".join(d.value for d in DyeColor)
        raise ValueError(f"unknown dye {name!r} (choose from {choices})") from None


def assert_u8_image_rgba(image: np.ndarray) -> U8Image:
    """Validate a uint8 (H,W,4) image and return it typed as U8Image."""
    if not isinstance(image, np.ndarray):
        raise TypeError("expected a numpy array")
    if image.dtype != np.uint8 or image.ndim != 3 or image.shape[-1] != 4:
        raise TypeError("expected uint8 (H,W,4) RGBA image")
    if image.shape[0] == 0 or image.shape[1] == 0:
        raise ValueError("image has no pixels")
    return image  # type: ignore[return-value]


__all__ = [
    # aliases / types
    "RGBATuple",
    "U8Image",
    "Lab",
    "Lch",
    "DyeColor",
    # value objects
    "HueDescriptor",
    "RecoloredOutput",
    "ManifestEntry",
    "BatchResult",
    # helpers
    "rgb_to_hex",
    "parse_dye",
    "assert_u8_image_rgba",
]
