# amethyst_colorizer/recolour_job.py
"""
Single-dye job: recolour the source for one dye and encode it to PNG.
"""
from __future__ import annotations

from .core_types import DyeColor, RecoloredOutput, U8Image, assert_u8_image_rgba
from .image_io import encode_png
from .palette_data import lookup
from .transform import recolour_rgba


def run_job(source: U8Image, dye: DyeColor) -> RecoloredOutput:
    """
    Recolour `source` for `dye` and return the encoded variant.

    The source array is only read. Raises EncodeError if PNG encoding fails.
    """
    src = assert_u8_image_rgba(source)
    recoloured = recolour_rgba(src, lookup(dye))
    height, width = recoloured.shape[:2]
    return RecoloredOutput(
        dye=DyeColor(dye),
        data=encode_png(recoloured),
        width=int(width),
        height=int(height),
    )


__all__ = ["run_job"]
