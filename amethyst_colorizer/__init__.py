# amethyst_colorizer/__init__.py
"""
amethyst_colorizer package.

Purpose:
  Turn the amethyst block texture into its sixteen dye variants and pack them
  into one ZIP. See amethyst_colorizer/__main__.py for the CLI.

Public API:
  recolour_rgba  : recolour one RGBA image for one HueDescriptor.
  transform_pixel: single-pixel form of recolour_rgba.
  run_job        : recolour + PNG-encode one dye variant.
  run_all        : all sixteen variants on a thread pool -> BatchResult.
  build_archive  : ZIP bytes with the variants and manifest.json.
  lookup         : DyeColor -> HueDescriptor.
  colour_convert : sRGB / Lab / LCh transforms.
  core_types     : DyeColor, HueDescriptor, RecoloredOutput, BatchResult.
  errors         : DecodeError, EncodeError, PartialFailure, InvalidInput, ...

Quick start:
  from amethyst_colorizer import run_all, build_archive
  from amethyst_colorizer.image_io import load_image_rgba
  archive = build_archive(run_all(load_image_rgba(path)).unwrap())
"""

__version__ = "0.1.0"

# Re-export namespaces for convenience.
from . import colour_convert
from . import core_types
from . import errors
from . import palette_data

from .archive import build_archive, read_manifest  # noqa: E402,F401
from .batch import run_all  # noqa: E402,F401
from .core_types import (  # noqa: E402,F401
    BatchResult,
    DyeColor,
    HueDescriptor,
    ManifestEntry,
    RecoloredOutput,
)
from .palette_data import DYE_ORDER, DYE_PALETTE, lookup  # noqa: E402,F401
from .recolour_job import run_job  # noqa: E402,F401
from .transform import recolour_rgba, transform_pixel  # noqa: E402,F401

__all__ = [
    "__version__",
    "colour_convert",
    "core_types",
    "errors",
    "palette_data",
    "build_archive",
    "read_manifest",
    "run_all",
    "run_job",
    "recolour_rgba",
    "transform_pixel",
    "lookup",
    "DYE_ORDER",
    "DYE_PALETTE",
    "BatchResult",
    "DyeColor",
    "HueDescriptor",
    "ManifestEntry",
    "RecoloredOutput",
]
