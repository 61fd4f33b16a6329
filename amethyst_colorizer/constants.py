# amethyst_colorizer/constants.py
"""
Tunables shared across the project.

- Colour engine: grey tint, gamut search
- Encoding: PNG compression
- Archive layout: entry names, fixed timestamps
"""
from __future__ import annotations

from typing import Tuple

# =========================
# Colour engine
# =========================

# Source chroma (CIE LCh units) below which a pixel counts as grey. Greys have
# no hue of their own; they take NEUTRAL_TINT_CHROMA from the target dye before
# saturation scaling. Every other pixel keeps its own chroma.
ACHROMATIC_CHROMA: float = 1.0
NEUTRAL_TINT_CHROMA: float = 24.0

# Bisection steps when pulling an out-of-gamut colour back towards grey.
GAMUT_SEARCH_STEPS: int = 16

# Linear-RGB slack when deciding whether a colour is inside sRGB.
GAMUT_EPSILON: float = 1e-3

# =========================
# Encoding
# =========================

PNG_COMPRESS_LEVEL: int = 9

# =========================
# Archive layout
# =========================

OUTPUT_FILE_SUFFIX: str = "_amethyst.png"
MANIFEST_NAME: str = "manifest.json"
MANIFEST_VERSION: int = 1
DEFAULT_ARCHIVE_NAME: str = "amethyst_variants.zip"

# Earliest timestamp a ZIP entry can carry. Fixed so archives are reproducible.
ARCHIVE_DATE_TIME: Tuple[int, int, int, int, int, int] = (1980, 1, 1, 0, 0, 0)
ARCHIVE_FILE_MODE: int = 0o644
ARCHIVE_COMPRESS_LEVEL: int = 9

__all__ = [
    "ACHROMATIC_CHROMA",
    "NEUTRAL_TINT_CHROMA",
    "GAMUT_SEARCH_STEPS",
    "GAMUT_EPSILON",
    "PNG_COMPRESS_LEVEL",
    "OUTPUT_FILE_SUFFIX",
    "MANIFEST_NAME",
    "MANIFEST_VERSION",
    "DEFAULT_ARCHIVE_NAME",
    "ARCHIVE_DATE_TIME",
    "ARCHIVE_FILE_MODE",
    "ARCHIVE_COMPRESS_LEVEL",
]
