"""Shared fixtures: small synthetic amethyst-like textures."""

import numpy as np
import pytest

from amethyst_colorizer.image_io import encode_png

VIOLET = (133, 98, 198, 255)
GREY = (128, 128, 128, 255)
CLEAR_BLACK = (0, 0, 0, 0)


@pytest.fixture
def scenario_image() -> np.ndarray:
    """2x2: violet, violet / transparent black, grey."""
    return np.array(
        [[VIOLET, VIOLET], [CLEAR_BLACK, GREY]],
        dtype=np.uint8,
    )


@pytest.fixture
def amethyst_texture() -> np.ndarray:
    """
    16x12 violet texture with shading, a transparent border column,
    a half-transparent pixel and a grey fleck. Deterministic.
    """
    h, w = 12, 16
    ys, xs = np.mgrid[0:h, 0:w]
    shade = ((xs * 7 + ys * 13) % 60).astype(np.int16) - 30
    base = np.array([133, 98, 198], dtype=np.int16)
    rgb = np.clip(base[None, None, :] + shade[..., None], 0, 255).astype(np.uint8)

    img = np.empty((h, w, 4), dtype=np.uint8)
    img[..., :3] = rgb
    img[..., 3] = 255
    img[:, 0] = (17, 34, 51, 0)  # transparent with stray colour data
    img[5, 5] = (90, 60, 140, 128)
    img[7, 9] = (140, 140, 140, 255)
    return img


@pytest.fixture
def amethyst_png(amethyst_texture: np.ndarray) -> bytes:
    return encode_png(amethyst_texture)
