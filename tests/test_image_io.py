"""Tests for amethyst_colorizer.image_io — PNG decode / encode collaborators."""

import io

import numpy as np
import pytest
from PIL import Image

from amethyst_colorizer.errors import DecodeError
from amethyst_colorizer.image_io import (
    decode_image,
    encode_png,
    is_image_file,
    load_image_rgba,
    save_png_rgba,
)


class TestDecode:
    def test_roundtrip(self, amethyst_texture):
        np.testing.assert_array_equal(decode_image(encode_png(amethyst_texture)), amethyst_texture)

    def test_garbage(self):
        with pytest.raises(DecodeError):
            decode_image(b'definitely not a png')

    def test_empty(self):
        with pytest.raises(DecodeError):
            decode_image(b'')

    def test_truncated(self, amethyst_png):
        with pytest.raises(DecodeError):
            decode_image(amethyst_png[: len(amethyst_png) // 2])

    def test_rgb_source_gets_opaque_alpha(self):
        buf = io.BytesIO()
        Image.new('RGB', (3, 2), (10, 20, 30)).save(buf, format='PNG')
        arr = decode_image(buf.getvalue())
        assert arr.shape == (2, 3, 4)
        assert np.all(arr[..., 3] == 255)
        assert tuple(arr[0, 0, :3]) == (10, 20, 30)

    def test_palette_source(self):
        buf = io.BytesIO()
        Image.new('P', (4, 4), 3).save(buf, format='PNG')
        assert decode_image(buf.getvalue()).shape == (4, 4, 4)


class TestFiles:
    def test_load_missing(self, tmp_path):
        with pytest.raises(DecodeError):
            load_image_rgba(tmp_path / 'nope.png')

    def test_save_forces_png_suffix(self, tmp_path, amethyst_texture):
        dst = save_png_rgba(tmp_path / 'variant.bin', amethyst_texture)
        assert dst.suffix == '.png'
        np.testing.assert_array_equal(load_image_rgba(dst), amethyst_texture)

    def test_is_image_file(self, tmp_path, amethyst_png):
        good = tmp_path / 'block.png'
        good.write_bytes(amethyst_png)
        bad = tmp_path / 'notes.png'
        bad.write_bytes(b'plain text')
        cut = tmp_path / 'cut.png'
        cut.write_bytes(amethyst_png[: len(amethyst_png) // 2])
        assert is_image_file(good)
        assert not is_image_file(bad)
        assert not is_image_file(cut)
        assert not is_image_file(tmp_path / 'missing.png')


class TestEncode:
    def test_is_png(self, amethyst_texture):
        assert encode_png(amethyst_texture).startswith(b'\x89PNG\r\n\x1a\n')

    def test_deterministic(self, amethyst_texture):
        assert encode_png(amethyst_texture) == encode_png(amethyst_texture.copy())

    def test_rejects_wrong_shape(self):
        with pytest.raises(TypeError):
            encode_png(np.zeros((2, 2), dtype=np.uint8))
