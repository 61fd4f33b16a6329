"""Tests for amethyst_colorizer.archive — reproducible ZIP packaging."""

import io
import json
import random
import zipfile

import pytest

from amethyst_colorizer.archive import build_archive, build_manifest, entry_name, read_manifest
from amethyst_colorizer.batch import run_all
from amethyst_colorizer.core_types import DyeColor, ManifestEntry, RecoloredOutput
from amethyst_colorizer.errors import ArchiveError, CompressionFailure, InvalidInput
from amethyst_colorizer.image_io import decode_image
from amethyst_colorizer.palette_data import DYE_ORDER


def _fake(dye: DyeColor) -> RecoloredOutput:
    return RecoloredOutput(dye=dye, data=f'png-{dye.value}'.encode() * 8, width=2, height=2)


@pytest.fixture
def outputs() -> list:
    return [_fake(d) for d in DYE_ORDER]


class TestEntryName:
    def test_names(self):
        assert entry_name(DyeColor.RED) == 'red_amethyst.png'
        assert entry_name(DyeColor.LIGHT_BLUE) == 'light_blue_amethyst.png'


class TestBuild:
    def test_layout(self, outputs):
        with zipfile.ZipFile(io.BytesIO(build_archive(outputs))) as zf:
            names = zf.namelist()
            assert names == [entry_name(d) for d in DYE_ORDER] + ['manifest.json']
            assert zf.read('red_amethyst.png') == _fake(DyeColor.RED).data
            assert zf.testzip() is None
            for info in zf.infolist():
                assert info.compress_type == zipfile.ZIP_DEFLATED
                assert info.date_time == (1980, 1, 1, 0, 0, 0)

    def test_manifest(self, outputs):
        archive = build_archive(outputs)
        entries = read_manifest(archive)
        assert entries == [ManifestEntry(d, entry_name(d)) for d in DYE_ORDER]
        with zipfile.ZipFile(io.BytesIO(archive)) as zf:
            doc = json.loads(zf.read('manifest.json'))
        assert doc['version'] == 1
        assert doc['entries'][0] == {'dye': 'white', 'file': 'white_amethyst.png'}

    def test_build_manifest_order(self, outputs):
        shuffled = list(reversed(outputs))
        assert [e.dye for e in build_manifest(shuffled)] == list(DYE_ORDER)

    def test_reproducible(self, outputs):
        assert build_archive(outputs) == build_archive(list(outputs))

    def test_input_order_irrelevant(self, outputs):
        shuffled = list(outputs)
        random.Random(3).shuffle(shuffled)
        assert build_archive(shuffled) == build_archive(outputs)

    def test_accepts_tuple(self, outputs):
        assert build_archive(tuple(outputs)) == build_archive(outputs)


class TestInvalidInput:
    def test_fifteen(self, outputs):
        with pytest.raises(InvalidInput, match='expected 16'):
            build_archive(outputs[:15])

    def test_seventeen(self, outputs):
        with pytest.raises(InvalidInput):
            build_archive(outputs + [_fake(DyeColor.RED)])

    def test_duplicate(self, outputs):
        broken = list(outputs)
        broken[0] = _fake(DyeColor.RED)
        with pytest.raises(InvalidInput, match='duplicate'):
            build_archive(broken)

    def test_empty(self):
        with pytest.raises(InvalidInput):
            build_archive([])

    def test_wrong_type(self, outputs):
        broken = list(outputs)
        broken[3] = b'raw bytes'
        with pytest.raises(InvalidInput):
            build_archive(broken)

    def test_is_archive_error(self, outputs):
        with pytest.raises(ArchiveError):
            build_archive(outputs[:1])


class TestCompressionFailure:
    def test_writer_error_wrapped(self, outputs, monkeypatch):
        def boom(self, *args, **kwargs):
            raise OSError('disk on fire')

        monkeypatch.setattr(zipfile.ZipFile, 'writestr', boom)
        with pytest.raises(CompressionFailure, match='disk on fire'):
            build_archive(outputs)


class TestReadManifest:
    def test_not_a_zip(self):
        with pytest.raises(ArchiveError):
            read_manifest(b'nope')

    def test_missing_manifest(self):
        buf = io.BytesIO()
        with zipfile.ZipFile(buf, 'w') as zf:
            zf.writestr('red_amethyst.png', b'x')
        with pytest.raises(ArchiveError):
            read_manifest(buf.getvalue())


class TestEndToEnd:
    def test_real_variants(self, amethyst_texture):
        archive = build_archive(run_all(amethyst_texture).unwrap())
        with zipfile.ZipFile(io.BytesIO(archive)) as zf:
            for entry in read_manifest(archive):
                decoded = decode_image(zf.read(entry.file_name))
                assert decoded.shape == amethyst_texture.shape

    def test_real_archive_reproducible(self, amethyst_texture):
        a = build_archive(run_all(amethyst_texture).unwrap())
        b = build_archive(run_all(amethyst_texture).unwrap())
        assert a == b
