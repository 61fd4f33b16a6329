# amethyst_colorizer/archive.py
from __future__ import annotations

"""
ZIP packaging of a complete variant set.

Exports:
  entry_name(dye) -> str
  build_manifest(outputs) -> list[ManifestEntry]
  build_archive(outputs) -> bytes
  read_manifest(archive) -> list[ManifestEntry]

Layout:
  <dye>_amethyst.png  x16, DyeColor order
  manifest.json       {"version": 1, "entries": [{"dye": ..., "file": ...}, ...]}

Every entry has a fixed timestamp, mode and creator system, so identical
outputs always produce byte-identical archives.
"""

import io
import json
import zipfile
import zlib
from typing import Dict, List, Sequence

from .constants import (
    ARCHIVE_COMPRESS_LEVEL,
    ARCHIVE_DATE_TIME,
    ARCHIVE_FILE_MODE,
    MANIFEST_NAME,
    MANIFEST_VERSION,
    OUTPUT_FILE_SUFFIX,
)
from .core_types import DyeColor, ManifestEntry, RecoloredOutput
from .errors import ArchiveError, CompressionFailure, InvalidInput
from .palette_data import DYE_ORDER

_UNIX = 3


def entry_name(dye: DyeColor) -> str:
    """Archive file name for a dye, e.g. 'light_blue_amethyst.png'."""
    return f"{DyeColor(dye).value}{OUTPUT_FILE_SUFFIX}"


def _validate(outputs: Sequence[RecoloredOutput]) -> Dict[DyeColor, RecoloredOutput]:
    """Index outputs by dye; exactly one per DyeColor or InvalidInput."""
    if len(outputs) != len(DYE_ORDER):
        raise InvalidInput(
            f"expected {len(DYE_ORDER)} outputs, got {len(outputs)}"
        )
    by_dye: Dict[DyeColor, RecoloredOutput] = {}
    for out in outputs:
        if not isinstance(out, RecoloredOutput):
            raise InvalidInput(f"not a RecoloredOutput: {out!r}")
        if out.dye in by_dye:
            raise InvalidInput(f"duplicate output for dye {out.dye.value!r}")
        by_dye[out.dye] = out
    missing = [d.value for d in DYE_ORDER if d not in by_dye]
    if missing:
        raise InvalidInput(f"missing outputs for: {', '.join(missing)}")
    return by_dye


def build_manifest(outputs: Sequence[RecoloredOutput]) -> List[ManifestEntry]:
    """Manifest rows for a complete output set, in DyeColor order."""
    _validate(outputs)
    return [ManifestEntry(dye=d, file_name=entry_name(d)) for d in DYE_ORDER]


def _manifest_bytes(entries: Sequence[ManifestEntry]) -> bytes:
    doc = {
        "version": MANIFEST_VERSION,
        "entries": [{"dye": e.dye.value, "file": e.file_name} for e in entries],
    }
    return (json.dumps(doc, indent=2, sort_keys=True) + "\n").encode("utf-8")


def _zip_info(name: str) -> zipfile.ZipInfo:
    info = zipfile.ZipInfo(name, date_time=ARCHIVE_DATE_TIME)
    info.compress_type = zipfile.ZIP_DEFLATED
    info.create_system = _UNIX
    info.external_attr = (0o100000 | ARCHIVE_FILE_MODE) << 16
    return info


def build_archive(outputs: Sequence[RecoloredOutput]) -> bytes:
    """
    Pack sixteen variants plus the manifest into ZIP bytes.

    Raises:
      InvalidInput: wrong count, duplicate dyes, or a dye missing
      CompressionFailure: the ZIP writer failed
    """
    outputs = list(outputs)
    by_dye = _validate(outputs)
    manifest = build_manifest(outputs)

    buf = io.BytesIO()
    try:
        with zipfile.ZipFile(buf, "w", zipfile.ZIP_DEFLATED) as zf:
            for entry in manifest:
                zf.writestr(
                    _zip_info(entry.file_name),
                    by_dye[entry.dye].data,
                    compresslevel=ARCHIVE_COMPRESS_LEVEL,
                )
            zf.writestr(
                _zip_info(MANIFEST_NAME),
                _manifest_bytes(manifest),
                compresslevel=ARCHIVE_COMPRESS_LEVEL,
            )
    except (OSError, ValueError, RuntimeError, zlib.error) as exc:
        raise CompressionFailure(f"could not write archive: {exc}") from exc
    return buf.getvalue()


def read_manifest(archive: bytes) -> List[ManifestEntry]:
    """Read the manifest back out of archive bytes."""
    try:
        with zipfile.ZipFile(io.BytesIO(archive)) as zf:
            doc = json.loads(zf.read(MANIFEST_NAME).decode("utf-8"))
    except (zipfile.BadZipFile, KeyError, ValueError) as exc:
        raise ArchiveError(f"unreadable manifest: {exc}") from exc
    return [
        ManifestEntry(dye=DyeColor(row["dye"]), file_name=str(row["file"]))
        for row in doc.get("entries", [])
    ]


__all__ = [
    "entry_name",
    "build_manifest",
    "build_archive",
    "read_manifest",
]
