# amethyst_colorizer/errors.py
"""
Error hierarchy.

Library code raises these and never prints. The CLI turns them into
'[error] ...' lines and exit codes.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Mapping, Optional, Tuple

if TYPE_CHECKING:
    from .core_types import DyeColor


class ColorizerError(Exception):
    """Base class for every error raised by amethyst_colorizer."""


class DecodeError(ColorizerError):
    """Source bytes are not a readable image."""


class EncodeError(ColorizerError):
    """A recoloured image could not be serialised to PNG."""


class BatchError(ColorizerError):
    """A batch run did not produce a complete set of variants."""


class PartialFailure(BatchError):
    """
    One or more dye jobs failed. failed lists the dyes in palette order;
    reasons maps each of them to the original exception.
    """

    def __init__(
        self,
        failed: Iterable["DyeColor"],
        reasons: Optional[Mapping["DyeColor", Exception]] = None,
    ) -> None:
        self.failed: Tuple["DyeColor", ...] = tuple(failed)
        self.reasons: Mapping["DyeColor", Exception] = dict(reasons or {})
        names = ", ".join(d.value for d in self.failed)
        super().__init__(f"{len(self.failed)} dye job(s) failed: {names}")


class ArchiveError(ColorizerError):
    """Archive could not be built."""


class InvalidInput(ArchiveError):
    """Output set is incomplete, oversized, or has duplicate dyes."""


class CompressionFailure(ArchiveError):
    """The ZIP writer or zlib failed."""


__all__ = [
    "ColorizerError",
    "DecodeError",
    "EncodeError",
    "BatchError",
    "PartialFailure",
    "ArchiveError",
    "InvalidInput",
    "CompressionFailure",
]
