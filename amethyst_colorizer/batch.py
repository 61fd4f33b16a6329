# amethyst_colorizer/batch.py
from __future__ import annotations

"""
Batch runner: every dye variant of one source, on a thread pool.

Exports:
  run_all(source, workers=None) -> BatchResult

Notes:
  - Jobs only read the shared source array; each owns its output.
  - Results come back in DyeColor order regardless of completion order.
  - An EncodeError marks that dye as failed; the batch then fails as a whole.
    The exception object is kept in BatchResult.failures.
    Anything else (bad input array) propagates.
"""

from concurrent.futures import Future, ThreadPoolExecutor
from typing import Dict, Iterable, List, Optional, Tuple, Union

from .core_types import (
    BatchResult,
    DyeColor,
    RecoloredOutput,
    U8Image,
    assert_u8_image_rgba,
)
from .errors import EncodeError
from .palette_data import DYE_ORDER
from .recolour_job import run_job
from .utils import default_workers


def _pool_size(workers: Optional[int], jobs: int) -> int:
    n = default_workers() if workers is None else int(workers)
    return max(1, min(n, jobs))


def run_all(
    source: U8Image,
    workers: Optional[int] = None,
    dyes: Iterable[Union[DyeColor, str]] = DYE_ORDER,
) -> BatchResult:
    """
    Run the recolour job for each dye and collect the outcome.

    Args:
      source:  uint8 [H,W,4] RGBA, shared read-only by all jobs
      workers: thread pool size; defaults to default_workers(), capped at the job count
      dyes:    which dyes to run (DyeColor or its value), all sixteen by default
    Returns:
      BatchResult with outputs in DyeColor order, or the failed dyes
    """
    src = assert_u8_image_rgba(source)
    ordered = sorted({DyeColor(d) for d in dyes}, key=lambda d: d.order)
    if not ordered:
        raise ValueError("no dyes to run")

    with ThreadPoolExecutor(max_workers=_pool_size(workers, len(ordered))) as pool:
        futures: List[Tuple[DyeColor, Future[RecoloredOutput]]] = [
            (dye, pool.submit(run_job, src, dye)) for dye in ordered
        ]

        outputs: List[RecoloredOutput] = []
        failures: Dict[DyeColor, EncodeError] = {}
        for dye, fut in futures:
            try:
                outputs.append(fut.result())
            except EncodeError as exc:
                failures[dye] = exc

    if failures:
        return BatchResult(outputs=(), failures=failures)
    return BatchResult(outputs=tuple(outputs))


__all__ = ["run_all"]
