# amethyst_colorizer/utils.py
from __future__ import annotations

"""
Shared utilities for amethyst_colorizer.

Worker sizing, time/size formatting, and tidy console logging for the CLI.
Library modules never call the logging helpers.
"""

import os
import sys
from typing import Any, Iterable, Tuple


# Workers


def default_workers() -> int:
    """Leave a few cores free for the system; returns a sensible worker count."""
    n = os.cpu_count() or 4
    reserve = 1 if n <= 6 else 2 if n <= 12 else 3 if n <= 18 else 4
    return max(1, n - reserve)


#  Time / size formatting


def format_seconds_compact(seconds: float) -> str:
    """Human-friendly seconds: '<ms>ms', '<s>s', or 'Mm Ss'."""
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f}ms"
    if seconds < 60.0:
        return f"{seconds:.3f}s"
    minutes = int(seconds // 60)
    return f"{minutes}m {seconds - 60 * minutes:.1f}s"


def format_byte_size(size: int) -> str:
    """Byte count as 'N B', 'N.N KiB' or 'N.N MiB'."""
    if size < 1024:
        return f"{size} B"
    if size < 1024 * 1024:
        return f"{size / 1024.0:.1f} KiB"
    return f"{size / (1024.0 * 1024.0):.1f} MiB"


# Pretty logging


def _display(value: Any) -> str:
    if isinstance(value, bool):
        return "on" if value else "off"
    if isinstance(value, int):
        return f"{value:,}"
    if isinstance(value, float):
        return f"{value:.3f}".rstrip("0").rstrip(".")
    return str(value)


def key_value_pairs_to_string(
    pairs: Iterable[Tuple[str, Any]], sep: str = "  ", eq: str = ": "
) -> str:
    """
    'Name: value' blocks joined by sep. Bools print as on/off, ints with
    thousands separators, floats with at most three decimals.
    """
    return sep.join(f"{name}{eq}{_display(value)}" for name, value in pairs)


def print_config_line(
    section: str, pairs: Iterable[Tuple[str, Any]], debug: bool
) -> None:
    """
    One config line such as '[run] CPU cores: 8  Workers: 6  Format: zip'.
    Goes through debug_log() when debug is set.
    """
    line = f"[{section}] {key_value_pairs_to_string(pairs)}"
    (debug_log if debug else log)(line)


def print_banner(title: str) -> None:
    print(f"\n=== {title} ===", flush=True)


def log(message: str) -> None:
    print(message, flush=True)


def debug_log(message: str) -> None:
    print(f"[debug] {message}", flush=True)


def warn(message: str) -> None:
    """Something was ignored or adjusted; the run continues."""
    print(f"[warn] {message}", flush=True)


def error(message: str) -> None:
    """To stderr. The caller decides the exit code."""
    print(f"[error] {message}", file=sys.stderr, flush=True)


__all__ = [
    "default_workers",
    "format_seconds_compact",
    "format_byte_size",
    "key_value_pairs_to_string",
    "print_config_line",
    "print_banner",
    "log",
    "debug_log",
    "warn",
    "error",
]
