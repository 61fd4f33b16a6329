"""
amethyst-colorizer
Generate the sixteen dye variants of an amethyst texture.

Usage:
  python -m amethyst_colorizer PATH [-t DYE] [-o DIR] [-f zip|png]
                               [--archive-name NAME] [--workers N] [--debug]
  python -m amethyst_colorizer --list

Output:
  zip : DIR/amethyst_variants.zip with <dye>_amethyst.png x16 and manifest.json
  png : DIR/<dye>_amethyst.png x16
  -t  : only DIR/<dye>_amethyst.png for that dye

Exit codes:
  0 ok, 1 decode/encode/batch/archive failure, 2 bad input or output path.
"""

from __future__ import annotations

import argparse
import os
import sys
import time
from pathlib import Path
from typing import List, Optional, Sequence

from amethyst_colorizer.archive import build_archive, entry_name, read_manifest
from amethyst_colorizer.batch import run_all
from amethyst_colorizer.constants import DEFAULT_ARCHIVE_NAME
from amethyst_colorizer.core_types import (
    DyeColor,
    RecoloredOutput,
    parse_dye,
    rgb_to_hex,
)
from amethyst_colorizer.errors import ColorizerError
from amethyst_colorizer.image_io import is_image_file, load_image_rgba
from amethyst_colorizer.palette_data import DYE_NAMES, DYE_ORDER, lookup
from amethyst_colorizer.recolour_job import run_job
from amethyst_colorizer.transform import transform_pixel
from amethyst_colorizer.utils import (
    default_workers,
    format_byte_size,
    format_seconds_compact,
    print_banner,
    print_config_line,
    log,
    debug_log,
    warn,
    error,
)

# Mid grey used for the --list swatches.
_SWATCH_SOURCE = (128, 128, 128, 255)


def _dye_arg(value: str) -> DyeColor:
    try:
        return parse_dye(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def parse_cli_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """
    Parse CLI arguments.

    Returns:
      argparse.Namespace with:
        path: source image (optional only with --list)
        color: DyeColor or None for all sixteen
        output: output directory
        format: "zip" | "png"
        archive_name: file name of the archive in zip mode
        workers: thread pool size
        list: print the palette and exit
        debug: bool for timings and per-dye details
    """
    parser = argparse.ArgumentParser(
        prog="amethyst-colorizer",
        description="Convert an amethyst texture into its sixteen dyed variants.",
    )
    parser.add_argument("path", type=Path, nargs="?", help="Source image (PNG)")
    parser.add_argument(
        "-t",
        "--target-color",
        dest="color",
        type=_dye_arg,
        default=None,
        help="Only generate this dye. Omit to generate all of them.",
    )
    parser.add_argument(
        "-o",
        "--output-dir",
        dest="output",
        type=Path,
        default=Path("out"),
        metavar="DIR",
        help="Directory to write into (created if missing)",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=["zip", "png"],
        default="zip",
        help="One archive (zip) or loose files (png)",
    )
    parser.add_argument(
        "--archive-name",
        default=DEFAULT_ARCHIVE_NAME,
        help="Archive file name in zip mode",
    )
    parser.add_argument(
        "--workers", type=int, default=default_workers(), help="Thread pool size"
    )
    parser.add_argument("--list", action="store_true", help="Print the dye palette")
    parser.add_argument("--debug", action="store_true", help="Verbose details")
    args = parser.parse_args(argv)
    if not args.list and args.path is None:
        parser.error("the following arguments are required: path")
    if args.workers < 1:
        parser.error("--workers must be at least 1")
    return args


def _print_palette() -> None:
    print_banner("Dye palette")
    for dye in DYE_ORDER:
        desc = lookup(dye)
        swatch = rgb_to_hex(transform_pixel(_SWATCH_SOURCE, desc)[:3])
        log(
            f"  {dye.value:<11} {DYE_NAMES[dye]:<11} hue={desc.hue:>5.1f}  "
            f"saturation={desc.saturation:.2f}  swatch={swatch}"
        )


def _prepare_output_dir(output: Path) -> None:
    if output.exists():
        if not output.is_dir():
            error(f"output path is not a directory: {output}")
            sys.exit(2)
    else:
        output.mkdir(parents=True, exist_ok=True)


def _write_pngs(
    outputs: Sequence[RecoloredOutput], output: Path, debug: bool
) -> List[Path]:
    written: List[Path] = []
    for out in outputs:
        dst = output / entry_name(out.dye)
        dst.write_bytes(out.data)
        written.append(dst)
        if debug:
            size = format_byte_size(len(out.data))
            debug_log(f"{dst.name}: {out.width}x{out.height}, {size}")
    return written


def _run(args: argparse.Namespace) -> None:
    t_start = time.perf_counter()
    source = load_image_rgba(args.path)
    height, width = source.shape[:2]
    t_loaded = time.perf_counter()
    if args.debug:
        debug_log(f"loaded {args.path.name}: {width}x{height}")

    if args.color is not None:
        out = run_job(source, args.color)
        _write_pngs([out], args.output, args.debug)
        log(f"Wrote {entry_name(out.dye)} | size={width}x{height}")
        log(f"Total time {format_seconds_compact(time.perf_counter() - t_start)}")
        return

    result = run_all(source, workers=args.workers)
    t_batch = time.perf_counter()
    if not result.ok:
        for dye in result.failed_dyes:
            error(f"{dye.value}: {result.failures[dye]}")
    outputs = result.unwrap()

    if args.format == "png":
        written = _write_pngs(outputs, args.output, args.debug)
        log(
            f"Wrote {len(written)} variants to {args.output} "
            f"| size={width}x{height}"
        )
    else:
        archive = build_archive(outputs)
        dst = args.output / args.archive_name
        dst.write_bytes(archive)
        log(
            f"Wrote {dst.name} | variants={len(read_manifest(archive))} "
            f"| size={width}x{height} | {format_byte_size(len(archive))}"
        )
    t_done = time.perf_counter()

    if args.debug:
        debug_log(
            f"load={format_seconds_compact(t_loaded - t_start)}, "
            f"batch={format_seconds_compact(t_batch - t_loaded)}, "
            f"write={format_seconds_compact(t_done - t_batch)}"
        )
    log(f"Total time {format_seconds_compact(t_done - t_start)}")


# Entry point


def main(argv: Optional[Sequence[str]] = None) -> None:
    """CLI entry point."""
    args = parse_cli_args(argv)

    if args.list:
        _print_palette()
        return

    print_config_line(
        "run",
        [
            ("CPU cores", os.cpu_count() or 1),
            ("Workers", args.workers),
            ("Format", "png" if args.color is not None else args.format),
            ("Dyes", 1 if args.color is not None else len(DYE_ORDER)),
        ],
        debug=False,
    )

    if not args.path.exists():
        error(f"not found: {args.path}")
        sys.exit(2)
    if not is_image_file(args.path):
        error(f"not a readable image: {args.path}")
        sys.exit(1)
    if args.archive_name != DEFAULT_ARCHIVE_NAME and (
        args.color is not None or args.format == "png"
    ):
        warn("--archive-name only applies to zip output; ignored")
    _prepare_output_dir(args.output)

    try:
        _run(args)
    except ColorizerError as exc:
        error(str(exc))
        sys.exit(1)


if __name__ == "__main__":
    main()
