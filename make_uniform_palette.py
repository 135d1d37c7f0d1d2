#!/usr/bin/env python3
"""
make_uniform_palette.py
Generate the uniform 256-colour palette and save it as <base>.act and <base>.h.

Usage:
  python make_uniform_palette.py BASE [--quiet] [--pure-white] [--array-name NAME]

Pipeline:
  gamma : three per-channel gamma tables (256 steps).
  cube  : RGB 8x8x4 cube, blue divided by 3.5 for true greys.
  blend : non-grey entries softened toward a luma-weighted core, then gamma mapped.
  final : entry 255 pulled halfway to white (or onto it with --pure-white).

Output:
  <base>.act : 768-byte raw palette (R,G,B per entry).
  <base>.h   : C array listing of the same bytes.

Exit status is 0 on success and 1 on bad arguments, unwritable outputs or a
blend overflow.
"""

from __future__ import annotations

import argparse
import re
import sys
import time
from typing import NoReturn, Optional, Sequence

from uniform_palette import __version__
from uniform_palette.constants import DEFAULT_ARRAY_NAME, PALETTE_SIZE, VERSION_BANNER
from uniform_palette.core_types import (
    GammaTables,
    PaletteConfig,
    PaletteError,
    PaletteFileError,
)
from uniform_palette.gamma import build_gamma_tables
from uniform_palette.palette_data import build_palette
from uniform_palette.export import output_paths, save_palette
from uniform_palette.utils import (
    # formatting
    format_seconds_compact,
    key_value_pairs_to_string,
    # pretty logging
    print_banner,
    print_config_line,
    log,
    warn,
    error,
    enable_line_buffered_stdout,
)

_C_IDENTIFIER = re.compile(r"[A-Za-z_][A-Za-z0-9_]*\Z")

# CLI args & small helpers


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that exits with status 1 on usage errors."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def _c_identifier(text: str) -> str:
    if not _C_IDENTIFIER.match(text):
        raise argparse.ArgumentTypeError(f"not a C identifier: {text!r}")
    return text


def parse_cli_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """
    Parse CLI arguments.

    Returns:
      argparse.Namespace with:
        base: output base name (".act" and ".h" are appended)
        quiet: bool, suppress per-entry listings
        pure_white: bool, force entry 255 to (255, 255, 255)
        array_name: C identifier used in the .h listing
    """
    parser = _ArgumentParser(
        prog="make_uniform_palette",
        description="Generate the uniform 256-colour palette as .act and .h files.",
    )
    parser.add_argument("base", help="Output base name, e.g. 'out/uniform'")
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Do not list gamma tables and palette entries.",
    )
    parser.add_argument(
        "--pure-white",
        action="store_true",
        help="Make entry 255 pure white instead of a half step toward it.",
    )
    parser.add_argument(
        "--array-name",
        type=_c_identifier,
        default=DEFAULT_ARRAY_NAME,
        help=f"C array name in the .h listing (default: {DEFAULT_ARRAY_NAME}).",
    )
    return parser.parse_args(argv)


def _log_gamma_tables(gamma: GammaTables) -> None:
    for i, (r, g, b) in gamma.rows():
        log(f"gamma #{i:<3d} {r:3d} {g:3d} {b:3d}")


# Entry point


def main(argv: Optional[Sequence[str]] = None) -> None:
    """
    CLI entry point.

    Builds the palette completely before any file is opened, so a blend
    overflow never leaves output behind.
    """
    enable_line_buffered_stdout()
    log(f"{VERSION_BANNER}, v{__version__}\n")
    args = parse_cli_args(argv)

    config = PaletteConfig(
        verbose=not args.quiet,
        pure_white=args.pure_white,
        array_name=args.array_name,
    )
    print_config_line(
        "run",
        [
            ("Verbose", config.verbose),
            ("Pure white", config.pure_white),
            ("Array", config.array_name),
        ],
        debug=False,
    )

    t0 = time.perf_counter()
    gamma = build_gamma_tables()
    if config.verbose:
        print_banner("gamma")
        _log_gamma_tables(gamma)

    try:
        values = build_palette(gamma, config)
    except PaletteError as exc:
        error(str(exc))
        sys.exit(1)

    for path in output_paths(args.base):
        if path.exists():
            warn(f"overwriting {path}")

    if config.verbose:
        print_banner("palette")
    try:
        act_path, h_path = save_palette(args.base, values, config)
    except (PaletteError, PaletteFileError) as exc:
        error(str(exc))
        sys.exit(1)

    log(
        key_value_pairs_to_string(
            [
                ("Entries", PALETTE_SIZE),
                ("ACT", str(act_path)),
                ("Header", str(h_path)),
                ("Time", format_seconds_compact(time.perf_counter() - t0)),
            ]
        )
    )
    log("Done!")


if __name__ == "__main__":
    main()
