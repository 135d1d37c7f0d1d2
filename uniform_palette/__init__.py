# uniform_palette/__init__.py
"""
uniform_palette package.

Purpose:
  Build a fixed 256-entry palette for showing hicolor/truecolor images on
  indexed-colour displays. See make_uniform_palette.py for the CLI.

Public API:
  build_gamma_tables : per-channel gamma lookup tables.
  quantize_cube      : raw RGB 8x8x4 cube with blue grey compensation.
  remap_palette      : chroma blend + gamma lookup for every entry.
  build_palette      : the whole pipeline, finalized entry 255 included.
  save_palette       : write <base>.act and <base>.h.
  core_types         : value objects, PaletteConfig and errors.
  utils              : console formatting and logging.

Quick start:
  from uniform_palette import build_gamma_tables, build_palette, save_palette
  values = build_palette(build_gamma_tables())
  save_palette("uniform", values)
"""

__version__ = "0.1.0"

# Re-export namespaces for convenience.
from . import constants
from . import core_types
from . import utils

from .core_types import (  # noqa: E402,F401
    ChromaOverflowError,
    GammaTables,
    PaletteConfig,
    PaletteEntry,
    PaletteError,
    PaletteFileError,
    PaletteRangeError,
)
from .gamma import build_gamma_tables  # noqa: E402,F401
from .cube import quantize_cube  # noqa: E402,F401
from .blend import chroma_blend, remap_palette  # noqa: E402,F401
from .palette_data import build_palette, finalize_palette  # noqa: E402,F401
from .export import format_header, parse_header, read_act, save_palette  # noqa: E402,F401

__all__ = [
    "__version__",
    "constants",
    "core_types",
    "utils",
    "ChromaOverflowError",
    "GammaTables",
    "PaletteConfig",
    "PaletteEntry",
    "PaletteError",
    "PaletteFileError",
    "PaletteRangeError",
    "build_gamma_tables",
    "quantize_cube",
    "chroma_blend",
    "remap_palette",
    "build_palette",
    "finalize_palette",
    "format_header",
    "parse_header",
    "read_act",
    "save_palette",
]
