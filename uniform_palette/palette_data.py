# uniform_palette/palette_data.py
from __future__ import annotations

"""
Palette pipeline and finalisation.

Exports:
  build_palette(gamma, config) -> F32Palette
  finalize_palette(values, pure_white=False) -> F32Palette
  palette_to_bytes(values) -> U8Palette
  iter_entries(values) -> Iterator[PaletteEntry]
"""

from typing import Iterator, Optional

import numpy as np

from .blend import remap_palette
from .constants import BYTE_MAX
from .core_types import (
    F32Palette,
    GammaTables,
    PaletteConfig,
    PaletteEntry,
    PaletteRangeError,
    U8Palette,
)
from .cube import quantize_cube


def finalize_palette(values: F32Palette, pure_white: bool = False) -> F32Palette:
    """
    Pull the last entry halfway toward white, or onto it with pure_white.

    Returns a new array; every other row is left as is.
    """
    out = values.astype(np.float32, copy=True)
    if pure_white:
        out[-1] = BYTE_MAX
    else:
        out[-1] = (out[-1].astype(np.float64) + BYTE_MAX) / 2.0
    return out


def palette_to_bytes(values: F32Palette) -> U8Palette:
    """Truncate every component to uint8. Out-of-range rows raise PaletteRangeError."""
    bad = ~np.isfinite(values) | (values < 0.0) | (values >= BYTE_MAX + 1.0)
    if np.any(bad):
        i = int(np.flatnonzero(np.any(bad, axis=1))[0])
        r, g, b = values[i].tolist()
        raise PaletteRangeError(i, (r, g, b))
    return np.trunc(values).astype(np.uint8)


def iter_entries(values: F32Palette) -> Iterator[PaletteEntry]:
    """Yield a PaletteEntry per row, in index order."""
    rgb_u8 = palette_to_bytes(values)
    for i, (row, row_u8) in enumerate(zip(values.tolist(), rgb_u8.tolist())):
        yield PaletteEntry(
            index=i,
            rgb=(row[0], row[1], row[2]),
            rgb_u8=(row_u8[0], row_u8[1], row_u8[2]),
        )


def build_palette(
    gamma: GammaTables, config: Optional[PaletteConfig] = None
) -> F32Palette:
    """Quantize the cube, blend and remap it, then finalize entry 255."""
    cfg = config or PaletteConfig()
    raw = quantize_cube(cfg.grey_divisor)
    mapped = remap_palette(raw, gamma, cfg)
    return finalize_palette(mapped, pure_white=cfg.pure_white)


__all__ = ["build_palette", "finalize_palette", "palette_to_bytes", "iter_entries"]
