# uniform_palette/cube.py
from __future__ import annotations

"""
RGB 8x8x4 cube quantizer.

Index bits: [7:5] red, [4:2] green, [1:0] blue. Red and green spread over
0..255 in 7 steps; blue is divided by 3.5 instead of 3 so that r == 2*b lands
on the same value and the cube carries a handful of true greys.
"""

from typing import Tuple

import numpy as np

from .constants import BLUE_GREY_DIVISOR, BYTE_MAX, PALETTE_SIZE
from .core_types import F32Palette, cube_coords


def quantize_index(
    index: int, grey_divisor: float = BLUE_GREY_DIVISOR
) -> Tuple[float, float, float]:
    """Raw float triplet for a single index, before any blending."""
    r, g, b = cube_coords(index)
    return (
        (r * BYTE_MAX) / 7.0,
        (g * BYTE_MAX) / 7.0,
        (b * BYTE_MAX) / grey_divisor,
    )


def quantize_cube(grey_divisor: float = BLUE_GREY_DIVISOR) -> F32Palette:
    """
    Raw float32 [256,3] palette for every cube index.

    Values are computed in float64 and stored in float32, the precision the
    rest of the pipeline compares and truncates at.
    """
    idx = np.arange(PALETTE_SIZE, dtype=np.int64)
    r = (idx >> 5) & 0x7
    g = (idx >> 2) & 0x7
    b = idx & 0x3
    raw = np.empty((PALETTE_SIZE, 3), dtype=np.float64)
    raw[:, 0] = (r * BYTE_MAX) / 7.0
    raw[:, 1] = (g * BYTE_MAX) / 7.0
    raw[:, 2] = (b * BYTE_MAX) / grey_divisor
    return raw.astype(np.float32)


__all__ = ["cube_coords", "quantize_index", "quantize_cube"]
