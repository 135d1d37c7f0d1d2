# uniform_palette/blend.py
from __future__ import annotations

"""
Chroma blend and gamma remap.

Exports:
  grey_mask(raw) -> bool[256]
  chroma_blend(raw, config) -> (blended float32 [N,3], luma float32 [N])
  remap_palette(raw, gamma, config) -> float32 [N,3] of gamma bytes

Non-grey entries pull each channel toward the luma-normalised product of the
other two:

  c' = c * k + (o1 * o2 / luma) * (1 - k)

then index the channel's gamma table with the truncated result. Greys skip the
blend and index all three tables with their shared raw value.
"""

from typing import Optional, Tuple

import numpy as np

from .constants import BYTE_MAX
from .core_types import (
    ChromaOverflowError,
    F32Palette,
    GammaTables,
    PaletteConfig,
)


def grey_mask(raw: F32Palette) -> np.ndarray:
    """True where R == G == B."""
    return (raw[:, 0] == raw[:, 1]) & (raw[:, 1] == raw[:, 2])


def chroma_blend(
    raw: F32Palette, config: Optional[PaletteConfig] = None
) -> Tuple[F32Palette, np.ndarray]:
    """
    Blend every row, grey or not. Returns (blended, luma), both float32.

    Luma of exactly zero is replaced by 1.0.
    """
    cfg = config or PaletteConfig()
    r1, g1, b1 = raw[:, 0], raw[:, 1], raw[:, 2]
    luma_r, luma_g, luma_b = cfg.luma

    luma = (
        r1.astype(np.float64) * luma_r
        + g1.astype(np.float64) * luma_g
        + b1.astype(np.float64) * luma_b
    ).astype(np.float32)
    luma = np.where(luma == 0.0, np.float32(1.0), luma).astype(np.float32)

    keep = cfg.interpolation
    mix = 1.0 - keep
    # products and the luma divide run in float32, the weights in float64
    blended = np.stack(
        [
            r1.astype(np.float64) * keep + (g1 * b1 / luma).astype(np.float64) * mix,
            g1.astype(np.float64) * keep + (r1 * b1 / luma).astype(np.float64) * mix,
            b1.astype(np.float64) * keep + (r1 * g1 / luma).astype(np.float64) * mix,
        ],
        axis=1,
    ).astype(np.float32)
    return blended, luma


def remap_palette(
    raw: F32Palette, gamma: GammaTables, config: Optional[PaletteConfig] = None
) -> F32Palette:
    """
    Blend non-grey rows, check them, and map every row through the gamma tables.

    Raises ChromaOverflowError for the lowest index whose blend exceeds 255.
    """
    grey = grey_mask(raw)
    blended, luma = chroma_blend(raw, config)

    overflow = ~grey & np.any(blended > BYTE_MAX, axis=1)
    if np.any(overflow):
        i = int(np.flatnonzero(overflow)[0])
        r, g, b = raw[i].tolist()
        br, bg, bb = blended[i].tolist()
        raise ChromaOverflowError(i, (r, g, b), (br, bg, bb), float(luma[i]))

    src = np.where(grey[:, None], raw[:, :1], blended)
    idx = src.astype(np.int64)
    table = gamma.as_array()
    out = np.stack(
        [table[idx[:, 0], 0], table[idx[:, 1], 1], table[idx[:, 2], 2]], axis=1
    )
    return out.astype(np.float32)


__all__ = ["grey_mask", "chroma_blend", "remap_palette"]
