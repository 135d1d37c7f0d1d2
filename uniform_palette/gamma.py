# uniform_palette/gamma.py
from __future__ import annotations

"""
Per-channel gamma tables.

Exports:
  gamma_exponents() -> (red, green, blue) power-law exponents
  build_gamma_tables(steps=256) -> GammaTables

Each channel uses exponent 1 - (luma_c - luma_b) / 2, so green is lifted most
and blue is left almost linear. Table values are truncated, not rounded.
"""

import math
from typing import List, Tuple

import numpy as np

from .constants import BYTE_MAX, GAMMA_BLUE, GAMMA_GREEN, GAMMA_RED, GAMMA_STEPS
from .core_types import GammaTables, U8Table


def gamma_exponents() -> Tuple[float, float, float]:
    """Power-law exponents for R, G, B."""
    return 1.0 - GAMMA_RED, 1.0 - GAMMA_GREEN, 1.0 - GAMMA_BLUE


def gamma_input(i: int, steps: int = GAMMA_STEPS) -> float:
    """
    Normalised intensity for table index i.

    The index is stretched by 256/(steps-1) before dividing by 255, so the
    last entries sit slightly above 1.0. Kept as is: the published palette
    depends on it.
    """
    return ((i * 256.0) / (steps - 1)) / 255.0


def _channel_table(exponent: float, steps: int) -> U8Table:
    values: List[int] = [
        int(BYTE_MAX * math.pow(gamma_input(i, steps), exponent)) for i in range(steps)
    ]
    return np.array(values, dtype=np.uint8)


def build_gamma_tables(steps: int = GAMMA_STEPS) -> GammaTables:
    """Build the three uint8 lookup tables."""
    exp_r, exp_g, exp_b = gamma_exponents()
    return GammaTables(
        red=_channel_table(exp_r, steps),
        green=_channel_table(exp_g, steps),
        blue=_channel_table(exp_b, steps),
    )


__all__ = ["gamma_exponents", "gamma_input", "build_gamma_tables"]
