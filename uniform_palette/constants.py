# uniform_palette/constants.py
"""
Tunables for the uniform palette generator.

- Gamma curve (GAMMA_*)
- Cube geometry and grey compensation
- Chroma blend weights (COMPONENT_*)
- Output naming and listing layout
"""
from __future__ import annotations

from typing import Tuple

VERSION_BANNER = "Uniform palette generator"

# =========================
# Gamma curve
# =========================
GAMMA_STEPS: int = 256
GAMMA_DIV: float = 2.0
GAMMA_RED: float = (0.299 - 0.114) / GAMMA_DIV
GAMMA_GREEN: float = (0.587 - 0.114) / GAMMA_DIV
GAMMA_BLUE: float = (0.1141 - 0.114) / GAMMA_DIV

# =========================
# RGB 8x8x4 cube
# =========================
PALETTE_SIZE: int = 256
RED_LEVELS: int = 8
GREEN_LEVELS: int = 8
BLUE_LEVELS: int = 4

# 2^3 / 2^2 = 2 -> 7.0 / 2
BLUE_GREY_DIVISOR: float = 3.5

# =========================
# Chroma blend
# =========================
COMPONENT_INTERPOLATION: float = 0.86
COMPONENT_RED_BRIGHTNESS: float = 0.299
COMPONENT_GREEN_BRIGHTNESS: float = 0.587
COMPONENT_BLUE_BRIGHTNESS: float = 0.114
LUMA_WEIGHTS: Tuple[float, float, float] = (
    COMPONENT_RED_BRIGHTNESS,
    COMPONENT_GREEN_BRIGHTNESS,
    COMPONENT_BLUE_BRIGHTNESS,
)

BYTE_MAX: float = 255.0

# =========================
# Output
# =========================
ACT_SUFFIX = ".act"
HEADER_SUFFIX = ".h"
DEFAULT_ARRAY_NAME = "uniform_palette"
TRIPLETS_PER_LINE: int = 4


__all__ = [
    "VERSION_BANNER",
    "GAMMA_STEPS",
    "GAMMA_DIV",
    "GAMMA_RED",
    "GAMMA_GREEN",
    "GAMMA_BLUE",
    "PALETTE_SIZE",
    "RED_LEVELS",
    "GREEN_LEVELS",
    "BLUE_LEVELS",
    "BLUE_GREY_DIVISOR",
    "COMPONENT_INTERPOLATION",
    "COMPONENT_RED_BRIGHTNESS",
    "COMPONENT_GREEN_BRIGHTNESS",
    "COMPONENT_BLUE_BRIGHTNESS",
    "LUMA_WEIGHTS",
    "BYTE_MAX",
    "ACT_SUFFIX",
    "HEADER_SUFFIX",
    "DEFAULT_ARRAY_NAME",
    "TRIPLETS_PER_LINE",
]
