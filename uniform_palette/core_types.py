# uniform_palette/core_types.py
from __future__ import annotations

"""
Core type aliases, small value objects, run configuration and errors.
"""

from dataclasses import dataclass
from typing import Iterator, Tuple

import numpy as np
from numpy.typing import NDArray

from .constants import (
    BLUE_GREY_DIVISOR,
    COMPONENT_INTERPOLATION,
    DEFAULT_ARRAY_NAME,
    LUMA_WEIGHTS,
)

# Basic aliases

RGBTuple = Tuple[int, int, int]
FloatRGB = Tuple[float, float, float]
CubeCoord = Tuple[int, int, int]  # (r3, g3, b2)

U8Table = NDArray[np.uint8]  # (256,)
U8Palette = NDArray[np.uint8]  # (256, 3)
F32Palette = NDArray[np.float32]  # (256, 3)

# Value objects


@dataclass(frozen=True)
class GammaTables:
    """Per-channel gamma lookup tables, one uint8 row of 256 entries each."""

    red: U8Table
    green: U8Table
    blue: U8Table

    def __len__(self) -> int:
        return int(self.red.shape[0])

    def as_array(self) -> U8Palette:
        """Stack into a uint8 [N,3] array, column order R, G, B."""
        return np.stack([self.red, self.green, self.blue], axis=1)

    def rows(self) -> Iterator[Tuple[int, RGBTuple]]:
        """Yield (index, (r, g, b)) for every step."""
        for i, (r, g, b) in enumerate(self.as_array().tolist()):
            yield i, (r, g, b)


@dataclass(frozen=True)
class PaletteEntry:
    """One palette slot: float components plus their truncated bytes."""

    index: int
    rgb: FloatRGB
    rgb_u8: RGBTuple

    @property
    def cube(self) -> CubeCoord:
        """Bitwise (r3, g3, b2) reading of the index."""
        return cube_coords(self.index)


@dataclass(frozen=True)
class PaletteConfig:
    """Run options. Defaults reproduce the stock palette."""

    verbose: bool = True
    pure_white: bool = False
    interpolation: float = COMPONENT_INTERPOLATION
    luma: FloatRGB = LUMA_WEIGHTS
    grey_divisor: float = BLUE_GREY_DIVISOR
    array_name: str = DEFAULT_ARRAY_NAME


# Small helpers


def cube_coords(index: int) -> CubeCoord:
    """Split a palette index into (r3, g3, b2)."""
    return (index >> 5) & 0x7, (index >> 2) & 0x7, index & 0x3


# Errors


class PaletteError(ValueError):
    """Palette computation produced values that cannot be stored as bytes."""


class ChromaOverflowError(PaletteError):
    """A blended channel went above 255 for a non-grey cube entry."""

    def __init__(
        self, index: int, raw: FloatRGB, blended: FloatRGB, luma: float
    ) -> None:
        self.index = index
        self.raw = raw
        self.blended = blended
        self.luma = luma
        super().__init__(
            "color overflow at #{} r,g,b = {:f} {:f} {:f} ({:f} {:f} {:f}, {:f})".format(
                index, *raw, *blended, luma
            )
        )


class PaletteRangeError(PaletteError):
    """A finalized component lies outside 0..255."""

    def __init__(self, index: int, rgb: FloatRGB) -> None:
        self.index = index
        self.rgb = rgb
        super().__init__(
            "component out of byte range at #{}: {:f} {:f} {:f}".format(index, *rgb)
        )


class PaletteFileError(OSError):
    """An output file could not be opened for writing."""

    def __init__(self, path: object) -> None:
        self.path = path
        super().__init__(f"can't open file '{path}' for writing")


__all__ = [
    "RGBTuple",
    "FloatRGB",
    "CubeCoord",
    "U8Table",
    "U8Palette",
    "F32Palette",
    "GammaTables",
    "PaletteEntry",
    "PaletteConfig",
    "cube_coords",
    "PaletteError",
    "ChromaOverflowError",
    "PaletteRangeError",
    "PaletteFileError",
]
