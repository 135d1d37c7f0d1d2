# uniform_palette/export.py
from __future__ import annotations

"""
Palette writers and readers.

Two files per run, both derived from a base name:
  <base>.act : 768 raw bytes, R,G,B per entry, no header (Photoshop ACT layout)
  <base>.h   : C array of 0x.. byte literals, four triplets per line
"""

import re
from pathlib import Path
from typing import IO, Any, Optional, Tuple, Union

import numpy as np

from .constants import (
    ACT_SUFFIX,
    DEFAULT_ARRAY_NAME,
    HEADER_SUFFIX,
    PALETTE_SIZE,
    TRIPLETS_PER_LINE,
)
from .core_types import (
    F32Palette,
    PaletteConfig,
    PaletteFileError,
    RGBTuple,
    U8Palette,
)
from .palette_data import iter_entries
from .utils import echo

PathLike = Union[str, Path]

HEADER_CLOSE = "};\n\n"
_HEX_BYTE = re.compile(r"0x([0-9a-fA-F]{2})")


def output_paths(base: PathLike) -> Tuple[Path, Path]:
    """(<base>.act, <base>.h). Suffixes are appended, never substituted."""
    return Path(f"{base}{ACT_SUFFIX}"), Path(f"{base}{HEADER_SUFFIX}")


def header_open(array_name: str = DEFAULT_ARRAY_NAME) -> str:
    return f"const unsigned char {array_name}[] =\n{{\n"


def format_triplet(index: int, rgb: RGBTuple, total: int = PALETTE_SIZE) -> str:
    """
    One listing chunk for entry `index`.

    Every triplet but the last is followed by a comma; every fourth one ends
    the line.
    """
    n = index + 1
    sep = " " if n == total else ","
    end = " " if n % TRIPLETS_PER_LINE else "\n"
    r, g, b = rgb
    return f" 0x{r:02x},0x{g:02x},0x{b:02x}{sep}{end}"


def format_header(rgb_u8: U8Palette, array_name: str = DEFAULT_ARRAY_NAME) -> str:
    """Full text of the .h listing for a uint8 [N,3] palette."""
    rows = rgb_u8.tolist()
    body = "".join(
        format_triplet(i, (r, g, b), len(rows)) for i, (r, g, b) in enumerate(rows)
    )
    return header_open(array_name) + body + HEADER_CLOSE


def parse_header(text: str) -> bytes:
    """Byte literals between the opening brace and the closing '};'."""
    start = text.index("{") + 1
    stop = text.index("};", start)
    return bytes(int(h, 16) for h in _HEX_BYTE.findall(text[start:stop]))


def read_act(path: PathLike) -> U8Palette:
    """Load a headerless 768-byte ACT file as uint8 [256,3]."""
    data = Path(path).read_bytes()
    if len(data) != PALETTE_SIZE * 3:
        raise ValueError(
            f"{path}: expected {PALETTE_SIZE * 3} bytes, got {len(data)}"
        )
    return np.frombuffer(data, dtype=np.uint8).reshape(PALETTE_SIZE, 3).copy()


def _open_for_write(path: Path, mode: str, **kwargs: Any) -> IO[Any]:
    try:
        return open(path, mode, **kwargs)
    except OSError as exc:
        raise PaletteFileError(path) from exc


def save_palette(
    base: PathLike, values: F32Palette, config: Optional[PaletteConfig] = None
) -> Tuple[Path, Path]:
    """
    Write <base>.act and <base>.h from a finalized float palette.

    Files are opened .act first; if the .h cannot be opened the .act is left
    behind. With config.verbose each listing chunk is echoed to stdout.
    """
    cfg = config or PaletteConfig()
    act_path, h_path = output_paths(base)
    total = int(values.shape[0])
    entries = list(iter_entries(values))

    with _open_for_write(act_path, "wb") as fp_act, _open_for_write(
        h_path, "w", encoding="ascii", newline="\n"
    ) as fp_h:
        fp_h.write(header_open(cfg.array_name))
        for entry in entries:
            fp_act.write(bytes(entry.rgb_u8))
            chunk = format_triplet(entry.index, entry.rgb_u8, total)
            fp_h.write(chunk)
            if cfg.verbose:
                echo(chunk)
        fp_h.write(HEADER_CLOSE)

    return act_path, h_path


__all__ = [
    "HEADER_CLOSE",
    "output_paths",
    "header_open",
    "format_triplet",
    "format_header",
    "parse_header",
    "read_act",
    "save_palette",
]
