from __future__ import annotations

from typing import Sequence, Union

from .types import Color, Raster

FILTER_NONE = 0x00


def build_scanlines(width: int, height: int, color: Union[Color, Sequence[int]]) -> bytes:
    """Expand a flat color into filtered PNG scanlines (filter type None)."""
    raster = Raster(width, height, Color.coerce(color))
    row = bytes([FILTER_NONE]) + raster.color.to_bytes() * width
    row_size = raster.row_size
    buffer = bytearray(raster.scanline_size)
    for offset in range(0, len(buffer), row_size):
        buffer[offset : offset + row_size] = row
    return bytes(buffer)
