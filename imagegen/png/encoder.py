from __future__ import annotations

from typing import Sequence, Union

from .chunks import IDAT, IEND, IHDR, PNG_SIGNATURE, header_payload, make_chunk
from .scanlines import build_scanlines
from .types import Color, InvalidDimensions, Raster, check_dimensions
from .zlib_stream import wrap_stored


def encode_raster(raster: Raster) -> bytes:
    """Encode a Raster into a complete PNG file."""
    raster.validate()
    header = header_payload(raster.width, raster.height)
    scanlines = build_scanlines(raster.width, raster.height, raster.color)
    image_data = wrap_stored(scanlines)
    return b"".join(
        [
            PNG_SIGNATURE,
            make_chunk(IHDR, header),
            make_chunk(IDAT, image_data),
            make_chunk(IEND, b""),
        ]
    )


def encode(width: int, height: int, color: Union[Color, Sequence[int]]) -> bytes:
    """Encode a single-color truecolor PNG of the given size."""
    check_dimensions(width, height)
    return encode_raster(Raster(width, height, Color.coerce(color)))


__all__ = ["InvalidDimensions", "encode", "encode_raster"]
