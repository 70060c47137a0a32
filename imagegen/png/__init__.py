from .checksums import adler32, crc32
from .chunks import IDAT, IEND, IHDR, PNG_SIGNATURE, header_payload, make_chunk
from .encoder import encode, encode_raster
from .scanlines import build_scanlines
from .types import MAX_DIMENSION, MIN_DIMENSION, Color, InvalidDimensions, Raster
from .zlib_stream import MAX_STORED_BLOCK, ZLIB_HEADER, stored_block, wrap_stored

__all__ = [
    "adler32",
    "build_scanlines",
    "Color",
    "crc32",
    "encode",
    "encode_raster",
    "header_payload",
    "IDAT",
    "IEND",
    "IHDR",
    "InvalidDimensions",
    "make_chunk",
    "MAX_DIMENSION",
    "MAX_STORED_BLOCK",
    "MIN_DIMENSION",
    "PNG_SIGNATURE",
    "Raster",
    "stored_block",
    "wrap_stored",
    "ZLIB_HEADER",
]
