from __future__ import annotations

from .checksums import crc32

PNG_SIGNATURE = bytes([0x89, 0x50, 0x4E, 0x47, 0x0D, 0x0A, 0x1A, 0x0A])

IHDR = b"IHDR"
IDAT = b"IDAT"
IEND = b"IEND"

BIT_DEPTH = 8
COLOR_TYPE_TRUECOLOR = 2
COMPRESSION_DEFLATE = 0
FILTER_ADAPTIVE = 0
INTERLACE_NONE = 0


def make_chunk(tag: bytes, payload: bytes) -> bytes:
    """Wrap a payload in the PNG chunk format (length, tag, data, CRC)."""
    if len(tag) != 4 or not bytes(tag).isalpha():
        raise ValueError(f"Chunk tag must be four ASCII letters, got {tag!r}")
    length = len(payload)
    checksum = crc32(payload, crc32(tag))
    return length.to_bytes(4, "big") + bytes(tag) + bytes(payload) + checksum.to_bytes(4, "big")


def header_payload(width: int, height: int) -> bytes:
    """Build the 13-byte IHDR payload for an 8-bit truecolor image."""
    return (
        width.to_bytes(4, "big")
        + height.to_bytes(4, "big")
        + bytes(
            [
                BIT_DEPTH,
                COLOR_TYPE_TRUECOLOR,
                COMPRESSION_DEFLATE,
                FILTER_ADAPTIVE,
                INTERLACE_NONE,
            ]
        )
    )
