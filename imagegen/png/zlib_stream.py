from __future__ import annotations

from .checksums import adler32

# CMF: deflate, 32K window. FLG: no preset dictionary, fastest level, FCHECK.
ZLIB_HEADER = bytes([0x78, 0x01])
MAX_STORED_BLOCK = 0xFFFF

BLOCK_FINAL = 0x01
BLOCK_MORE = 0x00


def stored_block(chunk: bytes, final: bool) -> bytes:
    """Wrap up to 65535 bytes in a single uncompressed deflate block."""
    length = len(chunk)
    if length > MAX_STORED_BLOCK:
        raise ValueError(f"Stored block holds at most {MAX_STORED_BLOCK} bytes, got {length}")
    header = bytes(
        [
            BLOCK_FINAL if final else BLOCK_MORE,
            length & 0xFF,
            (length >> 8) & 0xFF,
            ~length & 0xFF,
            (~length >> 8) & 0xFF,
        ]
    )
    return header + bytes(chunk)


def wrap_stored(data: bytes) -> bytes:
    """Build a zlib stream carrying data in stored blocks only."""
    view = memoryview(data).cast("B")
    total = len(view)
    out = bytearray(ZLIB_HEADER)
    if total == 0:
        out += stored_block(b"", final=True)
    for offset in range(0, total, MAX_STORED_BLOCK):
        chunk = view[offset : offset + MAX_STORED_BLOCK]
        out += stored_block(chunk, final=offset + MAX_STORED_BLOCK >= total)
    out += adler32(view).to_bytes(4, "big")
    return bytes(out)
