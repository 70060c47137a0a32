from __future__ import annotations

from itertools import accumulate
from typing import List

CRC32_POLYNOMIAL = 0xEDB88320
ADLER_MOD = 65521
# Block size after which zlib reduces its running sums.
ADLER_NMAX = 5552


def build_crc32_table() -> List[int]:
    table = []
    for value in range(256):
        crc = value
        for _ in range(8):
            if crc & 1:
                crc = (crc >> 1) ^ CRC32_POLYNOMIAL
            else:
                crc >>= 1
        table.append(crc)
    return table


CRC32_TABLE = build_crc32_table()


def crc32(data: bytes, crc: int = 0) -> int:
    """Return the CRC-32 of data, optionally continuing from a previous CRC."""
    table = CRC32_TABLE
    crc ^= 0xFFFFFFFF
    for value in data:
        crc = table[(crc ^ value) & 0xFF] ^ (crc >> 8)
    return crc ^ 0xFFFFFFFF


def adler32(data: bytes, value: int = 1) -> int:
    """Return the Adler-32 of data, optionally continuing from a previous value."""
    a = value & 0xFFFF
    b = (value >> 16) & 0xFFFF
    view = memoryview(data).cast("B")
    for start in range(0, len(view), ADLER_NMAX):
        block = view[start : start + ADLER_NMAX]
        # b gains every intermediate value of a; the sums are reduced once per block.
        b += sum(accumulate(block, initial=a)) - a
        a += sum(block)
        a %= ADLER_MOD
        b %= ADLER_MOD
    return (b << 16) | a
