"""Checksum engine tests, checked against zlib as the reference."""

import os
import zlib

import pytest

from imagegen.png.checksums import CRC32_TABLE, adler32, crc32

SAMPLES = [
    b"",
    b"\x00",
    b"a",
    b"abc",
    b"123456789",
    b"IEND",
    bytes(range(256)),
    b"\xff" * 1000,
    os.urandom(4096),
    os.urandom(70000),
]


class TestCrc32:
    def test_empty_is_zero(self):
        assert crc32(b"") == 0x00000000

    def test_check_value(self):
        # Standard CRC-32 check value for the ASCII digits 1..9.
        assert crc32(b"123456789") == 0xCBF43926

    def test_iend_chunk_crc(self):
        assert crc32(b"IEND") == 0xAE426082

    @pytest.mark.parametrize("data", SAMPLES)
    def test_matches_zlib(self, data):
        assert crc32(data) == zlib.crc32(data)

    def test_continuation(self):
        head, tail = b"IHDR", b"\x00\x00\x00\x02\x00\x00\x00\x02\x08\x02\x00\x00\x00"
        assert crc32(tail, crc32(head)) == crc32(head + tail)

    def test_accepts_bytearray_and_memoryview(self):
        data = b"placeholder"
        assert crc32(bytearray(data)) == crc32(data)
        assert crc32(memoryview(data)) == crc32(data)

    def test_table_is_built_once(self):
        assert len(CRC32_TABLE) == 256
        assert CRC32_TABLE[1] == 0x77073096
        assert CRC32_TABLE[255] == 0x2D02EF8D


class TestAdler32:
    def test_empty_is_one(self):
        assert adler32(b"") == 0x00000001

    def test_known_value(self):
        assert adler32(b"Wikipedia") == 0x11E60398

    def test_deterministic(self):
        data = os.urandom(10000)
        assert adler32(data) == adler32(data)

    @pytest.mark.parametrize("data", SAMPLES)
    def test_matches_zlib(self, data):
        assert adler32(data) == zlib.adler32(data)

    def test_long_run_of_max_bytes(self):
        # Exercises modular reduction across several blocks.
        data = b"\xff" * 200000
        assert adler32(data) == zlib.adler32(data)

    def test_continuation(self):
        head, tail = os.urandom(6000), os.urandom(9000)
        assert adler32(tail, adler32(head)) == adler32(head + tail)
