import pytest

from imagegen.png.scanlines import build_scanlines
from imagegen.png.types import Color, Raster


class TestBuildScanlines:
    def test_two_by_two_red(self):
        data = build_scanlines(2, 2, Color(255, 0, 0))
        assert data == bytes([0, 255, 0, 0, 255, 0, 0, 0, 255, 0, 0, 255, 0, 0])
        assert len(data) == 14

    def test_accepts_tuple(self):
        assert build_scanlines(1, 1, (1, 2, 3)) == bytes([0, 1, 2, 3])

    @pytest.mark.parametrize("width,height", [(1, 1), (3, 7), (100, 2), (17, 33)])
    def test_size_and_framing(self, width, height):
        color = Color(10, 20, 30)
        data = build_scanlines(width, height, color)
        row = 1 + width * 3
        assert len(data) == height * row
        for y in range(height):
            line = data[y * row : (y + 1) * row]
            assert line[0] == 0
            assert line[1:] == bytes([10, 20, 30]) * width

    @pytest.mark.parametrize("width,height", [(1, 1), (2, 2), (640, 3), (4096, 1)])
    def test_length_matches_raster_size(self, width, height):
        raster = Raster(width, height, Color(1, 2, 3))
        data = build_scanlines(width, height, raster.color)
        assert len(data) == raster.scanline_size
        assert raster.row_size == 1 + width * 3

    def test_rejects_bad_channel(self):
        with pytest.raises(ValueError):
            build_scanlines(1, 1, (256, 0, 0))
