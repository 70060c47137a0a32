from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Union

MIN_DIMENSION = 1
MAX_DIMENSION = 4096


class InvalidDimensions(ValueError):
    """Raised when a width or height falls outside the supported range."""

    def __init__(self, width: object, height: object) -> None:
        super().__init__(
            f"Invalid dimensions {width}x{height}: width and height must be integers "
            f"between {MIN_DIMENSION} and {MAX_DIMENSION}"
        )
        self.width = width
        self.height = height


def _is_dimension(value: object) -> bool:
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return MIN_DIMENSION <= value <= MAX_DIMENSION


def check_dimensions(width: object, height: object) -> None:
    if not (_is_dimension(width) and _is_dimension(height)):
        raise InvalidDimensions(width, height)


@dataclass(frozen=True)
class Color:
    """8-bit RGB triplet."""

    r: int
    g: int
    b: int

    def validate(self) -> None:
        for name, value in (("r", self.r), ("g", self.g), ("b", self.b)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"Color channel {name} must be an integer, got {value!r}")
            if not 0 <= value <= 255:
                raise ValueError(f"Color channel {name} must be between 0 and 255, got {value}")

    def to_bytes(self) -> bytes:
        self.validate()
        return bytes([self.r, self.g, self.b])

    def to_hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    @classmethod
    def coerce(cls, value: Union["Color", Sequence[int]]) -> "Color":
        if isinstance(value, Color):
            return value
        if len(value) != 3:
            raise ValueError(f"Color needs exactly three channels, got {len(value)}")
        color = cls(*value)
        color.validate()
        return color


@dataclass(frozen=True)
class Raster:
    """Single-color image description consumed by the PNG encoder."""

    width: int
    height: int
    color: Color

    def validate(self) -> None:
        """Validate dimensions and color for encoding."""
        check_dimensions(self.width, self.height)
        self.color.validate()

    @property
    def row_size(self) -> int:
        """Return bytes per scanline, filter byte included."""
        return 1 + self.width * 3

    @property
    def scanline_size(self) -> int:
        return self.height * self.row_size
