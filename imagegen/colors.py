from __future__ import annotations

import re
from typing import Sequence, Union

from .png.types import Color

CONTRAST_DARK = "dark"
CONTRAST_LIGHT = "light"

_COLOR_RE = re.compile(r"#([0-9A-Fa-f]{3}|[0-9A-Fa-f]{6})")
_HEX_RE = re.compile(r"#?([0-9A-Fa-f]{3}|[0-9A-Fa-f]{6})")


def is_valid_color(text: str) -> bool:
    """Return True for '#rgb' or '#rrggbb' notation."""
    return isinstance(text, str) and bool(_COLOR_RE.fullmatch(text))


def hex_to_rgb(text: str) -> Color:
    """Parse 3- or 6-digit hex notation, with or without a leading '#'."""
    match = _HEX_RE.fullmatch(text) if isinstance(text, str) else None
    if not match:
        raise ValueError(f"Invalid color: {text}. Please use a valid hex code like #FF0000 or #f00.")
    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return Color(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def luminance(color: Union[Color, Sequence[int]]) -> float:
    color = Color.coerce(color)
    return (0.299 * color.r + 0.587 * color.g + 0.114 * color.b) / 255


def contrast_of(color: Union[Color, Sequence[int]]) -> str:
    """Return the overlay tone that stays readable on top of color."""
    if luminance(color) > 0.5:
        return CONTRAST_DARK
    return CONTRAST_LIGHT
