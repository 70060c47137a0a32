from __future__ import annotations

import io
import logging
import os
from typing import Sequence, Union

from .png.types import Color

logger = logging.getLogger(__name__)


def verify_png(
    source: Union[str, "os.PathLike[str]", bytes],
    width: int,
    height: int,
    color: Union[Color, Sequence[int]],
) -> None:
    """Decode a PNG with Pillow and check its size and pixels."""
    try:
        from PIL import Image
    except Exception as exc:  # pragma: no cover
        raise RuntimeError("Pillow is required for verification. Install with: pip install Pillow") from exc
    expected = Color.coerce(color)
    handle = io.BytesIO(source) if isinstance(source, (bytes, bytearray)) else source
    try:
        with Image.open(handle) as img:
            img.load()
            size = img.size
            mode = img.mode
            colors = img.convert("RGB").getcolors(maxcolors=2)
    except Exception as exc:
        raise RuntimeError(f"PNG verification failed: {exc}") from exc
    if size != (width, height):
        raise RuntimeError(f"PNG verification failed: expected {width}x{height}, decoded {size[0]}x{size[1]}")
    if mode != "RGB":
        raise RuntimeError(f"PNG verification failed: expected RGB mode, decoded {mode}")
    if not colors or len(colors) != 1 or colors[0][1] != (expected.r, expected.g, expected.b):
        raise RuntimeError(f"PNG verification failed: pixels do not all equal {expected.to_hex()}")
    logger.debug("Verified %dx%d PNG filled with %s", width, height, expected.to_hex())
