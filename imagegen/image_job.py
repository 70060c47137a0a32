from __future__ import annotations

import base64
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from .colors import contrast_of, hex_to_rgb, is_valid_color
from .png import MAX_DIMENSION, MIN_DIMENSION, Color, encode
from .verify import verify_png

OUTPUT_DIR_ENV_VAR = "IMAGE_GEN_OUTPUT_DIR"

logger = logging.getLogger(__name__)


@dataclass
class ImageSettings:
    make_dirs: bool = True
    overwrite: bool = True
    verify: bool = False
    output_dir: Optional[str] = None


@dataclass(frozen=True)
class ImageResult:
    path: Path
    width: int
    height: int
    color: str
    size: int
    contrast: str

    def message(self) -> str:
        return (
            f"Successfully generated and saved test image: {self.width}x{self.height} pixels "
            f"with color {self.color} to {self.path}"
        )


def resolve_output_dir(settings: ImageSettings) -> Path:
    if settings.output_dir:
        return Path(settings.output_dir)
    return Path(os.environ.get(OUTPUT_DIR_ENV_VAR) or os.getcwd())


def to_base64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


class ImageJobBuilder:
    def __init__(self, settings: Optional[ImageSettings] = None) -> None:
        self.settings = settings or ImageSettings()

    def build(self, width: int, height: int, color: str) -> bytes:
        self.validate_arguments(width, height, color)
        return self._build(width, height, hex_to_rgb(color))

    def _build(self, width: int, height: int, rgb: Color) -> bytes:
        logger.debug(
            "Generating image: %dx%d, color: %s, contrast: %s",
            width,
            height,
            rgb.to_hex(),
            contrast_of(rgb),
        )
        data = encode(width, height, rgb)
        logger.debug("Encoded %d bytes", len(data))
        return data

    def save(
        self,
        width: int,
        height: int,
        color: str,
        filepath: Union[str, "os.PathLike[str]"],
    ) -> ImageResult:
        self.validate_arguments(width, height, color)
        rgb = hex_to_rgb(color)
        data = self._build(width, height, rgb)
        path = self._resolve_path(filepath)
        mode = "wb" if self.settings.overwrite else "xb"
        try:
            if self.settings.make_dirs:
                path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise RuntimeError(f"Failed to generate or save image: {exc}") from exc
        try:
            with open(path, mode) as handle:
                handle.write(data)
        except FileExistsError as exc:
            raise FileExistsError(f"Refusing to overwrite existing file: {path}") from exc
        except OSError as exc:
            raise RuntimeError(f"Failed to generate or save image: {exc}") from exc
        logger.info("Image saved to %s, buffer size: %d", path, len(data))
        if self.settings.verify:
            verify_png(path, width, height, rgb)
        return ImageResult(
            path=path,
            width=width,
            height=height,
            color=color,
            size=len(data),
            contrast=contrast_of(rgb),
        )

    def _resolve_path(self, filepath: Union[str, "os.PathLike[str]"]) -> Path:
        path = Path(filepath).expanduser()
        if not path.is_absolute():
            path = resolve_output_dir(self.settings) / path
        return path.resolve()

    @staticmethod
    def validate_arguments(width: object, height: object, color: object) -> None:
        if not (
            _is_int(width)
            and _is_int(height)
            and MIN_DIMENSION <= width <= MAX_DIMENSION
            and MIN_DIMENSION <= height <= MAX_DIMENSION
        ):
            raise ValueError(
                f"Invalid arguments: width and height must be integers between {MIN_DIMENSION} "
                f"and {MAX_DIMENSION}, got {width!r}x{height!r}"
            )
        if not isinstance(color, str) or not is_valid_color(color):
            raise ValueError(f"Invalid color: {color}. Please use a valid hex code like #FF0000 or #f00.")


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


__all__ = ["ImageJobBuilder", "ImageResult", "ImageSettings", "resolve_output_dir", "to_base64"]
