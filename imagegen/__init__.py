from .colors import contrast_of, hex_to_rgb, is_valid_color
from .image_job import ImageJobBuilder, ImageResult, ImageSettings
from .png import Color, InvalidDimensions, Raster, encode

__version__ = "0.1.0"

__all__ = [
    "Color",
    "contrast_of",
    "encode",
    "hex_to_rgb",
    "ImageJobBuilder",
    "ImageResult",
    "ImageSettings",
    "InvalidDimensions",
    "is_valid_color",
    "Raster",
]
