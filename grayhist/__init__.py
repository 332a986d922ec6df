from .errors import (
    DegenerateImageError,
    GrayhistError,
    GrayscaleRequiredError,
    ImageLoadError,
    NoImageLoadedError,
)
from .histogram import compute_histogram, equalization_table, histogram_equalize
from .image_ops import is_grayscale, to_grayscale_avg, to_grayscale_luma
from .pixel_buffer import PixelBuffer
from .session import Command, CommandResult, ImageSession

__all__ = [
    "PixelBuffer",
    "to_grayscale_avg",
    "to_grayscale_luma",
    "is_grayscale",
    "compute_histogram",
    "equalization_table",
    "histogram_equalize",
    "ImageSession",
    "Command",
    "CommandResult",
    "GrayhistError",
    "NoImageLoadedError",
    "GrayscaleRequiredError",
    "DegenerateImageError",
    "ImageLoadError",
]
