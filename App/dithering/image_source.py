"""Grayscale source: decode, resize and convert images for the dither engine.

AIDEV-NOTE: This is the only place that touches image files. Everything
downstream works on a flat luminance buffer.
"""

import logging
import math
from pathlib import Path

import numpy as np
from PIL import Image

from models import MAX_DIMENSION, MIN_DIMENSION, GrayscaleImage

logger = logging.getLogger(__name__)

# ITU-R 601 luma weights
LUMA_WEIGHTS = (0.299, 0.587, 0.114)


class SourceUnavailableError(ValueError):
    """The image could not be opened or decoded."""


def load_image(file_path: "str | Path") -> Image.Image:
    """Load and validate an image file.

    Args:
        file_path: Path to image file (PNG, JPG, etc.)

    Returns:
        PIL Image in RGB mode

    Raises:
        SourceUnavailableError: If file cannot be loaded or is invalid
    """
    try:
        with Image.open(file_path) as source:
            source.load()
            image = source.copy()
    except (OSError, Image.DecompressionBombError) as e:
        raise SourceUnavailableError(f"Failed to load image: {e}") from e

    # AIDEV-NOTE: Transparent pixels are composited on white, as a browser
    # canvas would show them
    if image.mode in ("RGBA", "LA") or "transparency" in image.info:
        rgba = image.convert("RGBA")
        background = Image.new("RGBA", rgba.size, (255, 255, 255, 255))
        image = Image.alpha_composite(background, rgba)

    return image.convert("RGB")


def _round_half_up(value: float) -> int:
    """Round .5 up, unlike the built-in round() which rounds to even."""
    return math.floor(value + 0.5)


def target_size(
    width: int,
    height: int,
    scale: float,
    max_dimension: int = MAX_DIMENSION,
    min_dimension: int = MIN_DIMENSION,
) -> "tuple[int, int]":
    """Size of the dither grid for an image of the given size.

    Each dithered pixel covers ``scale`` source pixels, the result is
    shrunk to fit ``max_dimension`` keeping the aspect ratio, and each side
    is at least ``min_dimension``.
    """
    # A side can round to 0 for thin images; keep it at 1 while fitting
    new_width = max(_round_half_up(width / scale), 1)
    new_height = max(_round_half_up(height / scale), 1)

    if new_width > max_dimension or new_height > max_dimension:
        ratio = min(max_dimension / new_width, max_dimension / new_height)
        new_width = _round_half_up(new_width * ratio)
        new_height = _round_half_up(new_height * ratio)

    return max(new_width, min_dimension), max(new_height, min_dimension)


def to_grayscale(image: Image.Image) -> np.ndarray:
    """Flat row-major luminance buffer (float64, 0-255) of an RGB image."""
    rgb = np.asarray(image.convert("RGB"), dtype=np.float64)
    r_weight, g_weight, b_weight = LUMA_WEIGHTS
    luma = r_weight * rgb[..., 0] + g_weight * rgb[..., 1] + b_weight * rgb[..., 2]
    return luma.ravel()


def prepare_image(
    image: Image.Image,
    scale: float = 1.0,
    max_dimension: int = MAX_DIMENSION,
    min_dimension: int = MIN_DIMENSION,
) -> GrayscaleImage:
    """Resize an image to the dither grid and convert it to grayscale."""
    orig_width, orig_height = image.size
    width, height = target_size(
        orig_width, orig_height, scale, max_dimension, min_dimension
    )

    if (width, height) != image.size:
        image = image.resize((width, height), Image.Resampling.LANCZOS)
    logger.debug(
        "Resized %dx%d source to %dx%d grid", orig_width, orig_height, width, height
    )

    return GrayscaleImage(
        pixels=to_grayscale(image),
        width=width,
        height=height,
        original_width=orig_width,
        original_height=orig_height,
    )


def load_grayscale(
    file_path: "str | Path",
    scale: float = 1.0,
    max_dimension: int = MAX_DIMENSION,
    min_dimension: int = MIN_DIMENSION,
) -> GrayscaleImage:
    """Load an image file straight into a grayscale buffer.

    Raises:
        SourceUnavailableError: If file cannot be loaded or is invalid
    """
    image = load_image(file_path)
    return prepare_image(image, scale, max_dimension, min_dimension)
