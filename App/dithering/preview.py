"""Raster preview of a dither mask."""

import numpy as np
from PIL import Image, ImageColor


def render_preview(
    mask,
    width: int,
    height: int,
    foreground_color: str,
    background_color: str,
    scale: int = 1,
) -> Image.Image:
    """Render a mask as a two-color RGB image.

    Args:
        mask: Row-major booleans (True = foreground), length width * height
        width: Mask width in cells
        height: Mask height in cells
        foreground_color: Any color string Pillow understands
        background_color: Any color string Pillow understands
        scale: Whole-number upscale factor, nearest neighbour

    Returns:
        PIL Image in RGB mode
    """
    fg = np.array(ImageColor.getrgb(foreground_color)[:3], dtype=np.uint8)
    bg = np.array(ImageColor.getrgb(background_color)[:3], dtype=np.uint8)

    cells = np.asarray(mask, dtype=bool).reshape(height, width)
    pixels = np.where(cells[..., np.newaxis], fg, bg).astype(np.uint8)
    image = Image.fromarray(pixels)

    scale = max(1, int(round(scale)))
    if scale > 1:
        image = image.resize((width * scale, height * scale), Image.Resampling.NEAREST)
    return image
