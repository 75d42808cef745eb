"""Table-lookup dithering (Ordered/Bayer and Horizontal-Line).

AIDEV-NOTE: No error accumulation, one vectorised pass. A pixel is
foreground when its value exceeds the tiled table value shifted by
(threshold - 128) * 0.5. Cells holding 255 are always gaps.
"""

import numpy as np

from .pattern_table import BAYER_4X4, GAP, PatternTable, horizontal_line_table


def threshold_offset(threshold: float) -> float:
    """Shift applied to every table value; 128 leaves the table unchanged."""
    return (threshold - 128) * 0.5


def table_dither(
    grayscale,
    width: int,
    height: int,
    threshold: float,
    table,
) -> np.ndarray:
    """Dither by comparing each pixel with a tiled threshold table.

    Args:
        grayscale: Row-major intensities (0-255), length width * height
        width: Image width in pixels
        height: Image height in pixels
        threshold: Global cutoff, converted to an offset on the table
        table: Grid of thresholds, tiled by its own row and column count

    Returns:
        Boolean mask (True = foreground), length width * height
    """
    pixels = np.asarray(grayscale, dtype=np.float64).ravel()
    assert pixels.size == width * height, "buffer length must be width * height"

    table = np.asarray(table, dtype=np.float64)
    rows, cols = table.shape

    ys, xs = np.indices((height, width))
    cells = table[ys % rows, xs % cols]

    mask = pixels.reshape(height, width) > cells + threshold_offset(threshold)
    # Gap cells stay empty even when a low threshold shifts them below 255
    mask &= cells != GAP
    return mask.ravel()


def ordered(grayscale, width: int, height: int, threshold: float) -> np.ndarray:
    """Ordered dithering with the fixed 4x4 Bayer matrix."""
    return table_dither(grayscale, width, height, threshold, BAYER_4X4)


def horizontal_line(
    grayscale,
    width: int,
    height: int,
    threshold: float,
    table: "PatternTable | None" = None,
) -> np.ndarray:
    """Halftone of horizontal lines, dashes and dots.

    Reads whatever ``table`` holds at call time; the shared
    ``horizontal_line_table`` is used when none is given. A plain grid may
    be passed instead of a PatternTable.
    """
    if table is None:
        table = horizontal_line_table
    if isinstance(table, PatternTable):
        table = table.snapshot()
    return table_dither(grayscale, width, height, threshold, table)
