"""Single entry point over all dithering strategies."""

import numpy as np

from models import DitherAlgorithm

from .error_diffusion import atkinson, floyd_steinberg, stucki
from .ordered import horizontal_line, ordered
from .pattern_table import PatternTable


def dither(
    algorithm: DitherAlgorithm,
    grayscale,
    width: int,
    height: int,
    threshold: float,
    table: "PatternTable | None" = None,
) -> np.ndarray:
    """Dither a grayscale buffer into a foreground mask.

    Args:
        algorithm: Strategy to apply
        grayscale: Row-major intensities (0-255), length width * height
        width: Image width in pixels
        height: Image height in pixels
        threshold: Global cutoff (1-255); not re-validated here
        table: Horizontal-line table, as a PatternTable or a plain grid;
            the shared one when None. Ignored by the other strategies.

    Returns:
        Boolean mask (True = foreground), length width * height
    """
    if algorithm is DitherAlgorithm.FLOYD_STEINBERG:
        return floyd_steinberg(grayscale, width, height, threshold)
    elif algorithm is DitherAlgorithm.ATKINSON:
        return atkinson(grayscale, width, height, threshold)
    elif algorithm is DitherAlgorithm.STUCKI:
        return stucki(grayscale, width, height, threshold)
    elif algorithm is DitherAlgorithm.ORDERED:
        return ordered(grayscale, width, height, threshold)
    elif algorithm is DitherAlgorithm.HORIZONTAL_LINE:
        return horizontal_line(grayscale, width, height, threshold, table)
    else:
        raise NotImplementedError(f"Dither algorithm {algorithm} not implemented.")
