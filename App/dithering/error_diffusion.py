"""Error-diffusion dithering (Floyd-Steinberg, Atkinson, Stucki).

AIDEV-NOTE: All three kernels share one scan loop. Pixels are visited in
row-major order, quantized to 0 or 255 against a fixed threshold, and the
quantization error is pushed forward to neighbours that have not been
visited yet. The kernels only differ in their weight table.
"""

from dataclasses import dataclass
from enum import Enum

import numpy as np


class EdgePolicy(Enum):
    """What happens to an error share whose neighbour is off the image."""

    # The share is discarded, not redistributed. Biases borders slightly.
    DROP = "drop-out-of-bounds-error-share"


@dataclass(frozen=True)
class DiffusionKernel:
    """Error distribution weights relative to the current pixel.

    Each entry is (dx, dy, weight); a neighbour receives
    error * weight / divisor.
    """

    divisor: int
    weights: "tuple[tuple[int, int, int], ...]"


#       X   7
#   3   5   1
FLOYD_STEINBERG = DiffusionKernel(
    divisor=16,
    weights=((1, 0, 7), (-1, 1, 3), (0, 1, 5), (1, 1, 1)),
)

# Only 6/8 of the error is passed on, which raises contrast
#       X   1   1
#   1   1   1
#       1
ATKINSON = DiffusionKernel(
    divisor=8,
    weights=((1, 0, 1), (2, 0, 1), (-1, 1, 1), (0, 1, 1), (1, 1, 1), (0, 2, 1)),
)

#           X   8   4
#   2   4   8   4   2
#   1   2   4   2   1
STUCKI = DiffusionKernel(
    divisor=42,
    weights=(
        (1, 0, 8),
        (2, 0, 4),
        (-2, 1, 2),
        (-1, 1, 4),
        (0, 1, 8),
        (1, 1, 4),
        (2, 1, 2),
        (-2, 2, 1),
        (-1, 2, 2),
        (0, 2, 4),
        (1, 2, 2),
        (2, 2, 1),
    ),
)


def diffuse_error(
    grayscale,
    width: int,
    height: int,
    threshold: float,
    kernel: DiffusionKernel,
    edge_policy: EdgePolicy = EdgePolicy.DROP,
) -> np.ndarray:
    """Dither a grayscale buffer with an error-diffusion kernel.

    Args:
        grayscale: Row-major intensities (0-255), length width * height.
            Not modified.
        width: Image width in pixels
        height: Image height in pixels
        threshold: Values below this quantize to 0, the rest to 255
        kernel: Error distribution weights
        edge_policy: Handling of error shares that fall off the image

    Returns:
        Boolean mask (True = foreground), length width * height
    """
    if edge_policy is not EdgePolicy.DROP:
        raise NotImplementedError(f"Edge policy {edge_policy} not implemented.")

    # AIDEV-NOTE: tolist() always builds a new list, so the caller's buffer
    # is never touched. Plain floats are much faster than numpy scalars in
    # this per-pixel loop.
    pixels = np.asarray(grayscale, dtype=np.float64).ravel().tolist()
    assert len(pixels) == width * height, "buffer length must be width * height"

    result = [False] * (width * height)
    divisor = kernel.divisor
    weights = kernel.weights

    for y in range(height):
        row_start = y * width
        for x in range(width):
            idx = row_start + x
            old_pixel = pixels[idx]
            new_pixel = 0.0 if old_pixel < threshold else 255.0

            result[idx] = new_pixel == 255.0

            error = old_pixel - new_pixel
            if error == 0.0:
                continue

            for dx, dy, weight in weights:
                nx = x + dx
                ny = y + dy
                # EdgePolicy.DROP; dy is never negative
                if nx < 0 or nx >= width or ny >= height:
                    continue
                pixels[ny * width + nx] += error * weight / divisor

    return np.array(result, dtype=bool)


def floyd_steinberg(grayscale, width: int, height: int, threshold: float) -> np.ndarray:
    """Floyd-Steinberg dithering: classic 4-neighbour error diffusion."""
    return diffuse_error(grayscale, width, height, threshold, FLOYD_STEINBERG)


def atkinson(grayscale, width: int, height: int, threshold: float) -> np.ndarray:
    """Atkinson dithering: diffuses 6/8 of the error for a higher-contrast look."""
    return diffuse_error(grayscale, width, height, threshold, ATKINSON)


def stucki(grayscale, width: int, height: int, threshold: float) -> np.ndarray:
    """Stucki dithering: wide kernel with smoother gradients and less noise."""
    return diffuse_error(grayscale, width, height, threshold, STUCKI)
