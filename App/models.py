"""Data models and constants for the Ditherator converter."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

import numpy as np

# AIDEV-NOTE: Source images are shrunk to fit this box before dithering
MAX_DIMENSION = 800  # px
MIN_DIMENSION = 10  # px

# Configuration file path
CONFIG_FILE = Path.home() / ".ditherator_config.json"


class DitherAlgorithm(Enum):
    """Dithering strategies.

    AIDEV-NOTE: Closed set. Dispatch lives in dithering.dither(); add a
    branch there when adding a member here.
    """

    FLOYD_STEINBERG = "floyd-steinberg"  # Classic 4-neighbour error diffusion
    ATKINSON = "atkinson"  # Lossy 6/8 error diffusion
    STUCKI = "stucki"  # Wide 12-neighbour error diffusion
    ORDERED = "ordered"  # Bayer 4x4 threshold table
    HORIZONTAL_LINE = "horizontal-line"  # Editable line/gap threshold table

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]


_DISPLAY_NAMES = {
    DitherAlgorithm.FLOYD_STEINBERG: "Floyd-Steinberg",
    DitherAlgorithm.ATKINSON: "Atkinson",
    DitherAlgorithm.STUCKI: "Stucki",
    DitherAlgorithm.ORDERED: "Ordered (Bayer)",
    DitherAlgorithm.HORIZONTAL_LINE: "Horizontal Line",
}

_DESCRIPTIONS = {
    DitherAlgorithm.FLOYD_STEINBERG: "Classic error diffusion with smooth gradients",
    DitherAlgorithm.ATKINSON: "Mac-style dithering with higher contrast",
    DitherAlgorithm.STUCKI: "Improved error diffusion with less noise",
    DitherAlgorithm.ORDERED: "Pattern-based with regular grid effect",
    DitherAlgorithm.HORIZONTAL_LINE: "Halftone of horizontal lines, dashes and dots",
}


@dataclass
class DitherSettings:
    """Settings for one image-to-SVG conversion."""

    algorithm: DitherAlgorithm = DitherAlgorithm.ORDERED

    # Global cutoff (1-255); higher = more foreground
    threshold: int = 200

    # Size of one dithered pixel, in source pixels and in SVG units
    scale: float = 1.0

    # Colors are passed to the SVG verbatim
    foreground_color: str = "#ffffff"
    background_color: str = "#000000"

    # Source image bounds after scaling
    max_dimension: int = MAX_DIMENSION
    min_dimension: int = MIN_DIMENSION

    # Horizontal-line table: a built-in name ("default", "8x8") or a JSON path
    pattern: str = "default"


@dataclass
class GrayscaleImage:
    """Row-major luminance buffer produced by the grayscale source."""

    pixels: np.ndarray  # float64, length width * height, values 0-255
    width: int
    height: int

    # Size of the file before scaling (pixels)
    original_width: int = 0
    original_height: int = 0


@dataclass
class DitherResult:
    """Result of the dithering pipeline."""

    # Foreground mask, row-major, length width * height
    mask: np.ndarray

    width: int
    height: int

    algorithm: DitherAlgorithm
    threshold: int

    # Encoded drawing
    svg: str = ""
    svg_size: str = ""

    original_width: int = 0
    original_height: int = 0

    # Statistics
    rect_count: int = 0  # Background run rectangles in the SVG

    @property
    def foreground_ratio(self) -> float:
        """Fraction of mask cells that are foreground."""
        if self.mask.size == 0:
            return 0.0
        return float(np.count_nonzero(self.mask)) / self.mask.size
