"""Dithering engine and SVG encoder.

AIDEV-NOTE: This package handles the pipeline from photograph to dithered
SVG. Organized into modular components:
- processor: Main DitherProcessor orchestrator
- image_source: Decoding, resizing and grayscale conversion
- error_diffusion: Floyd-Steinberg, Atkinson and Stucki kernels
- ordered: Bayer and horizontal-line table lookups
- pattern_table: Built-in tables and the editable PatternTable
- engine: dither() dispatch over DitherAlgorithm
- svg_encoder: Run-length mask to SVG
- preview: Raster preview of a mask
"""

from .engine import dither
from .image_source import SourceUnavailableError
from .pattern_table import PatternTable, PatternTableError, horizontal_line_table
from .processor import DitherProcessor
from .svg_encoder import mask_to_svg

__all__ = [
    "DitherProcessor",
    "PatternTable",
    "PatternTableError",
    "SourceUnavailableError",
    "dither",
    "horizontal_line_table",
    "mask_to_svg",
]
