"""Main processor orchestrating the image-to-SVG pipeline.

AIDEV-NOTE: load -> grayscale -> dither -> SVG. Each stage is a plain
function in its own module; this class only carries the settings and the
horizontal-line table between them.
"""

import logging
from pathlib import Path

from PIL import Image

from models import DitherAlgorithm, DitherResult, DitherSettings, GrayscaleImage

from .engine import dither
from .image_source import load_grayscale, prepare_image
from .pattern_table import (
    BUILTIN_TABLES,
    PatternTable,
    builtin_table,
    horizontal_line_table,
    load_table,
)
from .preview import render_preview
from .svg_encoder import background_runs, format_size, mask_to_svg

logger = logging.getLogger(__name__)


class DitherProcessor:
    """Turns images into dithered SVG drawings."""

    def __init__(
        self,
        settings: DitherSettings | None = None,
        table: PatternTable | None = None,
    ):
        self.settings = settings or DitherSettings()
        self.table = table if table is not None else horizontal_line_table

    def resolve_table(self) -> "PatternTable | list[list[int]]":
        """Table for horizontal-line dithering named by ``settings.pattern``.

        "default" means the editable table held by this processor; other
        built-in names give a fixed copy; anything else is read as a JSON
        table file.

        Raises:
            PatternTableError: If the table file is missing or invalid
        """
        pattern = self.settings.pattern
        if pattern == "default":
            return self.table
        if pattern in BUILTIN_TABLES:
            return builtin_table(pattern)
        return load_table(pattern)

    def load(self, file_path: "str | Path") -> GrayscaleImage:
        """Load an image file as a grayscale buffer sized for dithering.

        Raises:
            SourceUnavailableError: If file cannot be loaded or is invalid
        """
        return load_grayscale(
            file_path,
            scale=self.settings.scale,
            max_dimension=self.settings.max_dimension,
            min_dimension=self.settings.min_dimension,
        )

    def dither(self, image: GrayscaleImage):
        """Dither a grayscale buffer with the configured algorithm."""
        algorithm = self.settings.algorithm
        table = None
        if algorithm is DitherAlgorithm.HORIZONTAL_LINE:
            table = self.resolve_table()
        return dither(
            algorithm,
            image.pixels,
            image.width,
            image.height,
            self.settings.threshold,
            table,
        )

    def encode(self, mask, width: int, height: int) -> str:
        """Encode a mask as SVG with the configured colors and scale."""
        return mask_to_svg(
            mask,
            width,
            height,
            self.settings.foreground_color,
            self.settings.background_color,
            self.settings.scale,
        )

    def preview(self, result: DitherResult) -> Image.Image:
        """Two-color raster rendering of a result, upscaled like the SVG."""
        return render_preview(
            result.mask,
            result.width,
            result.height,
            self.settings.foreground_color,
            self.settings.background_color,
            self.settings.scale,
        )

    def process_grayscale(self, image: GrayscaleImage) -> DitherResult:
        """Dither and encode an already prepared grayscale buffer."""
        settings = self.settings

        logger.info(
            "Dithering %dx%d grid with %s (threshold %d)...",
            image.width,
            image.height,
            settings.algorithm.display_name,
            settings.threshold,
        )
        mask = self.dither(image)

        logger.info("Encoding SVG...")
        svg_content = self.encode(mask, image.width, image.height)
        rect_count = len(background_runs(mask, image.width, image.height))

        result = DitherResult(
            mask=mask,
            width=image.width,
            height=image.height,
            algorithm=settings.algorithm,
            threshold=settings.threshold,
            svg=svg_content,
            svg_size=format_size(svg_content),
            original_width=image.original_width,
            original_height=image.original_height,
            rect_count=rect_count,
        )

        logger.info(
            "Foreground coverage: %.1f%%, %d background rects, SVG size %s",
            result.foreground_ratio * 100,
            rect_count,
            result.svg_size,
        )
        return result

    def process_image(self, image: Image.Image) -> DitherResult:
        """Execute the pipeline on an already decoded PIL image."""
        grayscale = prepare_image(
            image,
            scale=self.settings.scale,
            max_dimension=self.settings.max_dimension,
            min_dimension=self.settings.min_dimension,
        )
        return self.process_grayscale(grayscale)

    def process(self, file_path: "str | Path") -> DitherResult:
        """Execute complete pipeline on an image file.

        Args:
            file_path: Path to input image

        Returns:
            DitherResult with the mask, SVG and statistics

        Raises:
            SourceUnavailableError: If the image cannot be loaded
        """
        logger.info("Loading image %s...", file_path)
        grayscale = self.load(file_path)
        logger.info(
            "Loaded %dx%d image, dithering at %dx%d.",
            grayscale.original_width,
            grayscale.original_height,
            grayscale.width,
            grayscale.height,
        )
        return self.process_grayscale(grayscale)
