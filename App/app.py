"""Ditherator - Main entry point."""

import argparse
import dataclasses
import logging
import sys
from pathlib import Path

from config_manager import ConfigManager
from dithering import DitherProcessor, PatternTableError, SourceUnavailableError
from log_setup import setup_logging
from models import CONFIG_FILE, DitherAlgorithm

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="ditherator",
        description="Transform images into dithered SVG art",
    )
    parser.add_argument("input", type=Path, help="Image file to convert")
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="SVG file to write (default: <input>-dithered.svg)",
    )
    parser.add_argument(
        "-a",
        "--algorithm",
        choices=[algorithm.value for algorithm in DitherAlgorithm],
        help="Dithering algorithm: "
        + "; ".join(f"{a.value} = {a.description}" for a in DitherAlgorithm),
    )
    parser.add_argument(
        "-t", "--threshold", type=int, help="Threshold 1-255, higher = more foreground"
    )
    parser.add_argument(
        "-s", "--scale", type=float, help="Size of one dithered pixel"
    )
    parser.add_argument("--fg", dest="foreground_color", help="Foreground color")
    parser.add_argument("--bg", dest="background_color", help="Background color")
    parser.add_argument(
        "--pattern",
        help="Horizontal-line table: 'default', '8x8' or a JSON table file",
    )
    parser.add_argument("--preview", type=Path, help="Also write a PNG preview")
    parser.add_argument(
        "--config",
        type=Path,
        default=CONFIG_FILE,
        help="Settings file with default values",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    return parser.parse_args(argv)


def default_output_path(input_path: Path) -> Path:
    return input_path.with_name(f"{input_path.stem}-dithered.svg")


def main(argv=None) -> int:
    """Convert one image to a dithered SVG."""
    args = parse_args(argv)
    setup_logging(args.log_level)

    settings = ConfigManager(args.config).load()

    # Command line overrides the settings file
    overrides = {
        "threshold": args.threshold,
        "scale": args.scale,
        "foreground_color": args.foreground_color,
        "background_color": args.background_color,
        "pattern": args.pattern,
    }
    if args.algorithm:
        overrides["algorithm"] = DitherAlgorithm(args.algorithm)
    settings = dataclasses.replace(
        settings, **{k: v for k, v in overrides.items() if v is not None}
    )

    # AIDEV-NOTE: The engine does not validate the threshold; clamp here
    settings.threshold = max(1, min(255, settings.threshold))
    if settings.scale <= 0:
        logger.error("Scale must be positive, got %s", settings.scale)
        return 1

    processor = DitherProcessor(settings)
    try:
        result = processor.process(args.input)
    except SourceUnavailableError as e:
        logger.error("%s", e)
        return 1
    except PatternTableError as e:
        logger.error("Invalid pattern table: %s", e)
        return 1

    output_path = args.output or default_output_path(args.input)
    output_path.write_text(result.svg, encoding="utf-8")
    logger.info("Saved %s (%s)", output_path, result.svg_size)

    if args.preview:
        processor.preview(result).save(args.preview)
        logger.info("Saved preview %s", args.preview)

    return 0


if __name__ == "__main__":
    sys.exit(main())
