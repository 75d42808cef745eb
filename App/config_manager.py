"""Settings file loader for the Ditherator command line.

This module reads default conversion settings from a JSON file. Settings
are never written back.
"""

import json
import logging
from pathlib import Path

from models import CONFIG_FILE, DitherAlgorithm, DitherSettings

logger = logging.getLogger(__name__)


class ConfigManager:
    """Handles loading of conversion settings."""

    def __init__(self, config_path: Path = CONFIG_FILE):
        """Initialize config manager.

        Args:
            config_path: Path to settings file (defaults to ~/.ditherator_config.json)
        """
        self.config_path = Path(config_path)

    def load(self) -> DitherSettings:
        """Load settings from file, returning defaults if not found.

        Returns:
            DitherSettings with loaded or default values
        """
        settings = DitherSettings()

        try:
            if self.config_path.exists():
                with open(self.config_path, "r") as f:
                    data = json.load(f)
                # Update settings with loaded values (fallback to defaults)
                settings.algorithm = DitherAlgorithm(
                    data.get("algorithm", settings.algorithm.value)
                )
                settings.threshold = int(data.get("threshold", settings.threshold))
                settings.scale = float(data.get("scale", settings.scale))
                settings.foreground_color = data.get(
                    "foreground_color", settings.foreground_color
                )
                settings.background_color = data.get(
                    "background_color", settings.background_color
                )
                settings.max_dimension = int(
                    data.get("max_dimension", settings.max_dimension)
                )
                settings.min_dimension = int(
                    data.get("min_dimension", settings.min_dimension)
                )
                settings.pattern = data.get("pattern", settings.pattern)
                logger.info("Loaded settings from %s", self.config_path)
        except (OSError, ValueError, TypeError, AttributeError) as e:
            logger.warning("Could not load settings file: %s", e)
            return DitherSettings()

        return settings
