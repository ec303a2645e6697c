"""Configuration persistence manager."""

import json
import logging
from dataclasses import asdict
from pathlib import Path
from typing import Any

from .config import DrillConfig
from .defaults import create_default_config

logger = logging.getLogger(__name__)


class ConfigManager:
    """Manager for configuration persistence.

    Saves and loads the configuration as a JSON file. Path objects are
    written as strings, and a missing or invalid file falls back to the
    default configuration.
    """

    CONFIG_FILE = Path.home() / ".word_drill" / "config.json"

    def __init__(self, config_file: Path | None = None):
        """Initialize the config manager.

        Args:
            config_file: Location of the JSON file, defaults to CONFIG_FILE
        """
        self.config_file = config_file or self.CONFIG_FILE

    def save_config(self, config: DrillConfig) -> None:
        """Save configuration to JSON file.

        Args:
            config: Configuration to save

        Raises:
            OSError: If unable to create directory or write file
        """
        self.config_file.parent.mkdir(parents=True, exist_ok=True)

        config_dict = self._paths_to_strings(asdict(config))

        with self.config_file.open("w", encoding="utf-8") as f:
            json.dump(config_dict, f, indent=2, ensure_ascii=False)

    def load_config(self, **overrides) -> DrillConfig:
        """Load configuration from JSON file.

        Args:
            **overrides: Values that take precedence over the file contents

        Returns:
            Loaded configuration, or default configuration if file doesn't exist

        Note:
            If the file exists but is invalid, falls back to default configuration
            and logs a warning.
        """
        if not self.config_file.exists():
            return create_default_config(**overrides)

        try:
            with self.config_file.open("r", encoding="utf-8") as f:
                config_dict = json.load(f)
            if not isinstance(config_dict, dict):
                raise ValueError("config root must be an object")

            config_dict.update(overrides)
            return DrillConfig(**config_dict)

        except (json.JSONDecodeError, TypeError, ValueError) as e:
            logger.warning(f"Invalid config file, using defaults: {e}")
            return create_default_config(**overrides)

    def config_exists(self) -> bool:
        """Check if configuration file exists."""
        return self.config_file.exists()

    def delete_config(self) -> None:
        """Delete the configuration file."""
        if self.config_file.exists():
            self.config_file.unlink()

    @staticmethod
    def _paths_to_strings(data: dict[str, Any]) -> dict[str, Any]:
        """Convert Path objects to strings in a dict."""
        return {key: str(value) if isinstance(value, Path) else value for key, value in data.items()}
