"""Configuration loader for YAML-based settings.

Settings live in modules/config/app.yaml (or a file passed with --config):

    conversion:
      strict: true        # reject values outside min_value..max_value
      lowercase: false    # print lowercase numerals
      min_value: 1
      max_value: 3999
    logging:
      verbose: false      # show debug logs on the console

Usage Pattern:
    >>> from modules.config_loader import ConfigLoader
    >>> loader = ConfigLoader()
    >>> loader.load_configs()
    >>> loader.get_converter_config()
    ConverterConfig(strict=True, lowercase=False, min_value=1, max_value=3999)

The loader handles missing files gracefully, returning empty dictionaries and
logging warnings when the file is not found or contains invalid YAML.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from modules.constants import CONFIG_FILENAME
from modules.logger import setup_logger
from modules.types import ConverterConfig, LoggingConfig

logger = setup_logger(__name__)

# ============================================================================
# Path Resolution
# ============================================================================
MODULES_DIR = Path(__file__).resolve().parent
CONFIG_DIR = MODULES_DIR / "config"


# ============================================================================
# Configuration Loader Class
# ============================================================================
class ConfigLoader:
    """
    Lightweight loader for the application's YAML config.

    Example:
        >>> loader = ConfigLoader()
        >>> loader.load_configs()
        >>> loader.get_conversion_config()
        {'strict': True, 'lowercase': False, 'min_value': 1, 'max_value': 3999}
    """

    def __init__(self) -> None:
        self._conversion: dict[str, Any] = {}
        self._logging: dict[str, Any] = {}

    def load_configs(self, config_path: Path | None = None) -> None:
        """
        Load the application config.

        Args:
            config_path: Explicit YAML file to read. Defaults to
                CONFIG_DIR / app.yaml.

        Errors during loading are logged but do not raise exceptions.
        """
        data = self._load_yaml_config(config_path or CONFIG_DIR / CONFIG_FILENAME)
        self._conversion = self._section(data, "conversion")
        self._logging = self._section(data, "logging")

    def _load_yaml_config(self, config_path: Path) -> dict[str, Any]:
        """Load a single YAML configuration file."""
        config_path = Path(config_path)
        if not config_path.exists():
            logger.warning(f"Config file not found: {config_path}. Using defaults.")
            return {}

        try:
            with config_path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error(f"YAML parsing error in {config_path.name}: {e}")
            return {}
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Error loading config {config_path.name}: {e}")
            return {}

        if data is None:
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Config file {config_path.name} did not contain a dictionary. Using empty config.")
            return {}

        logger.debug(f"Loaded configuration from {config_path}")
        return data

    @staticmethod
    def _section(data: dict[str, Any], key: str) -> dict[str, Any]:
        section = data.get(key, {})
        if section is None:
            return {}
        if not isinstance(section, dict):
            logger.warning(f"Config section '{key}' is not a dictionary. Ignoring it.")
            return {}
        return section

    def get_conversion_config(self) -> dict[str, Any]:
        """Get the raw conversion configuration."""
        return dict(self._conversion)

    def get_logging_config(self) -> dict[str, Any]:
        """Get the raw logging configuration."""
        return dict(self._logging)

    def get_converter_config(self) -> ConverterConfig:
        """Build a validated ConverterConfig; raises ConfigurationError."""
        return ConverterConfig.from_dict(self._conversion)

    def get_typed_logging_config(self) -> LoggingConfig:
        """Build a validated LoggingConfig; raises ConfigurationError."""
        return LoggingConfig.from_dict(self._logging)

    def is_loaded(self) -> bool:
        """Check if any configuration has been loaded."""
        return bool(self._conversion or self._logging)


# ============================================================================
# Singleton Pattern for Config Loader
# ============================================================================
_config_loader_instance: ConfigLoader | None = None


def get_config_loader() -> ConfigLoader:
    """Get or create a singleton ConfigLoader for the default config file."""
    global _config_loader_instance

    if _config_loader_instance is None:
        _config_loader_instance = ConfigLoader()
        _config_loader_instance.load_configs()
        logger.debug("Initialized singleton ConfigLoader")

    return _config_loader_instance


# ============================================================================
# Public API
# ============================================================================
__all__ = [
    "ConfigLoader",
    "get_config_loader",
    "MODULES_DIR",
    "CONFIG_DIR",
]
