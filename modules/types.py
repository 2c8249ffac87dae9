"""Type definitions and data structures for the converter.

Configuration dictionaries loaded from YAML are turned into frozen dataclasses
here so the rest of the application works with typed, validated values.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from modules.constants import (
    DEFAULT_LOWERCASE,
    DEFAULT_STRICT,
    DEFAULT_VERBOSE,
    MAX_ROMAN_VALUE,
    MIN_ROMAN_VALUE,
)
from modules.error_handler import ConfigurationError, validate_config_value


# ============================================================================
# Configuration Data Classes
# ============================================================================
@dataclass(frozen=True)
class ConverterConfig:
    """Settings controlling how numbers are converted."""
    strict: bool = DEFAULT_STRICT
    lowercase: bool = DEFAULT_LOWERCASE
    min_value: int = MIN_ROMAN_VALUE
    max_value: int = MAX_ROMAN_VALUE

    def __post_init__(self) -> None:
        validate_config_value(self.strict, bool, "conversion.strict")
        validate_config_value(self.lowercase, bool, "conversion.lowercase")
        validate_config_value(self.min_value, int, "conversion.min_value")
        validate_config_value(self.max_value, int, "conversion.max_value")
        if self.min_value < 0:
            raise ConfigurationError(
                f"Invalid configuration for 'conversion.min_value': must be >= 0, got {self.min_value}"
            )
        if self.min_value > self.max_value:
            raise ConfigurationError(
                "Invalid configuration: conversion.min_value "
                f"({self.min_value}) exceeds conversion.max_value ({self.max_value})"
            )

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> ConverterConfig:
        """Create ConverterConfig from the ``conversion`` section of the config."""
        return cls(
            strict=config.get("strict", DEFAULT_STRICT),
            lowercase=config.get("lowercase", DEFAULT_LOWERCASE),
            min_value=config.get("min_value", MIN_ROMAN_VALUE),
            max_value=config.get("max_value", MAX_ROMAN_VALUE),
        )


@dataclass(frozen=True)
class LoggingConfig:
    """Settings controlling console logging."""
    verbose: bool = DEFAULT_VERBOSE

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> LoggingConfig:
        """Create LoggingConfig from the ``logging`` section of the config."""
        verbose = config.get("verbose", DEFAULT_VERBOSE)
        validate_config_value(verbose, bool, "logging.verbose")
        return cls(verbose=verbose)


# ============================================================================
# Public API
# ============================================================================
__all__ = [
    "ConverterConfig",
    "LoggingConfig",
]
