"""Centralized error handling and reporting utilities.

This module defines the converter's exception hierarchy and the helpers the
CLI uses to report failures consistently.
"""

from __future__ import annotations

import sys
from typing import Any

from modules.constants import EXIT_CONVERSION_ERROR
from modules.logger import setup_logger
from modules.user_prompts import print_error

logger = setup_logger(__name__)


# ============================================================================
# Error Classification
# ============================================================================
class ConversionError(Exception):
    """Base exception for conversion errors."""


class InvalidArgumentError(ConversionError, ValueError):
    """Exception for values that cannot be converted to a Roman numeral."""


class ConfigurationError(ConversionError):
    """Exception for configuration-related errors."""


# ============================================================================
# Error Handlers
# ============================================================================
def handle_critical_error(
    error: Exception,
    context: str,
    exit_on_error: bool = False,
    show_user_message: bool = True,
    exit_code: int = EXIT_CONVERSION_ERROR,
) -> None:
    """Handle critical errors with consistent logging and user feedback."""
    logger.debug(f"Critical error in {context}: {error}", exc_info=True)

    if show_user_message:
        print_error(f"{context} failed: {error}")

    if exit_on_error:
        sys.exit(exit_code)


# ============================================================================
# Validation Helpers
# ============================================================================
def validate_config_value(
    value: Any,
    expected_type: type,
    name: str,
    allow_none: bool = False,
) -> None:
    """Validate a configuration value."""
    if value is None and allow_none:
        return

    # bool is an int subclass; keep the two apart
    if expected_type is int and isinstance(value, bool):
        raise ConfigurationError(
            f"Invalid configuration for '{name}': expected int, got bool"
        )

    if not isinstance(value, expected_type):
        raise ConfigurationError(
            f"Invalid configuration for '{name}': expected {expected_type.__name__}, "
            f"got {type(value).__name__}"
        )


# ============================================================================
# Public API
# ============================================================================
__all__ = [
    "ConversionError",
    "InvalidArgumentError",
    "ConfigurationError",
    "handle_critical_error",
    "validate_config_value",
]
