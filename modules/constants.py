"""Centralized constants for the Roman numeral converter.

This module provides a single source of truth for range bounds, default
settings, and CLI values used throughout the application.
"""

from __future__ import annotations

# ============================================================================
# Conversion Range
# ============================================================================
MIN_ROMAN_VALUE = 1
MAX_ROMAN_VALUE = 3999
MAX_SYMBOL_REPEAT = 3
REPEATABLE_SYMBOLS = frozenset({'I', 'X', 'C', 'M'})
# Largest value the CLI prints without validation (1000 repeated "M")
MAX_PERMISSIVE_VALUE = 1_000_000

# ============================================================================
# Configuration Defaults
# ============================================================================
DEFAULT_STRICT = True
DEFAULT_LOWERCASE = False
DEFAULT_VERBOSE = False
CONFIG_FILENAME = "app.yaml"

# ============================================================================
# CLI Constants
# ============================================================================
EXIT_SUCCESS = 0
EXIT_CONVERSION_ERROR = 1
EXIT_USAGE_ERROR = 2
PROGRAM_NAME = "roman-convert"

# ============================================================================
# Public API
# ============================================================================
__all__ = [
    # Conversion range
    "MIN_ROMAN_VALUE",
    "MAX_ROMAN_VALUE",
    "MAX_SYMBOL_REPEAT",
    "REPEATABLE_SYMBOLS",
    "MAX_PERMISSIVE_VALUE",
    # Configuration defaults
    "DEFAULT_STRICT",
    "DEFAULT_LOWERCASE",
    "DEFAULT_VERBOSE",
    "CONFIG_FILENAME",
    # CLI
    "EXIT_SUCCESS",
    "EXIT_CONVERSION_ERROR",
    "EXIT_USAGE_ERROR",
    "PROGRAM_NAME",
]
