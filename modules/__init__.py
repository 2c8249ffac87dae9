"""Modules package for the Roman numeral converter.

This package contains the converter itself and the shared configuration,
logging, types, error handling, and terminal output modules.
"""

__all__ = [
    "config_loader",
    "constants",
    "error_handler",
    "logger",
    "roman_numerals",
    "types",
    "user_prompts",
]
