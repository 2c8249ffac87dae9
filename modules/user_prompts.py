"""Centralized terminal output utilities for consistent CLI messages.

Errors and warnings are color-coded and written to stderr so stdout carries
only conversion results. colorama enables the ANSI codes on Windows consoles.
"""

from __future__ import annotations

import sys

import colorama

colorama.just_fix_windows_console()


# ============================================================================
# ANSI Color Codes
# ============================================================================
class Colors:
    """ANSI color codes for terminal output formatting."""
    WARNING = '\033[93m'
    FAIL = '\033[91m'
    ENDC = '\033[0m'


# ============================================================================
# Output Functions (Print Messages)
# ============================================================================
def print_warning(message: str) -> None:
    """Print a warning message to stderr."""
    print(f"{Colors.WARNING}⚠ {message}{Colors.ENDC}", file=sys.stderr)


def print_error(message: str) -> None:
    """Print an error message to stderr."""
    print(f"{Colors.FAIL}✗ {message}{Colors.ENDC}", file=sys.stderr)


__all__ = [
    "Colors",
    "print_warning",
    "print_error",
]
