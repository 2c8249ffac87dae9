"""Pytest fixtures and configuration for the converter tests.

This module provides shared fixtures: paths, a config-file writer, and an
independent Roman numeral parser used to check conversions.
"""

from __future__ import annotations

import logging
import tempfile
from pathlib import Path
from typing import Callable, Generator

import pytest
import yaml


# ============================================================================
# Path Fixtures
# ============================================================================
@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).resolve().parents[1]


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


# ============================================================================
# Configuration Fixtures
# ============================================================================
@pytest.fixture
def write_config(temp_dir: Path) -> Callable[[dict], Path]:
    """Return a helper that dumps a mapping to a YAML file in temp_dir."""

    def _write(data: dict, filename: str = "app.yaml") -> Path:
        path = temp_dir / filename
        path.write_text(yaml.safe_dump(data), encoding="utf-8")
        return path

    return _write


# ============================================================================
# Roman Parsing Fixtures
# ============================================================================
_SYMBOL_VALUES = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}


def parse_roman(numeral: str) -> int:
    """Parse a Roman numeral by the subtract-if-smaller-than-next rule."""
    total = 0
    values = [_SYMBOL_VALUES[ch] for ch in numeral.upper()]
    for i, value in enumerate(values):
        if i + 1 < len(values) and value < values[i + 1]:
            total -= value
        else:
            total += value
    return total


@pytest.fixture
def roman_to_int() -> Callable[[str], int]:
    """Return an independent Roman-to-decimal parser."""
    return parse_roman


@pytest.fixture
def known_numerals() -> dict[int, str]:
    """Return reference conversions."""
    return {
        1: "I",
        4: "IV",
        5: "V",
        9: "IX",
        10: "X",
        14: "XIV",
        40: "XL",
        50: "L",
        78: "LXXVIII",
        90: "XC",
        100: "C",
        400: "CD",
        410: "CDX",
        500: "D",
        510: "DX",
        837: "DCCCXXXVII",
        900: "CM",
        910: "CMX",
        1000: "M",
        1679: "MDCLXXIX",
        1994: "MCMXCIV",
        2378: "MMCCCLXXVIII",
        3888: "MMMDCCCLXXXVIII",
        3999: "MMMCMXCIX",
    }


# ============================================================================
# Logging Fixtures
# ============================================================================
@pytest.fixture
def restore_log_levels() -> Generator[None, None, None]:
    """Restore logger levels and handler formatting changed by verbose mode."""
    saved = {}
    for name in list(logging.Logger.manager.loggerDict):
        log = logging.getLogger(name)
        saved[name] = (log.level, [(h.level, h.formatter) for h in log.handlers])
    yield
    for name, (level, handler_state) in saved.items():
        log = logging.getLogger(name)
        log.setLevel(level)
        for handler, (handler_level, formatter) in zip(log.handlers, handler_state):
            handler.setLevel(handler_level)
            handler.setFormatter(formatter)
