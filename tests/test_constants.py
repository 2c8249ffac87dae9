"""Tests for modules/constants.py - Centralized constants."""

from __future__ import annotations

from modules.constants import (
    MIN_ROMAN_VALUE,
    MAX_ROMAN_VALUE,
    MAX_SYMBOL_REPEAT,
    REPEATABLE_SYMBOLS,
    DEFAULT_STRICT,
    DEFAULT_LOWERCASE,
    DEFAULT_VERBOSE,
    CONFIG_FILENAME,
    EXIT_SUCCESS,
    EXIT_CONVERSION_ERROR,
    EXIT_USAGE_ERROR,
    PROGRAM_NAME,
)
from modules import constants


class TestConversionRange:
    """Tests for conversion range constants."""

    def test_conventional_range(self):
        """The conventional range is 1..3999."""
        assert MIN_ROMAN_VALUE == 1
        assert MAX_ROMAN_VALUE == 3999

    def test_repeat_rules(self):
        """Only I, X, C and M repeat, at most three times."""
        assert MAX_SYMBOL_REPEAT == 3
        assert REPEATABLE_SYMBOLS == frozenset({"I", "X", "C", "M"})


class TestDefaults:
    """Tests for configuration defaults."""

    def test_defaults(self):
        """Strict, uppercase, quiet by default."""
        assert DEFAULT_STRICT is True
        assert DEFAULT_LOWERCASE is False
        assert DEFAULT_VERBOSE is False
        assert CONFIG_FILENAME == "app.yaml"


class TestCliConstants:
    """Tests for CLI constants."""

    def test_exit_codes_distinct(self):
        """Exit codes are distinct and success is zero."""
        assert EXIT_SUCCESS == 0
        assert len({EXIT_SUCCESS, EXIT_CONVERSION_ERROR, EXIT_USAGE_ERROR}) == 3

    def test_program_name(self):
        """The program name matches the console script."""
        assert PROGRAM_NAME == "roman-convert"


class TestPublicApi:
    """Tests for __all__."""

    def test_all_names_exist(self):
        """Every name in __all__ is defined."""
        for name in constants.__all__:
            assert hasattr(constants, name), name
