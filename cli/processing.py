"""Conversion step of the CLI: run the converter and report the outcome."""

from __future__ import annotations

from modules.constants import EXIT_CONVERSION_ERROR, EXIT_SUCCESS, MAX_PERMISSIVE_VALUE
from modules.error_handler import InvalidArgumentError, handle_critical_error
from modules.roman_numerals import to_roman
from modules.types import ConverterConfig
from modules.user_prompts import print_warning


def run_conversion(number: int, settings: ConverterConfig) -> int:
    """Convert ``number`` and print the numeral to stdout.

    Args:
        number: Integer from the command line.
        settings: Effective converter settings.

    Returns:
        Process exit code.
    """
    try:
        if not settings.strict and number > MAX_PERMISSIVE_VALUE:
            raise InvalidArgumentError(
                f"{number} is too large to print (limit is {MAX_PERMISSIVE_VALUE} without validation)"
            )
        numeral = to_roman(
            number,
            strict=settings.strict,
            lowercase=settings.lowercase,
            min_value=settings.min_value,
            max_value=settings.max_value,
        )
    except InvalidArgumentError as e:
        handle_critical_error(e, f"Converting {number}")
        return EXIT_CONVERSION_ERROR

    if not numeral:
        print_warning(f"{number} has no Roman numeral representation; printing an empty line.")

    print(numeral)
    return EXIT_SUCCESS


__all__ = ["run_conversion"]
