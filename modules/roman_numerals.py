"""Roman numeral conversion utilities.

Two entry points are provided:

- ``convert``: the permissive greedy conversion. It never validates its input;
  zero and negative values give an empty string and values of 4000 and above
  are converted mechanically (``convert(4310) == "MMMMCCCX"``).
- ``to_roman``: the hardened conversion used by the CLI. It validates the
  input against the conventional 1-3999 range before converting.

Example:
    >>> convert(1679)
    'MDCLXXIX'
    >>> to_roman(12, lowercase=True)
    'xii'
"""

from __future__ import annotations

from modules.constants import MAX_ROMAN_VALUE, MIN_ROMAN_VALUE
from modules.error_handler import InvalidArgumentError
from modules.logger import setup_logger

logger = setup_logger(__name__)

# Descending order, subtractive pairs included
ROMAN_NUMERAL_VALUES: tuple[tuple[int, str], ...] = (
    (1000, 'M'), (900, 'CM'), (500, 'D'), (400, 'CD'),
    (100, 'C'), (90, 'XC'), (50, 'L'), (40, 'XL'),
    (10, 'X'), (9, 'IX'), (5, 'V'), (4, 'IV'), (1, 'I'),
)


def convert(n: int) -> str:
    """Convert an integer to an uppercase Roman numeral string.

    Args:
        n: Integer to convert.

    Returns:
        Roman numeral string. Empty for ``n <= 0``.
    """
    if n <= 0:
        return ""

    remainder = n
    parts: list[str] = []
    for value, numeral in ROMAN_NUMERAL_VALUES:
        count, remainder = divmod(remainder, value)
        parts.append(numeral * count)
    return "".join(parts)


def validate_roman_input(
    n: object,
    min_value: int = MIN_ROMAN_VALUE,
    max_value: int = MAX_ROMAN_VALUE,
) -> int:
    """Check that ``n`` is an integer within ``[min_value, max_value]``.

    Args:
        n: Value to validate.
        min_value: Smallest accepted value.
        max_value: Largest accepted value.

    Returns:
        The validated integer.

    Raises:
        InvalidArgumentError: If ``n`` is not an int (bools are rejected) or
            lies outside the accepted range.
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise InvalidArgumentError(
            f"Expected an integer, got {type(n).__name__}: {n!r}"
        )
    if not min_value <= n <= max_value:
        raise InvalidArgumentError(
            f"{n} is out of range (must be {min_value}..{max_value})"
        )
    return n


def to_roman(
    n: int,
    *,
    strict: bool = True,
    lowercase: bool = False,
    min_value: int = MIN_ROMAN_VALUE,
    max_value: int = MAX_ROMAN_VALUE,
) -> str:
    """Convert ``n`` to a Roman numeral, validating it first unless told not to.

    Args:
        n: Integer to convert.
        strict: If True, reject values outside ``[min_value, max_value]``.
            If False, fall back to the permissive ``convert`` behavior.
        lowercase: Return lowercase numerals (e.g. front-matter page numbers).
        min_value: Smallest accepted value in strict mode.
        max_value: Largest accepted value in strict mode.

    Returns:
        Roman numeral string.

    Raises:
        InvalidArgumentError: In strict mode, if ``n`` fails validation.
    """
    if strict:
        validate_roman_input(n, min_value=min_value, max_value=max_value)

    numeral = convert(n)
    logger.debug(f"Converted {n} -> {numeral!r} (strict={strict})")
    return numeral.lower() if lowercase else numeral


__all__ = [
    "ROMAN_NUMERAL_VALUES",
    "convert",
    "validate_roman_input",
    "to_roman",
]
