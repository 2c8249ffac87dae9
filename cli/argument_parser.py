"""CLI argument parsing and conversion-mode resolution."""

from __future__ import annotations

import argparse
import dataclasses
from pathlib import Path
from typing import Sequence

from modules.constants import MAX_ROMAN_VALUE, MIN_ROMAN_VALUE, PROGRAM_NAME
from modules.logger import setup_logger
from modules.types import ConverterConfig

logger = setup_logger(__name__)


def _integer(value: str) -> int:
    """Argparse type validator for (possibly negative) integers."""
    try:
        return int(value.strip())
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROGRAM_NAME,
        description="Convert a decimal number to a Roman numeral.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "number",
        type=_integer,
        help=f"Integer to convert (conventional range {MIN_ROMAN_VALUE}-{MAX_ROMAN_VALUE}).",
    )

    # Validation behavior; defaults come from the config file
    mode_group = parser.add_mutually_exclusive_group()
    mode_group.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Reject values outside the configured range. Overrides conversion.strict in config.",
    )
    mode_group.add_argument(
        "--permissive",
        action="store_true",
        default=None,
        help="Convert any integer mechanically (0 and negatives print an empty line, 4000+ repeats 'M').",
    )

    parser.add_argument(
        "-l",
        "--lowercase",
        action="store_true",
        default=None,
        help="Print the numeral in lowercase (e.g. 'xii').",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to a YAML config file (default: modules/config/app.yaml).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=None,
        help="Show debug logs on stderr.",
    )
    return parser


def setup_argparse(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments; exits with status 2 on bad usage."""
    return build_parser().parse_args(argv)


def resolve_converter_config(
    args: argparse.Namespace,
    base: ConverterConfig,
) -> ConverterConfig:
    """Apply command-line overrides on top of the configured settings."""
    overrides: dict[str, bool] = {}
    if args.strict:
        overrides["strict"] = True
    elif args.permissive:
        overrides["strict"] = False
    if args.lowercase:
        overrides["lowercase"] = True

    if overrides:
        logger.debug(f"CLI overrides: {overrides}")
        return dataclasses.replace(base, **overrides)
    return base


__all__ = [
    "build_parser",
    "setup_argparse",
    "resolve_converter_config",
]
