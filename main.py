"""
Decimal to Roman numeral converter.

This script:
1. Parses the number and flags from the command line
2. Loads conversion settings from modules/config/app.yaml (or --config)
3. Converts the number with the greedy subtractive-pair algorithm
4. Prints the numeral to stdout, or an error to stderr with a non-zero exit code
"""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from cli.argument_parser import resolve_converter_config, setup_argparse
from cli.processing import run_conversion
from modules.config_loader import ConfigLoader, get_config_loader
from modules.constants import EXIT_CONVERSION_ERROR
from modules.error_handler import ConfigurationError, handle_critical_error
from modules.logger import enable_verbose_logging, setup_logger

logger = setup_logger(__name__)


def _load_config_loader(args) -> ConfigLoader:
    if args.config is None:
        return get_config_loader()
    loader = ConfigLoader()
    loader.load_configs(args.config)
    return loader


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = setup_argparse(argv)
    loader = _load_config_loader(args)

    try:
        base_settings = loader.get_converter_config()
        logging_settings = loader.get_typed_logging_config()
    except ConfigurationError as e:
        handle_critical_error(e, "Loading configuration")
        return EXIT_CONVERSION_ERROR

    if args.verbose or logging_settings.verbose:
        enable_verbose_logging()

    settings = resolve_converter_config(args, base_settings)
    logger.debug(f"Effective settings: {settings}")

    return run_conversion(args.number, settings)


if __name__ == "__main__":
    sys.exit(main())
