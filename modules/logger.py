"""Logging configuration and setup utilities.

Every module obtains its logger through setup_logger(__name__). Console output
is limited to warnings and errors unless verbose mode is requested, so the
converted numeral on stdout is never mixed with diagnostics.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

# Public API
__all__ = ["setup_logger", "set_log_level", "enable_verbose_logging"]

# Constants
DEFAULT_LOG_LEVEL = logging.INFO
USER_LOG_LEVEL = logging.WARNING  # Only show warnings and errors to users by default
SIMPLE_FORMAT = "[%(levelname)s] %(message)s"
DETAILED_FORMAT = "[%(levelname)s] %(asctime)s - %(name)s - %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
APP_LOGGER_PREFIXES = ("modules", "cli", "main", "__main__")


def setup_logger(
    name: str,
    level: int = DEFAULT_LOG_LEVEL,
    verbose: bool = False,
    format_string: Optional[str] = None,
) -> logging.Logger:
    """
    Create or retrieve a logger with a stderr console handler.

    Args:
        name: Name for the logger (typically __name__ from the calling module)
        level: Logging level of the logger itself
        verbose: If True, the console shows everything at ``level``;
            otherwise only warnings and errors
        format_string: Custom format string for log messages

    Returns:
        Configured Logger instance

    Example:
        >>> logger = setup_logger(__name__)
        >>> logger.warning("Shown on the console")
    """
    logger = logging.getLogger(name)

    # Only configure if no handlers exist (avoid duplicate handlers)
    if not logger.handlers:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level if verbose else USER_LOG_LEVEL)
        console_handler.setFormatter(
            logging.Formatter(
                fmt=format_string or SIMPLE_FORMAT,
                datefmt=DEFAULT_DATE_FORMAT,
            )
        )

        logger.addHandler(console_handler)
        logger.setLevel(level)
        logger.propagate = False

    return logger


def set_log_level(logger: logging.Logger, level: int) -> None:
    """
    Change the log level of an existing logger and all its handlers.

    Args:
        logger: The logger instance to modify
        level: New logging level (e.g., logging.DEBUG, logging.INFO)
    """
    logger.setLevel(level)
    for handler in logger.handlers:
        handler.setLevel(level)


def enable_verbose_logging(level: int = logging.DEBUG) -> None:
    """Lower the level of every application logger created so far.

    Console handlers also switch to DETAILED_FORMAT so debug output shows the
    timestamp and the emitting module.
    """
    detailed = logging.Formatter(fmt=DETAILED_FORMAT, datefmt=DEFAULT_DATE_FORMAT)
    for name in list(logging.Logger.manager.loggerDict):
        if name.split(".")[0] in APP_LOGGER_PREFIXES:
            logger = logging.getLogger(name)
            set_log_level(logger, level)
            for handler in logger.handlers:
                handler.setFormatter(detailed)
