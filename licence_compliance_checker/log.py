"""Process-wide logging setup for the command line."""
from __future__ import annotations

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

# Accepted --log-level values and the logging level they map to
LOG_LEVELS: dict[str, int] = {
    "trace": logging.DEBUG,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "fatal": logging.CRITICAL,
    "panic": logging.CRITICAL,
}

LOGGER_NAME = "licence_compliance_checker"


def configure_logging(level: Optional[str], console: Optional[Console] = None) -> None:
    """Configure logging of the licence_compliance_checker loggers.

    Without a level, logging is silenced entirely.

    Args:
        level: One of LOG_LEVELS (case-insensitive), or None.
        console: Console receiving log records. Defaults to stderr.

    Raises:
        ValueError: If level is not a known log level.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.propagate = False

    if not level:
        logger.addHandler(logging.NullHandler())
        logger.setLevel(logging.CRITICAL + 1)
        return

    try:
        numeric_level = LOG_LEVELS[level.lower()]
    except KeyError:
        raise ValueError(f"invalid log level '{level}'") from None

    handler = RichHandler(
        console=console if console is not None else Console(stderr=True),
        show_path=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(numeric_level)
