"""Logging setup.

Modules log through logging.getLogger(__name__). Applications (the CLI)
call configure_logging() once to install a rich handler on the package
logger. Library users keep full control: nothing is configured on import.
"""

from __future__ import annotations

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "lengthlint"
LOG_LEVEL_ENV = "LENGTHLINT_LOG_LEVEL"


def resolve_level(default: int = logging.WARNING) -> int:
    """Read log level from LENGTHLINT_LOG_LEVEL.

    Args:
        default: Level used when the variable is unset or invalid

    Returns:
        Numeric logging level
    """
    name = os.getenv(LOG_LEVEL_ENV)
    if not name:
        return default
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else default


def configure_logging(level: int | None = None, console: Console | None = None) -> logging.Logger:
    """Install a RichHandler on the package logger.

    Idempotent: a second call only updates the level.

    Args:
        level: Explicit level; None reads LENGTHLINT_LOG_LEVEL (default WARNING)
        console: Console for the handler (default: stderr)

    Returns:
        The package logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level if level is not None else resolve_level())

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(
            console=console or Console(stderr=True),
            show_time=False,
            show_path=False,
            markup=False,
        )
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        logger.addHandler(handler)
        logger.propagate = False

    return logger
