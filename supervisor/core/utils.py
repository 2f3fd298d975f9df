"""Shared utility functions for supervisor modules."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

LOGGER_NAME = "supervisor"


def configure_logging(level: str = "WARNING") -> logging.Logger:
    """Route supervisor logging to stderr through rich.

    Stdout is reserved for command output, so the handler is always bound to
    a stderr console. Only the ``supervisor`` logger is touched; handlers on
    the root logger are left alone. Calling again replaces the previous handler.

    Args:
        level: One of LOG_LEVELS (case-insensitive)

    Returns:
        The configured ``supervisor`` logger

    Raises:
        ValueError: If level is not a known log level name
    """
    level_name = level.upper()
    if level_name not in LOG_LEVELS:
        raise ValueError(f"Unknown log level '{level}'. Expected one of: {', '.join(LOG_LEVELS)}")

    logger = logging.getLogger(LOGGER_NAME)
    for handler in logger.handlers[:]:
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)
            handler.close()

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=level_name == "DEBUG",
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s", datefmt="[%X]"))
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level_name))
    return logger
