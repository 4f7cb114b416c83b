"""Logging setup for errstatus."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_PREFIX = "errstatus"


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the ``errstatus`` namespace."""
    if name == LOGGER_PREFIX or name.startswith(f"{LOGGER_PREFIX}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_PREFIX}.{name}")


def configure_logging(level: str = "warning", console: Console | None = None) -> logging.Logger:
    """Send errstatus diagnostics to stderr through rich.

    Replaces any handlers previously installed on the package logger.
    """
    logger = logging.getLogger(LOGGER_PREFIX)
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=False,
        show_path=False,
    )
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, str(level or "warning").upper(), logging.WARNING))
    logger.propagate = False
    return logger
