"""Logging setup for the nudgekit package."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "nudgekit"


def setup_logging(
    level: int = logging.INFO,
    console: Console | None = None,
) -> logging.Logger:
    """Attach a rich handler to the package logger once and set its level."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(
            console=console or Console(stderr=True),
            show_path=False,
            rich_tracebacks=False,
        )
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        logger.addHandler(handler)

    for handler in logger.handlers:
        handler.setLevel(level)

    return logger
