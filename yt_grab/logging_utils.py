"""Package logger, rendered through rich so it shares the menu's console."""

from __future__ import annotations

import logging
from typing import Optional, Union

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "yt_grab"


def configure_logging(
    console: Optional[Console] = None, level: Union[int, str] = logging.WARNING
) -> logging.Logger:
    """Bind the package logger to ``console``, replacing earlier handlers."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    for h in logger.handlers[:]:
        logger.removeHandler(h)
    handler = RichHandler(
        console=console, show_path=False, rich_tracebacks=True, markup=False
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    return logger


def get_logger() -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    if not logger.handlers:
        # Library use without run_cli: warnings and errors only
        configure_logging()
    return logger
