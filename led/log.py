"""
FILE: led/log.py
PURPOSE: Logging setup for the editor
EXPORTS:
  - configure_logging(level) -> None
DEPENDENCIES:
  - logging (stdlib)
  - os (LED_LOG_LEVEL environment variable)
  - rich.logging (RichHandler for readable stderr records)
NOTES:
  - Level precedence: explicit argument, then $LED_LOG_LEVEL, then WARNING
  - Records go to stderr so they never mix with buffer output on stdout
  - Safe to call more than once; the previous handler is replaced
"""

import logging
import os
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from .core.constants import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV

LOGGER_NAME = "led"


def configure_logging(level: Optional[str] = None) -> None:
    """
    Install a RichHandler on the package logger.

    Args:
        level: Level name (e.g., "DEBUG"); None reads $LED_LOG_LEVEL
    """
    name = (level or os.environ.get(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL).upper()
    numeric = logging.getLevelName(name)
    if not isinstance(numeric, int):
        numeric = logging.WARNING

    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(numeric)
    logger.propagate = False
