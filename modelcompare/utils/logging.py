"""Logging configuration for modelcompare.

Modules log through ``logging.getLogger(__name__)``, so every record lands
under the ``modelcompare`` logger.  Library code never configures handlers;
applications (and the CLI) call :func:`setup_logging` once.
"""
from __future__ import annotations

import logging
import sys

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "modelcompare"

LEVEL_MAP = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def _parse_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    # Default to WARNING if invalid
    return LEVEL_MAP.get(level.upper(), logging.WARNING)


def setup_logging(
    level: str | int = logging.WARNING,
    use_rich: bool = True,
    console: Console | None = None,
) -> logging.Logger:
    """Attach a console handler to the ``modelcompare`` logger.

    Args:
        level: Logging level as a name (``"DEBUG"``) or constant.
        use_rich: Render through ``rich.logging.RichHandler``; otherwise a
            plain stderr stream handler is used.
        console: Rich console for the handler (default: a stderr console).

    Returns:
        The configured ``modelcompare`` logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()

    level_int = _parse_level(level)
    logger.setLevel(level_int)

    handler: logging.Handler
    if use_rich:
        handler = RichHandler(
            console=console or Console(stderr=True),
            level=level_int,
            show_path=False,
            markup=False,
            rich_tracebacks=True,
            log_time_format="[%X]",
        )
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(level_int)
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s [%(levelname)-8s] %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
    logger.addHandler(handler)
    return logger
