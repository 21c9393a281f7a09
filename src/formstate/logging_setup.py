"""
Logging setup for hosts and demos.

The library itself only emits debug records on the ``formstate`` loggers
and installs no handlers. Call ``configure_logging`` to see them.
"""

from __future__ import annotations

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "formstate"


def configure_logging(
    verbose: bool = False,
    log_file: str | None = None,
    console: Console | None = None,
) -> logging.Logger:
    """
    Configure console (rich) and optional file logging for ``formstate``.

    Args:
        verbose: Enable DEBUG level on console (default INFO)
        log_file: Path to log file (None for no file logging); always DEBUG
        console: Console to write to (a new stderr console by default)

    Returns:
        Configured ``formstate`` logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = RichHandler(
        console=console or Console(stderr=True), rich_tracebacks=True
    )
    console_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
    logger.addHandler(console_handler)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode="a")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(file_handler)

    logger.setLevel(logging.DEBUG)
    return logger
