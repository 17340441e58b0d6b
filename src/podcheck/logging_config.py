"""Logging setup; stdout stays reserved for the plugin status line."""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "podcheck"

stderr_console = Console(stderr=True)


def setup_logging(level: str = "WARNING") -> logging.Logger:
    """Attach a rich stderr handler to the package logger once."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper())

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(
            console=stderr_console,
            rich_tracebacks=True,
            show_path=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
        logger.addHandler(handler)

    logger.propagate = False
    return logger
