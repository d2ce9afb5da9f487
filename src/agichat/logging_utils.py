"""Logging configuration.

Core modules log through logging.getLogger(__name__) under the "agichat"
namespace. Front ends decide where records go: the CLI renders them with
Rich on stderr, the TUI forwards them to its log panel.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "agichat"

# Level names accepted on the command line and by the log panel
LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def parse_level(level: str | int | None, default: int = logging.WARNING) -> int:
    """Convert a level name (debug/info/warning/error) to its numeric value."""
    if level is None:
        return default
    if isinstance(level, int):
        return level
    return LEVELS.get(level.lower(), default)


def configure_logging(
    level: str | int | None = None,
    handler: logging.Handler | None = None,
) -> logging.Logger:
    """Route agichat log records to a single handler.

    Args:
        level: Threshold name or number (default WARNING)
        handler: Destination; defaults to a RichHandler on stderr

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    for existing in list(logger.handlers):
        logger.removeHandler(existing)

    if handler is None:
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))

    logger.addHandler(handler)
    logger.setLevel(parse_level(level))
    logger.propagate = False
    return logger
