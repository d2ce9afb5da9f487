"""UI configuration constants.

Centralizes magic numbers and configuration values for the UI module.
"""

import logging

from ..logging_utils import parse_level
from ..session import ViewState


class LogLevel:
    """Log level constants for the log panel.

    Values match the stdlib logging levels so records can be compared
    directly: DEBUG < INFO < WARNING < ERROR.
    """

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR

    _names = {
        DEBUG: "DEBUG",
        INFO: "INFO",
        WARNING: "WARN",
        ERROR: "ERROR",
    }

    @classmethod
    def name(cls, level: int) -> str:
        """Get the short name for a log level."""
        if level >= cls.ERROR:
            return cls._names[cls.ERROR]
        return cls._names.get(level, "UNKNOWN")

    @classmethod
    def from_string(cls, level_str: str) -> int:
        """Convert string to log level. Returns DEBUG if invalid."""
        return parse_level(level_str, default=cls.DEBUG)


# Sidebar order; CONVERSATION sits apart at the bottom
NAV_VIEWS = (ViewState.HOME, ViewState.FEATURES, ViewState.EXAMPLES, ViewState.SAFETY)

# Input history configuration
INPUT_HISTORY_MAX_SIZE = 100  # Maximum entries in input history

# Log panel configuration
LOG_TIMESTAMP_FORMAT = "%H:%M:%S"
LOG_MAX_MESSAGE_LENGTH = 500  # Characters before truncating log messages

# Chat display configuration
USER_LABEL = "You"
MODEL_LABEL = "AGI Response"
