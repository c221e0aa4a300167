"""UI configuration constants.

Centralizes magic numbers and configuration values for the UI module.
"""


class LogLevel:
    """Log level constants with numeric values for comparison.

    Standard logging hierarchy: DEBUG < INFO < WARNING < ERROR
    Lower numeric value = more verbose (shows more messages).
    """

    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40

    _names = {
        DEBUG: "DEBUG",
        INFO: "INFO",
        WARNING: "WARNING",
        ERROR: "ERROR",
    }

    _from_string = {
        "debug": DEBUG,
        "info": INFO,
        "warning": WARNING,
        "error": ERROR,
    }

    @classmethod
    def name(cls, level: int) -> str:
        """Get the name for a log level."""
        return cls._names.get(level, "UNKNOWN")

    @classmethod
    def from_string(cls, level_str: str) -> int:
        """Convert string to log level. Returns DEBUG if invalid."""
        return cls._from_string.get(level_str.lower(), cls.DEBUG)


# Log panel configuration
LOG_TIMESTAMP_FORMAT = "%H:%M:%S"
LOG_BUFFER_SIZE = 500  # Records kept for replay when a new screen mounts its panel

# Chat input configuration
INPUT_PLACEHOLDER = "Type here"

# Decorations drawn on the chat background
SUN_ICON = "☀"
MOON_ICON = "☾"
AVATAR_ICON = "●"
SEND_ICON = "➤"
