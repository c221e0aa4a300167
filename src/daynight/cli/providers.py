"""Provider factory functions for CLI.

Centralizes creation of contacts and UI settings from environment variables.
Hides configuration details from command implementations.
"""

import os

from ..contacts import ContactProvider, StaticContactProvider

DEFAULT_THEME = "day"


def get_contacts() -> ContactProvider:
    """Create the contact provider.

    Returns:
        Provider for the built-in seed contacts
    """
    return StaticContactProvider()


def get_log_level(override: str | None = None) -> str | None:
    """Resolve the log panel level.

    Args:
        override: Value from a command-line option, wins when given

    Returns:
        Level name, or None to keep the log panel hidden

    Environment variables:
        DAYNIGHT_LOG_LEVEL: debug, info, warning or error (default: unset)
    """
    if override:
        return override
    return os.getenv("DAYNIGHT_LOG_LEVEL") or None


def get_theme_name(override: str | None = None) -> str:
    """Resolve the UI theme name.

    Args:
        override: Value from a command-line option, wins when given

    Environment variables:
        DAYNIGHT_THEME: day or night (default: day)
    """
    if override:
        return override
    return os.getenv("DAYNIGHT_THEME", DEFAULT_THEME)
