"""Timestamp formatting for message display."""

from datetime import datetime

from .config import TIME_FORMAT


def format_timestamp(timestamp: datetime) -> str:
    """Format a message timestamp as 24-hour "HH:MM" in local time.

    Naive datetimes are taken to already be local time.
    """
    if timestamp.tzinfo is not None:
        timestamp = timestamp.astimezone()
    return timestamp.strftime(TIME_FORMAT)
