"""Chat module for daynight.

Hides the session state and the timing of the scripted auto-reply.
"""

from .clock import Clock, SystemClock
from .config import AUTO_REPLY_DELAY, AUTO_REPLY_TEXT, TIME_FORMAT
from .formatting import format_timestamp
from .models import Message
from .scheduler import AsyncioScheduler, ReplyScheduler, ScheduledCall
from .session import ChatSession

__all__ = [
    "AUTO_REPLY_DELAY",
    "AUTO_REPLY_TEXT",
    "TIME_FORMAT",
    "AsyncioScheduler",
    "ChatSession",
    "Clock",
    "Message",
    "ReplyScheduler",
    "ScheduledCall",
    "SystemClock",
    "format_timestamp",
]
