"""
Daynight: a mock messenger with a contact list, local chat sessions and a scripted auto-reply.

This package follows Parnas's information hiding principles,
where each module hides a specific design decision.
"""

__version__ = "0.1.0"

from .chat import (
    AUTO_REPLY_DELAY,
    AUTO_REPLY_TEXT,
    ChatSession,
    Message,
    format_timestamp,
)
from .contacts import Contact, ContactNotFoundError, ContactProvider, StaticContactProvider

__all__ = [
    "AUTO_REPLY_DELAY",
    "AUTO_REPLY_TEXT",
    "ChatSession",
    "Contact",
    "ContactNotFoundError",
    "ContactProvider",
    "Message",
    "StaticContactProvider",
    "format_timestamp",
]
