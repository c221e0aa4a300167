"""Callback interface for ChatSession integration.

Hides the details of how the TUI receives updates from a session.
Session callbacks run on the UI event loop (the session is driven by
Textual timers), so widgets are updated directly.
"""

from typing import TYPE_CHECKING

from ..chat import ChatSession, Message
from .config import LogLevel

if TYPE_CHECKING:
    from .app import DayNightApp
    from .widgets import ChatHistoryWidget


class SessionCallback:
    """Routes session messages to the history widget and log records to the app."""

    def __init__(self, history: "ChatHistoryWidget", app: "DayNightApp") -> None:
        self.history = history
        self.app = app

    def attach(self, session: ChatSession) -> None:
        """Register this handler on a session."""
        session.set_message_callback(self.on_message)
        session.set_debug_callback(self.on_debug)

    def on_message(self, message: Message) -> None:
        """Render a newly appended message."""
        self.history.add_message(message)

    def on_debug(self, level: str, component: str, message: str) -> None:
        """Forward a session log record to the app log."""
        self.app.write_log(component, message, LogLevel.from_string(level))
