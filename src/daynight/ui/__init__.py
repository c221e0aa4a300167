"""Terminal UI module for daynight.

Provides a Textual-based TUI with a contact list and chat screens.

Module structure (Parnas principle - each module hides a design decision):
- models.py: Data structures (log record representation)
- widgets.py: Custom widgets (contact rows, message bubbles, input bar, log panel)
- styles.py: CSS styling (layout decisions)
- themes.py: Color palettes for day and night
- screens.py: Contact list and chat screens (navigation flow)
- timers.py: Textual timers behind the chat reply scheduler
- callbacks.py: Session integration (how TUI receives updates)
- app.py: Application orchestration (screens, log panel, themes)
"""

from .app import DayNightApp, run_textual_tui
from .callbacks import SessionCallback
from .config import LogLevel
from .models import LogRecord
from .screens import ChatScreen, ContactListScreen
from .timers import TextualScheduler
from .widgets import ChatHistoryWidget, ChatInputBar, ContactItem, DebugPanel, MessageBubble

__all__ = [
    "ChatHistoryWidget",
    "ChatInputBar",
    "ChatScreen",
    "ContactItem",
    "ContactListScreen",
    "DayNightApp",
    "DebugPanel",
    "LogLevel",
    "LogRecord",
    "MessageBubble",
    "SessionCallback",
    "TextualScheduler",
    "run_textual_tui",
]
