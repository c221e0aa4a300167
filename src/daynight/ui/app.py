"""Main Textual TUI application.

Orchestrates navigation between the contact list and chat screens,
the log panel and the day/night themes.
"""

import asyncio
from collections import deque

from textual.app import App
from textual.binding import Binding
from textual.screen import Screen

from ..chat import Clock
from ..contacts import Contact, ContactProvider, StaticContactProvider
from .config import LOG_BUFFER_SIZE, LogLevel
from .models import LogRecord
from .screens import ChatScreen, ContactListScreen
from .styles import APP_CSS
from .themes import THEMES, get_theme
from .widgets import DebugPanel


class DayNightApp(App):
    """Textual TUI for the day/night messenger."""

    CSS = APP_CSS
    TITLE = "Day & Night"

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit"),
        Binding("ctrl+d", "toggle_debug", "Log"),
        Binding("ctrl+t", "toggle_theme", "Day/Night"),
    ]

    def __init__(
        self,
        contacts: ContactProvider | None = None,
        log_level: str | None = None,
        theme: str = "day",
        clock: Clock | None = None,
    ) -> None:
        super().__init__()
        self._contacts = contacts or StaticContactProvider()
        self._clock = clock
        self._theme_name = get_theme(theme).name
        self._panel_log_level = LogLevel.from_string(log_level) if log_level else LogLevel.DEBUG
        self._panel_visible = log_level is not None
        self._log_records: deque[LogRecord] = deque(maxlen=LOG_BUFFER_SIZE)

    @property
    def panel_log_level(self) -> int:
        return self._panel_log_level

    @property
    def panel_visible(self) -> bool:
        return self._panel_visible

    @property
    def log_records(self) -> list[LogRecord]:
        return list(self._log_records)

    def get_default_screen(self) -> Screen:
        return ContactListScreen(self._contacts.list_contacts())

    def on_mount(self) -> None:
        """Called when app is mounted."""
        for theme in THEMES.values():
            self.register_theme(theme)
        self.theme = self._theme_name

        contact_count = len(self._contacts.list_contacts())
        self.write_log("Contacts", f"Loaded {contact_count} contacts", LogLevel.INFO)
        if self._panel_visible:
            self.write_log("TUI", f"Log panel enabled with level: {LogLevel.name(self._panel_log_level)}", LogLevel.INFO)

    def write_log(self, component: str, message: str, level: int = LogLevel.DEBUG) -> None:
        """Record a log entry and show it in the current screen's log panel.

        Args:
            component: Component name (TUI, Chat, Contacts, etc.)
            message: Log message
            level: Log level (LogLevel.DEBUG, INFO, WARNING, ERROR)
        """
        record = LogRecord(component=component, message=message, level=level)
        self._log_records.append(record)
        # Screens replay the buffer on mount, so only a live screen needs the entry now
        for panel in self._live_panels():
            panel.add_entry(record.component, record.message, record.level, record.timestamp)

    def _live_panels(self) -> list[DebugPanel]:
        if not self.screen_stack:
            return []
        return list(self.screen_stack[-1].query(DebugPanel))

    def open_chat(self, contact: Contact) -> ChatScreen:
        """Push a chat screen with a fresh session for `contact`."""
        screen = ChatScreen(contact, clock=self._clock)
        self.push_screen(screen)
        return screen

    def action_toggle_debug(self) -> None:
        """Toggle the log panel visibility."""
        self._panel_visible = not self._panel_visible
        for panel in self._live_panels():
            if self._panel_visible:
                panel.show()
            else:
                panel.hide()
        self.notify(f"Log panel {'shown' if self._panel_visible else 'hidden'}", timeout=2)

    def action_toggle_theme(self) -> None:
        """Switch between the day and night themes."""
        day, night = THEMES["day"].name, THEMES["night"].name
        self.theme = night if self.theme == day else day
        self.write_log("TUI", f"Theme switched to {self.theme}", LogLevel.INFO)


async def run_textual_tui(
    contacts: ContactProvider | None = None,
    log_level: str | None = None,
    theme: str = "day",
) -> None:
    """Run the Textual TUI.

    Args:
        contacts: Contact provider, defaults to the built-in seed contacts
        log_level: Log level for panel (debug/info/warning/error), None to hide
        theme: "day" or "night"
    """
    app = DayNightApp(contacts=contacts, log_level=log_level, theme=theme)
    try:
        await app.run_async()
    except (KeyboardInterrupt, asyncio.CancelledError):
        pass
