"""Screens for the TUI.

This module hides the design decisions about:
- How the contact list and the chat view are laid out
- How a contact selection turns into a chat view
- How a chat view owns and tears down its session

ContactListScreen is the app's default screen; ChatScreen is pushed on
top of it for the selected contact and popped to go back.
"""

from rich.text import Text
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.screen import Screen
from textual.widgets import Footer, Input, ListView, Static

from ..chat import ChatSession, Clock
from ..contacts import Contact
from .callbacks import SessionCallback
from .config import MOON_ICON, SUN_ICON
from .timers import TextualScheduler
from .widgets import ChatHistoryWidget, ChatInputBar, ContactItem, DebugPanel


def _log_panel(screen: Screen) -> DebugPanel:
    """Create a log panel configured from the app's current log settings."""
    return DebugPanel(
        id="debug-panel",
        log_level=screen.app.panel_log_level,
        visible=screen.app.panel_visible,
    )


def _replay_log(screen: Screen) -> None:
    """Write the app's buffered log records into the screen's panel."""
    panel = screen.query_one("#debug-panel", DebugPanel)
    for record in screen.app.log_records:
        panel.add_entry(record.component, record.message, record.level, record.timestamp)


class ContactListScreen(Screen):
    """Static list of contacts. Selecting one opens a chat."""

    AUTO_FOCUS = "#contact-list"

    def __init__(self, contacts: list[Contact]) -> None:
        super().__init__()
        self._contacts = contacts

    @property
    def contacts(self) -> list[Contact]:
        return list(self._contacts)

    def compose(self) -> ComposeResult:
        yield Static("Contacts", id="contact-list-title")
        yield ListView(
            *(ContactItem(contact) for contact in self._contacts),
            id="contact-list",
        )
        yield _log_panel(self)
        yield Footer()

    def on_mount(self) -> None:
        _replay_log(self)

    def on_list_view_selected(self, event: ListView.Selected) -> None:
        """Open a chat with the selected contact."""
        if isinstance(event.item, ContactItem):
            self.app.open_chat(event.item.contact)


class ChatScreen(Screen):
    """Chat with one contact.

    Owns a fresh ChatSession; the session is closed (cancelling pending
    auto-replies) when the screen goes away.
    """

    AUTO_FOCUS = "#chat-input"

    BINDINGS = [
        Binding("escape", "back", "Back"),
    ]

    def __init__(self, contact: Contact, clock: Clock | None = None) -> None:
        super().__init__()
        self.contact = contact
        self.session = ChatSession(contact, TextualScheduler(self), clock=clock)

    def compose(self) -> ComposeResult:
        yield Static(Text(self.contact.name), id="chat-title")
        with Horizontal(id="sun-row", classes="decor-row"):
            yield Static(SUN_ICON, id="sun")
        yield ChatHistoryWidget(id="chat-history")
        with Horizontal(id="moon-row", classes="decor-row"):
            yield Static(MOON_ICON, id="moon")
        yield ChatInputBar(id="chat-input-bar")
        yield _log_panel(self)
        yield Footer()

    def on_mount(self) -> None:
        history = self.query_one("#chat-history", ChatHistoryWidget)
        SessionCallback(history, self.app).attach(self.session)
        _replay_log(self)
        self.app.write_log("TUI", f"Chat opened with {self.contact.name}")
        self.query_one("#chat-input-bar", ChatInputBar).focus_input()

    def on_unmount(self) -> None:
        self.session.close()

    def on_input_changed(self, event: Input.Changed) -> None:
        """Keep the session draft in step with the input field."""
        self.session.draft = event.value

    def on_chat_input_bar_submitted(self, event: ChatInputBar.Submitted) -> None:
        """Send the draft; the input shows whatever draft remains."""
        self.session.draft = event.value
        self.session.submit_draft()
        self.query_one("#chat-input-bar", ChatInputBar).value = self.session.draft

    def action_back(self) -> None:
        """Return to the contact list, discarding this session."""
        self.session.close()
        self.app.pop_screen()
