"""Custom Textual widgets for the TUI.

Hides widget implementation details:
- Contact row rendering
- Message bubble rendering and alignment
- Chat history scrolling
- Input bar submission
- Log panel filtering and coloring
"""

from datetime import datetime

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.events import Click
from textual.message import Message as TextualMessage
from textual.widgets import Button, Input, Label, ListItem, RichLog, Static

from ..chat import Message, format_timestamp
from ..contacts import Contact
from .config import (
    AVATAR_ICON,
    INPUT_PLACEHOLDER,
    LOG_TIMESTAMP_FORMAT,
    SEND_ICON,
    LogLevel,
)


class ContactItem(ListItem):
    """A contact row: colored avatar dot followed by the name."""

    def __init__(self, contact: Contact, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.contact = contact

    def compose(self) -> ComposeResult:
        with Horizontal():
            avatar = Static(AVATAR_ICON, classes="contact-avatar")
            avatar.styles.color = self.contact.color
            yield avatar
            yield Label(self.contact.name, classes="contact-name")


class MessageBubble(Vertical):
    """A rendered chat message: time above a bubble aligned by sender.

    Clicking the bubble copies the message text to the clipboard.
    """

    def __init__(self, message: Message, *args, **kwargs) -> None:
        side = "sent" if message.is_sent_by_me else "received"
        super().__init__(*args, classes=f"message-row {side}", **kwargs)
        self.message = message

    def compose(self) -> ComposeResult:
        yield Static(format_timestamp(self.message.timestamp), classes="message-time")
        # Text() keeps user input from being parsed as markup
        yield Static(Text(self.message.text), classes="message-bubble")

    def on_click(self, event: Click) -> None:
        """Copy message content to clipboard when clicked."""
        event.stop()
        self.app.copy_to_clipboard(self.message.text)
        self.app.notify("Message copied", timeout=2)


class ChatHistoryWidget(VerticalScroll):
    """Scrollable list of message bubbles in append order."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._message_count = 0

    @property
    def message_count(self) -> int:
        return self._message_count

    def add_message(self, message: Message) -> None:
        """Render a message at the bottom of the history."""
        self._message_count += 1
        self.mount(MessageBubble(message))
        self.border_subtitle = f"{self._message_count} messages"
        self.call_after_refresh(self.scroll_end, animate=False)


class ChatInputBar(Horizontal):
    """Chat input bar with a single-line Input and a Send button.

    The raw value is posted on submit; validation belongs to the session.
    """

    class Submitted(TextualMessage):
        """Message sent when user submits input."""

        def __init__(self, value: str) -> None:
            super().__init__()
            self.value = value

    def compose(self) -> ComposeResult:
        yield Input(placeholder=INPUT_PLACEHOLDER, id="chat-input")
        yield Button(SEND_ICON, id="send-btn").with_tooltip("Send message (Enter)")

    @property
    def value(self) -> str:
        return self.query_one("#chat-input", Input).value

    @value.setter
    def value(self, text: str) -> None:
        self.query_one("#chat-input", Input).value = text

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self.post_message(self.Submitted(event.value))

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "send-btn":
            event.stop()
            self.post_message(self.Submitted(self.value))

    def focus_input(self) -> None:
        """Focus the text input."""
        self.query_one("#chat-input", Input).focus()


class DebugPanel(RichLog):
    """Log panel for real-time tracing with level filtering.

    Shows timestamped log records from all components.
    Supports standard log levels: DEBUG < INFO < WARNING < ERROR.
    Hidden by default, shown with --log-level flag or toggled with Ctrl+D.
    """

    BORDER_TITLE = "Log"
    BORDER_SUBTITLE = "Trace log"

    LEVEL_COLORS = {
        LogLevel.DEBUG: "dim",
        LogLevel.INFO: "cyan",
        LogLevel.WARNING: "yellow",
        LogLevel.ERROR: "red",
    }

    COMPONENT_COLORS = {
        "TUI": "cyan",
        "Chat": "green",
        "Contacts": "magenta",
    }

    def __init__(
        self,
        *args,
        log_level: int = LogLevel.DEBUG,
        visible: bool = False,
        **kwargs
    ) -> None:
        super().__init__(
            *args,
            markup=True,
            highlight=False,
            auto_scroll=True,
            wrap=False,
            **kwargs
        )
        self._log_level = log_level
        self.display = visible
        self._update_subtitle()

    @property
    def log_level(self) -> int:
        """Current log level threshold."""
        return self._log_level

    def _update_subtitle(self) -> None:
        if self.display:
            self.border_subtitle = f"Level: {LogLevel.name(self._log_level)}"
        else:
            self.border_subtitle = "Hidden"

    def add_entry(
        self,
        component: str,
        message: str,
        level: int = LogLevel.DEBUG,
        timestamp: datetime | None = None,
    ) -> bool:
        """Add a log entry if it meets the current level threshold.

        Args:
            component: Component name (TUI, Chat, Contacts)
            message: Log message
            level: Log level (LogLevel.DEBUG, INFO, WARNING, ERROR)
            timestamp: When the record was created, defaults to now

        Returns:
            True if the entry was written
        """
        if level < self._log_level:
            return False

        stamp = (timestamp or datetime.now()).strftime(LOG_TIMESTAMP_FORMAT)
        level_color = self.LEVEL_COLORS.get(level, "white")
        comp_color = self.COMPONENT_COLORS.get(component, "white")

        line = Text.assemble(
            (f"{stamp} ", "dim"),
            (f"{LogLevel.name(level):<7} ", level_color),
            (f"[{component}] ", comp_color),
            message,
        )
        self.write(line)
        return True

    def show(self) -> None:
        """Show the log panel."""
        self.display = True
        self._update_subtitle()

    def hide(self) -> None:
        """Hide the log panel."""
        self.display = False
        self._update_subtitle()
