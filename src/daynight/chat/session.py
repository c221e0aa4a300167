"""Chat session state and the send/auto-reply interaction.

A session belongs to one chat view for one contact. It owns the ordered
message list and the draft, and it is the only thing that mutates them.
All mutation happens on the event loop that drives the scheduler.
"""

from collections.abc import Callable
from ..contacts import Contact
from .clock import Clock, SystemClock
from .config import AUTO_REPLY_DELAY, AUTO_REPLY_TEXT, LOG_COMPONENT
from .models import Message
from .scheduler import ReplyScheduler, ScheduledCall


class ChatSession:
    """Message history and draft for a single chat with one contact.

    Messages are append-only. Every successful send schedules one
    independent auto-reply; `close()` cancels the replies still pending.

    Example:
        session = ChatSession(contact, AsyncioScheduler())
        session.set_message_callback(render)
        session.send_message("hello")
        # 0.5s later render() receives the scripted reply
    """

    def __init__(
        self,
        contact: Contact,
        scheduler: ReplyScheduler,
        clock: Clock | None = None,
    ) -> None:
        self._contact = contact
        self._scheduler = scheduler
        self._clock = clock or SystemClock()
        self._messages: list[Message] = []
        self._pending: set[ScheduledCall] = set()
        self._closed = False
        self._message_callback: Callable[[Message], None] | None = None
        self._debug_callback: Callable[[str, str, str], None] | None = None
        self.draft = ""

    @property
    def contact(self) -> Contact:
        return self._contact

    @property
    def messages(self) -> list[Message]:
        """Snapshot of the messages in append order."""
        return list(self._messages)

    @property
    def pending_replies(self) -> int:
        """Number of auto-replies scheduled but not yet delivered."""
        return len(self._pending)

    @property
    def closed(self) -> bool:
        return self._closed

    def set_message_callback(self, callback: Callable[[Message], None] | None) -> None:
        """Set the callback invoked with every appended message.

        Args:
            callback: Callable(message: Message), or None to detach
        """
        self._message_callback = callback

    def set_debug_callback(self, callback: Callable[[str, str, str], None] | None) -> None:
        """Set the debug callback for logging.

        Args:
            callback: Callable(level: str, component: str, message: str)
                      level: 'debug', 'info', 'warning', 'error'
        """
        self._debug_callback = callback

    def _debug(self, level: str, message: str) -> None:
        if self._debug_callback:
            self._debug_callback(level, LOG_COMPONENT, message)

    def send_message(self, text: str) -> Message | None:
        """Send a message as the local user.

        Whitespace-only text is silently ignored: nothing is appended and
        the draft is left as it was.

        Args:
            text: Message text; stored untrimmed

        Returns:
            The appended message, or None if the text was rejected
        """
        if self._closed:
            self._debug("warning", f"Send ignored, session with {self._contact.name} is closed")
            return None

        if not text.strip():
            self._debug("debug", "Rejected empty message")
            return None

        message = Message(text=text, is_sent_by_me=True, timestamp=self._clock.now())
        self._append(message)
        self.draft = ""
        self._schedule_reply()
        return message

    def submit_draft(self) -> Message | None:
        """Send the current draft."""
        return self.send_message(self.draft)

    def close(self) -> None:
        """End the session and cancel every pending auto-reply."""
        if self._closed:
            return
        self._closed = True

        cancelled = len(self._pending)
        for call in self._pending:
            call.cancel()
        self._pending.clear()
        self._message_callback = None

        self._debug(
            "info",
            f"Session with {self._contact.name} closed "
            f"({len(self._messages)} messages, {cancelled} pending replies cancelled)",
        )

    def _schedule_reply(self) -> None:
        call: ScheduledCall | None = None
        delivered = False

        def _deliver() -> None:
            nonlocal delivered
            delivered = True
            self._pending.discard(call)
            if self._closed:
                return
            reply = Message(
                text=AUTO_REPLY_TEXT,
                is_sent_by_me=False,
                timestamp=self._clock.now(),
            )
            self._append(reply)

        call = self._scheduler.call_later(AUTO_REPLY_DELAY, _deliver)
        # A scheduler may run the callback before call_later returns
        if not delivered:
            self._pending.add(call)
        self._debug("debug", f"Auto-reply scheduled in {AUTO_REPLY_DELAY}s ({len(self._pending)} pending)")

    def _append(self, message: Message) -> None:
        self._messages.append(message)
        sender = "me" if message.is_sent_by_me else self._contact.name
        self._debug("info", f"Message #{len(self._messages)} from {sender}")
        if self._message_callback:
            self._message_callback(message)
