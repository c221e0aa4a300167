"""Textual-backed scheduler for chat auto-replies.

Timers are owned by a message pump (usually the chat screen), so they
fire on the UI event loop and are stopped with it.
"""

from collections.abc import Callable

from textual.message_pump import MessagePump

from ..chat import ReplyScheduler, ScheduledCall


class TextualScheduler(ReplyScheduler):
    """Schedules one-shot callbacks with `MessagePump.set_timer`."""

    def __init__(self, pump: MessagePump) -> None:
        self._pump = pump

    def call_later(self, delay: float, callback: Callable[[], None]) -> ScheduledCall:
        timer = self._pump.set_timer(delay, callback, name="auto-reply")
        return ScheduledCall(timer.stop)
