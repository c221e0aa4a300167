"""One-shot delayed callbacks.

This module hides how a deferred action gets back onto the event loop
that owns the session state. The session only sees `call_later` and a
cancellable handle.
"""

import asyncio
from abc import ABC, abstractmethod
from collections.abc import Callable


class ScheduledCall:
    """Handle for a pending one-shot callback.

    Compared by identity, so handles can be kept in sets.
    """

    def __init__(self, cancel: Callable[[], None]) -> None:
        self._cancel = cancel
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        """Cancel the callback. Calling twice is harmless."""
        if self._cancelled:
            return
        self._cancelled = True
        self._cancel()


class ReplyScheduler(ABC):
    """Schedules callbacks to run later on the owning event loop."""

    @abstractmethod
    def call_later(self, delay: float, callback: Callable[[], None]) -> ScheduledCall:
        """Run `callback` once after `delay` seconds.

        Args:
            delay: Seconds to wait
            callback: Zero-argument callable, run on the owning loop

        Returns:
            Handle that can cancel the pending call
        """


class AsyncioScheduler(ReplyScheduler):
    """Scheduler backed by an asyncio event loop.

    Uses the running loop when none is given, so it must be created
    (or first used) from inside a coroutine.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        return self._loop

    def call_later(self, delay: float, callback: Callable[[], None]) -> ScheduledCall:
        handle = self.loop.call_later(delay, callback)
        return ScheduledCall(handle.cancel)
