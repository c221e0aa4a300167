"""Pytest configuration and shared fixtures."""
from collections.abc import Callable
from datetime import datetime, timedelta

import pytest

from daynight.chat import ChatSession, Clock, ReplyScheduler, ScheduledCall
from daynight.contacts import StaticContactProvider


class ManualClock(Clock):
    """Clock that only moves when told to."""

    def __init__(self, start: datetime) -> None:
        self.current = start

    def now(self) -> datetime:
        return self.current

    def advance(self, seconds: float) -> None:
        self.current += timedelta(seconds=seconds)


class ManualScheduler(ReplyScheduler):
    """Scheduler driven by advance(); fires due callbacks in due-time order."""

    def __init__(self, clock: ManualClock) -> None:
        self._clock = clock
        self._elapsed = 0.0
        self._sequence = 0
        self._queue: list[tuple[float, int, ScheduledCall, Callable[[], None]]] = []

    @property
    def pending(self) -> int:
        return sum(1 for _, _, call, _ in self._queue if not call.cancelled)

    def call_later(self, delay: float, callback: Callable[[], None]) -> ScheduledCall:
        call = ScheduledCall(lambda: None)
        self._sequence += 1
        self._queue.append((self._elapsed + delay, self._sequence, call, callback))
        return call

    def advance(self, seconds: float) -> None:
        """Move time forward, firing every callback that falls due."""
        target = self._elapsed + seconds
        while True:
            due = [item for item in self._queue if item[0] <= target]
            if not due:
                break
            item = min(due, key=lambda entry: (entry[0], entry[1]))
            self._queue.remove(item)
            when, _, call, callback = item
            self._clock.advance(when - self._elapsed)
            self._elapsed = when
            if not call.cancelled:
                callback()
        self._clock.advance(target - self._elapsed)
        self._elapsed = target


@pytest.fixture
def contacts():
    """Return the seed contacts."""
    return StaticContactProvider().list_contacts()


@pytest.fixture
def contact(contacts):
    """Return the first seed contact."""
    return contacts[0]


@pytest.fixture
def clock():
    """Return a manual clock starting at 09:05 local time."""
    return ManualClock(datetime(2024, 5, 17, 9, 5, 0))


@pytest.fixture
def scheduler(clock):
    """Return a manual scheduler tied to the manual clock."""
    return ManualScheduler(clock)


@pytest.fixture
def session(contact, scheduler, clock):
    """Return a chat session driven by the manual scheduler."""
    return ChatSession(contact, scheduler, clock=clock)


@pytest.fixture(scope="session")
def session_factory():
    """Return a builder for fresh sessions.

    Session-scoped so hypothesis tests can build one session per example.
    """
    def _build() -> tuple[ChatSession, ManualScheduler]:
        clock = ManualClock(datetime(2024, 5, 17, 21, 30, 0))
        scheduler = ManualScheduler(clock)
        contact = StaticContactProvider().list_contacts()[0]
        return ChatSession(contact, scheduler, clock=clock), scheduler

    return _build
