"""Clock abstraction used to timestamp messages."""

from abc import ABC, abstractmethod
from datetime import datetime


class Clock(ABC):
    """Source of the current time."""

    @abstractmethod
    def now(self) -> datetime:
        """Return the current time."""


class SystemClock(Clock):
    """Local wall-clock time."""

    def now(self) -> datetime:
        return datetime.now()
