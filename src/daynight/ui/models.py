"""Data models for the TUI.

Hides the internal representation of log records kept by the app.
"""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class LogRecord:
    """A log entry shown in the log panel."""

    component: str
    message: str
    level: int
    timestamp: datetime = field(default_factory=datetime.now)
