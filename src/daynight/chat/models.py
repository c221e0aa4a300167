"""Data models for chat sessions."""

from datetime import datetime
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field


class Message(BaseModel):
    """A single chat message. Immutable once created."""

    model_config = ConfigDict(frozen=True)

    id: UUID = Field(default_factory=uuid4, description="Identity used for list rendering")
    text: str = Field(description="Message text exactly as submitted")
    is_sent_by_me: bool = Field(description="True for the local user, False for the peer")
    timestamp: datetime = Field(description="Creation time")
