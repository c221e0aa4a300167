"""Data model for contacts."""

from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field


class Contact(BaseModel):
    """A person the user can chat with.

    Contacts are created once from seed data and never mutated.
    """

    model_config = ConfigDict(frozen=True)

    id: UUID = Field(default_factory=uuid4, description="Identity used for list rendering")
    name: str = Field(description="Display name")
    color: str = Field(description="Avatar color as a CSS color string")
