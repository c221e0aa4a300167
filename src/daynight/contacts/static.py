"""Hard-coded contact list."""

from .base import ContactProvider
from .models import Contact

# (name, avatar color) pairs in display order
SEED_CONTACTS: tuple[tuple[str, str], ...] = (
    ("🇫🇷 김지우", "#ffa500"),
    ("🇮🇳 박규태", "#bfbfe6"),
    ("🇨🇦 이은혜", "#0000ff"),
)


class StaticContactProvider(ContactProvider):
    """Contact provider backed by the fixed seed list.

    Contacts are built once per provider, so ids stay stable for its lifetime.
    """

    def __init__(self, seed: tuple[tuple[str, str], ...] = SEED_CONTACTS) -> None:
        self._contacts = [Contact(name=name, color=color) for name, color in seed]

    def list_contacts(self) -> list[Contact]:
        return list(self._contacts)
