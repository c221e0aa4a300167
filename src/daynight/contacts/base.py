"""Abstract base class for contact providers.

The abstraction hides where the contact list comes from.
"""

from abc import ABC, abstractmethod

from .models import Contact


class ContactNotFoundError(LookupError):
    """Raised when a contact query matches nothing."""


class ContactProvider(ABC):
    """Abstract source of contacts."""

    @abstractmethod
    def list_contacts(self) -> list[Contact]:
        """Return the contacts in display order."""

    def find(self, query: str) -> Contact:
        """Find a contact by 1-based position or by name.

        Args:
            query: A position such as "2", or a case-insensitive part of the name

        Returns:
            The first matching contact

        Raises:
            ContactNotFoundError: If nothing matches
        """
        contacts = self.list_contacts()
        query = query.strip()

        if query.isdigit():
            position = int(query)
            if 1 <= position <= len(contacts):
                return contacts[position - 1]
            raise ContactNotFoundError(
                f"No contact at position {position} (choose 1-{len(contacts)})"
            )

        needle = query.casefold()
        if needle:
            for contact in contacts:
                if needle in contact.name.casefold():
                    return contact

        raise ContactNotFoundError(f"No contact matches '{query}'")
