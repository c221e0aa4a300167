"""Contacts module for daynight.

Provides the seed contacts shown on the contact list screen.
"""

from .base import ContactNotFoundError, ContactProvider
from .models import Contact
from .static import SEED_CONTACTS, StaticContactProvider

__all__ = [
    "Contact",
    "ContactNotFoundError",
    "ContactProvider",
    "SEED_CONTACTS",
    "StaticContactProvider",
]
