"""
Contatos core: clean-architecture layout.

- domain: Contact and the Brazilian phone rules. No outer dependencies.
- application: use cases (ContactService), ports (ContactStore), DTOs.
- infrastructure: adapters (JsonContactStore, InMemoryContactStore), E.164 view.
"""

from contatos.application import (
    ContactDeleted,
    ContactSaved,
    ContactService,
    ContactStore,
    ContactSummary,
    Invalid,
    NotFound,
)
from contatos.domain import Contact, format_phone, is_valid_phone
from contatos.infrastructure import InMemoryContactStore, JsonContactStore

__all__ = [
    "Contact",
    "ContactDeleted",
    "ContactSaved",
    "ContactService",
    "ContactStore",
    "ContactSummary",
    "InMemoryContactStore",
    "Invalid",
    "JsonContactStore",
    "NotFound",
    "format_phone",
    "is_valid_phone",
]
