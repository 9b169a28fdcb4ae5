"""Application layer: use cases, ports, and DTOs. Depends only on domain."""

from contatos.application.contact_service import ContactService
from contatos.application.dto import (
    INVALID_NAME,
    INVALID_PHONE,
    MISSING_FIELDS,
    ContactDeleted,
    ContactSaved,
    ContactSummary,
    Invalid,
    NotFound,
)
from contatos.application.ports import ContactStore

__all__ = [
    "INVALID_NAME",
    "ContactDeleted",
    "ContactSaved",
    "ContactService",
    "ContactStore",
    "ContactSummary",
    "INVALID_PHONE",
    "Invalid",
    "MISSING_FIELDS",
    "NotFound",
]
