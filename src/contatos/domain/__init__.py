"""Domain layer: entities, value objects, and phone rules. No dependencies on outer layers."""

from contatos.domain.entities import FULL_NAME_KEY, PHONE_NUMBER_KEY, Contact, is_encodable
from contatos.domain.phone import format_phone, is_valid_phone

__all__ = [
    "Contact",
    "FULL_NAME_KEY",
    "PHONE_NUMBER_KEY",
    "format_phone",
    "is_encodable",
    "is_valid_phone",
]
