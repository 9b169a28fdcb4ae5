"""Infrastructure layer: concrete implementations of application ports."""

from contatos.infrastructure.json_store import JsonContactStore
from contatos.infrastructure.memory_store import InMemoryContactStore
from contatos.infrastructure.phone import phone_to_e164

__all__ = [
    "InMemoryContactStore",
    "JsonContactStore",
    "phone_to_e164",
]
