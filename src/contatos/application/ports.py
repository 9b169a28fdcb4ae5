"""Application ports (interfaces). Implemented by infrastructure adapters."""

from collections.abc import Sequence
from typing import Protocol

from contatos.domain import Contact


class ContactStore(Protocol):
    """Durable snapshot of the ordered contact list."""

    def load(self) -> list[Contact]:
        """Return the stored contacts in order. Never raises; failure gives []."""
        ...

    def save(self, contacts: Sequence[Contact]) -> None:
        """Overwrite the snapshot with contacts. Failures are logged, not raised."""
        ...
