"""In-memory implementation of ContactStore (no file)."""

from collections.abc import Sequence

from contatos.domain import Contact


class InMemoryContactStore:
    """Keeps the last saved snapshot in memory. Order preserved."""

    def __init__(self, contacts: Sequence[Contact] | None = None) -> None:
        self._contacts: list[Contact] = list(contacts or [])
        self.save_count = 0

    def load(self) -> list[Contact]:
        return list(self._contacts)

    def save(self, contacts: Sequence[Contact]) -> None:
        self._contacts = list(contacts)
        self.save_count += 1
