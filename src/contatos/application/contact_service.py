"""Contact list use cases: load, list, add, edit, delete. One in-memory list per service."""

import logging
import threading

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
from contatos.domain import Contact, format_phone, is_encodable, is_valid_phone

logger = logging.getLogger(__name__)


class ContactService:
    """Owns the ordered contact list; writes a full snapshot to the store after every change.

    Every operation holds one lock for its whole read-change-save sequence, so
    callers on different threads (the API's worker pool) act as a single writer.
    """

    def __init__(self, store: ContactStore) -> None:
        self._store = store
        self._contacts: list[Contact] = []
        self._lock = threading.Lock()

    def load(self) -> list[ContactSummary]:
        """Replace the list with the stored snapshot.

        Phones are re-formatted but not validated, so legacy values that
        fail is_valid_phone are kept and shown as they are.
        """
        with self._lock:
            self._contacts = [
                c.with_changes(phone_number=format_phone(c.phone_number))
                for c in self._store.load()
            ]
            logger.info("Loaded %d contacts", len(self._contacts))
            return self._summaries()

    def list_contacts(self) -> list[ContactSummary]:
        with self._lock:
            return self._summaries()

    def get_contact(self, index: int) -> ContactSummary | None:
        with self._lock:
            if not self._in_range(index):
                return None
            return self._summary(index)

    def format_phone_input(self, text: str | None) -> str:
        """Live formatting hook for the phone field."""
        return format_phone(text)

    def add_contact(self, full_name: str, phone: str) -> ContactSaved | Invalid:
        """Validate and append a new contact."""
        contact_or_invalid = self._build(full_name, phone)
        if isinstance(contact_or_invalid, Invalid):
            return contact_or_invalid
        with self._lock:
            self._contacts.append(contact_or_invalid)
            self._save()
            return self._saved(len(self._contacts) - 1)

    def update_contact(
        self, index: int, full_name: str, phone: str
    ) -> ContactSaved | Invalid | NotFound:
        """Validate and replace the contact at index with the edited values."""
        with self._lock:
            if not self._in_range(index):
                return NotFound(index=index)
            contact_or_invalid = self._build(full_name, phone)
            if isinstance(contact_or_invalid, Invalid):
                return contact_or_invalid
            self._contacts[index] = self._contacts[index].with_changes(
                full_name=contact_or_invalid.full_name,
                phone_number=contact_or_invalid.phone_number,
            )
            self._save()
            return self._saved(index)

    def delete_contact(self, index: int) -> ContactDeleted | NotFound:
        with self._lock:
            if not self._in_range(index):
                return NotFound(index=index)
            removed = self._contacts.pop(index)
            self._save()
            return ContactDeleted(index=index, full_name=removed.full_name)

    def _build(self, full_name: str, phone: str) -> Contact | Invalid:
        name = full_name or ""
        formatted = format_phone(phone)
        if not name.strip() or not formatted:
            return Invalid(reason=MISSING_FIELDS, phone_number=formatted)
        if not is_encodable(name):
            return Invalid(reason=INVALID_NAME, phone_number=formatted)
        if not is_valid_phone(formatted):
            return Invalid(reason=INVALID_PHONE, phone_number=formatted)
        return Contact(full_name=name, phone_number=formatted)

    # Helpers below expect the lock to be held.
    def _save(self) -> None:
        self._store.save(list(self._contacts))

    def _in_range(self, index: int) -> bool:
        return 0 <= index < len(self._contacts)

    def _summaries(self) -> list[ContactSummary]:
        return [self._summary(i) for i in range(len(self._contacts))]

    def _summary(self, index: int) -> ContactSummary:
        contact = self._contacts[index]
        return ContactSummary(
            index=index,
            full_name=contact.full_name,
            phone_number=contact.phone_number,
        )

    def _saved(self, index: int) -> ContactSaved:
        contact = self._contacts[index]
        return ContactSaved(
            index=index,
            full_name=contact.full_name,
            phone_number=contact.phone_number,
        )
