"""Result and summary types returned by ContactService."""

from dataclasses import dataclass

MISSING_FIELDS = "missing_fields"
INVALID_PHONE = "invalid_phone"
INVALID_NAME = "invalid_name"


@dataclass(frozen=True)
class ContactSummary:
    """One contact as shown to a surface, with its position in the list."""

    index: int
    full_name: str
    phone_number: str


@dataclass(frozen=True)
class ContactSaved:
    """A contact was added or edited and the snapshot was written."""

    index: int
    full_name: str
    phone_number: str


@dataclass(frozen=True)
class ContactDeleted:
    index: int
    full_name: str


@dataclass(frozen=True)
class Invalid:
    """Submission rejected. reason is MISSING_FIELDS, INVALID_PHONE or INVALID_NAME."""

    reason: str
    phone_number: str = ""


@dataclass(frozen=True)
class NotFound:
    index: int
