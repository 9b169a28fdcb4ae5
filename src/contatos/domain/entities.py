"""Domain entities: Contact."""

from dataclasses import dataclass, replace

# Field names of the persisted JSON records.
FULL_NAME_KEY = "fullName"
PHONE_NUMBER_KEY = "phoneNumber"


def is_encodable(text: str) -> bool:
    """True if text can be written as UTF-8 (no lone surrogates)."""
    try:
        text.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


@dataclass(frozen=True)
class Contact:
    """
    A person in the contact list: full name and phone number.
    A Contact is immutable; an edit produces a new Contact.
    """

    full_name: str = ""
    phone_number: str = ""

    def with_changes(
        self,
        *,
        full_name: str | None = None,
        phone_number: str | None = None,
    ) -> "Contact":
        """Return a copy with the given fields replaced."""
        changes = {}
        if full_name is not None:
            changes["full_name"] = full_name
        if phone_number is not None:
            changes["phone_number"] = phone_number
        return replace(self, **changes)

    def to_dict(self) -> dict[str, str]:
        return {FULL_NAME_KEY: self.full_name, PHONE_NUMBER_KEY: self.phone_number}

    @classmethod
    def from_dict(cls, data: object) -> "Contact":
        """Build a Contact from one stored record. Raises ValueError on malformed data."""
        if not isinstance(data, dict):
            raise ValueError("Contact record must be a JSON object.")
        full_name = data.get(FULL_NAME_KEY)
        phone_number = data.get(PHONE_NUMBER_KEY)
        if not isinstance(full_name, str) or not isinstance(phone_number, str):
            raise ValueError(
                f"Contact record needs string '{FULL_NAME_KEY}' and '{PHONE_NUMBER_KEY}'."
            )
        if not is_encodable(full_name) or not is_encodable(phone_number):
            raise ValueError("Contact record holds text that is not valid UTF-8.")
        return cls(full_name=full_name, phone_number=phone_number)

    def __str__(self) -> str:
        return self.full_name
