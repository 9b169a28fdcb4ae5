"""Phone number conversion to E.164 for API clients."""

import phonenumbers

from contatos.domain.phone import is_valid_phone

DEFAULT_REGION = "BR"


def phone_to_e164(phone: str | None, default_region: str = DEFAULT_REGION) -> str | None:
    """Return the E.164 form (+55...) of a formatted phone, or None if invalid.

    Only complete numbers accepted by is_valid_phone are converted; the
    still-typing forms and legacy values that fail validation give None.
    """
    if not is_valid_phone(phone):
        return None
    try:
        parsed = phonenumbers.parse(phone, default_region)
    except phonenumbers.NumberParseException:
        return None
    if not phonenumbers.is_valid_number(parsed):
        return None
    return phonenumbers.format_number(parsed, phonenumbers.PhoneNumberFormat.E164)
