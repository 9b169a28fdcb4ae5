"""Brazilian phone numbers: live formatting and validation of the display form."""

import re

MAX_DIGITS = 11  # 2 (DDD) + up to 9 subscriber digits
SUFFIX_LENGTH = 4

_NON_DIGITS = re.compile(r"[^0-9]")
# (DD) XXXX-XXXX for landlines (2-8), (DD) 9XXXX-XXXX for mobiles (9 then 1-9).
_PHONE_PATTERN = re.compile(r"\([1-9][0-9]\) (?:[2-8]|9[1-9])[0-9]{3}-[0-9]{4}")


def format_phone(raw: str | None) -> str:
    """Format arbitrary input as (DD) XXXXX-XXXX, tolerating partial input.

    Meant to run after every keystroke, so intermediate forms are kept as
    typed: "(1", "(11) 987" and so on. Non-digits are dropped and digits past
    the eleventh are discarded. Reformatting the output returns it unchanged.
    """
    if raw is None:
        return ""
    digits = _NON_DIGITS.sub("", raw)
    if not digits:
        return ""
    digits = digits[:MAX_DIGITS]

    if len(digits) <= 2:
        return "(" + digits

    ddd, rest = digits[:2], digits[2:]
    if len(rest) <= SUFFIX_LENGTH:
        return f"({ddd}) {rest}"

    prefix, suffix = rest[:-SUFFIX_LENGTH], rest[-SUFFIX_LENGTH:]
    return f"({ddd}) {prefix}-{suffix}"


def is_valid_phone(phone: str | None) -> bool:
    """Return True if phone is a complete, formatted Brazilian number."""
    if not phone:
        return False
    return _PHONE_PATTERN.fullmatch(phone) is not None
