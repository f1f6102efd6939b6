"""Field validators for profile input.

Every predicate takes raw user input and returns a bool; none of them raise.
"""

import math
import re
from collections.abc import Callable

EMAIL = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
PHONE = re.compile(r"^\(?([0-9]{3})\)?[-. ]?([0-9]{3})[-. ]?([0-9]{4})$")
ALNUM = re.compile(r"[A-Za-z0-9]")

ADDRESS_MIN_LENGTH = 5

MESSAGES: dict[str, str] = {
    "email": "Please enter a valid email address.",
    "phone_number": "Please enter a valid phone number.",
    "weight": "Weight must be a positive number.",
    "height": "Height must be a positive number.",
    "address": "Please enter a valid address.",
}


def is_email_valid(s: str) -> bool:
    return bool(EMAIL.fullmatch(s or ""))


def is_phone_valid(s: str) -> bool:
    """Ten North-American digits, optionally ``(555) 123-4567`` style. No extensions."""
    return bool(PHONE.fullmatch(s or ""))


def is_positive_number(s: str) -> bool:
    """True iff the whole string parses as a finite float greater than zero."""
    try:
        value = float((s or "").strip())
    except ValueError:
        return False
    return math.isfinite(value) and value > 0


def is_address_valid(s: str) -> bool:
    """At least five characters once trimmed, one of them alphanumeric."""
    trimmed = (s or "").strip()
    return len(trimmed) >= ADDRESS_MIN_LENGTH and bool(ALNUM.search(trimmed))


def _optional(predicate: Callable[[str], bool]) -> Callable[[str], bool]:
    def check(s: str) -> bool:
        # An empty optional field is absent, not invalid
        return (s or "") == "" or predicate(s)

    return check


RULES = {
    "email": is_email_valid,
    "phone_number": is_phone_valid,
    "weight": _optional(is_positive_number),
    "height": _optional(is_positive_number),
    "address": _optional(is_address_valid),
}


def validate_field(field_name: str, value: str) -> str | None:
    """Validate one profile field.

    Returns the user-facing message when the value is invalid, ``None``
    otherwise. Fields without a rule (``name``) always pass.
    """
    rule = RULES.get(field_name)
    if rule is None or rule(value):
        return None
    return MESSAGES[field_name]
