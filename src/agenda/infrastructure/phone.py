"""E.164 rendering of stored phone numbers (Brazil, +55)."""

import phonenumbers

from agenda.domain import PhoneNumber

DEFAULT_REGION = "BR"


def to_e164(phone_number: PhoneNumber, region: str = DEFAULT_REGION) -> str | None:
    """Return the E.164 form of the number, or None if the numbering plan rejects it.

    PhoneNumber accepts any two-digit area code, so some stored numbers
    (e.g. area code 10) have no international form.
    """
    try:
        parsed = phonenumbers.parse(phone_number.value, region)
    except phonenumbers.NumberParseException:
        return None
    if not phonenumbers.is_valid_number(parsed):
        return None
    return phonenumbers.format_number(parsed, phonenumbers.PhoneNumberFormat.E164)
