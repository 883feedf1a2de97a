"""Field rules shared by the insert and update use cases."""

import re

from agenda.domain import ContactValidationError, ErrorKind

_EMAIL = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def validate_name(name: str | None) -> str:
    """Return the stripped name, or raise if it is empty."""
    clean = (name or "").strip()
    if not clean:
        raise ContactValidationError(ErrorKind.NAME_REQUIRED)
    return clean


def validate_email(email: str | None) -> str:
    """Return the stripped email, or raise if it is not local@domain.tld."""
    clean = (email or "").strip()
    if not _EMAIL.match(clean):
        raise ContactValidationError(ErrorKind.INVALID_EMAIL)
    return clean


def validate_contact_fields(name: str | None, email: str | None) -> tuple[str, str]:
    """Check name, then email. The first failing rule raises."""
    return validate_name(name), validate_email(email)
