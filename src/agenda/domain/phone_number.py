"""PhoneNumber value object: Brazilian (dd) 99999-9999 numbers."""

import re
from dataclasses import dataclass

from agenda.domain.errors import ContactValidationError, ErrorKind

# Digits plus the separators people type: "11-99999-9999", "(11) 9999.9999".
_ALLOWED = re.compile(r"^[\d\s().-]+$")
_SEPARATORS = re.compile(r"[\s().-]")
# 2-digit area code, then an 8-digit landline or a 9-digit mobile starting with 9.
_PATTERN = re.compile(r"^\d{2}(?:\d{8}|9\d{8})$")


@dataclass(frozen=True)
class PhoneNumber:
    """
    A validated phone number, stored as digits only.
    Construction fails for anything that is not 10 or 11 digits in the expected shape.
    """

    value: str

    def __post_init__(self):
        raw = (self.value or "").strip() if isinstance(self.value, str) else ""
        if not raw or not _ALLOWED.match(raw):
            raise ContactValidationError(ErrorKind.INVALID_PHONE)
        digits = _SEPARATORS.sub("", raw)
        if not _PATTERN.match(digits):
            raise ContactValidationError(ErrorKind.INVALID_PHONE)
        object.__setattr__(self, "value", digits)

    @property
    def ddd(self) -> str:
        """Area code: the first two digits."""
        return self.value[:2]

    @property
    def formatted(self) -> str:
        """Display form: (dd) 9999-9999 or (dd) 99999-9999."""
        local = self.value[2:]
        return f"({self.ddd}) {local[:-4]}-{local[-4:]}"

    def __str__(self) -> str:
        return self.value
