"""Domain layer: entities, value objects and errors. No dependencies on outer layers."""

from agenda.domain.entities import Contact
from agenda.domain.errors import (
    MESSAGES,
    ContactNotFoundError,
    ContactValidationError,
    ErrorKind,
)
from agenda.domain.phone_number import PhoneNumber

__all__ = [
    "MESSAGES",
    "Contact",
    "ContactNotFoundError",
    "ContactValidationError",
    "ErrorKind",
    "PhoneNumber",
]
