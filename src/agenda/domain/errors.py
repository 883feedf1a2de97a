"""User-facing error messages and the exceptions that carry them."""

from enum import Enum


class ErrorKind(Enum):
    NAME_REQUIRED = "name_required"
    INVALID_EMAIL = "invalid_email"
    INVALID_PHONE = "invalid_phone"


# Messages are part of the public contract; callers match on them verbatim.
MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.NAME_REQUIRED: "O nome é obrigatório.",
    ErrorKind.INVALID_EMAIL: "Formato de e-mail inválido.",
    ErrorKind.INVALID_PHONE: (
        "Número de telefone informado incorretamente, "
        "Modelo esperado: (dd) 99999-9999."
    ),
}


class ContactValidationError(ValueError):
    """Raised when a name, email or phone number fails validation.

    str(error) is exactly the message registered for its kind.
    """

    def __init__(self, kind: ErrorKind) -> None:
        super().__init__(MESSAGES[kind])
        self.kind = kind

    @property
    def message(self) -> str:
        return MESSAGES[self.kind]


class ContactNotFoundError(LookupError):
    """No contact exists with the given id."""

    def __init__(self, contact_id: int) -> None:
        super().__init__(f"Contact {contact_id} not found.")
        self.contact_id = contact_id
