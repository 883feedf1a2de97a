"""Application layer: use cases, ports, and DTOs. Depends only on domain."""

from agenda.application.contact_use_cases import (
    DeleteContactUseCase,
    GetContactsUseCase,
    InsertContactUseCase,
    UpdateContactUseCase,
)
from agenda.application.dto import (
    ContactResponse,
    InsertContactRequest,
    UpdateContactRequest,
)
from agenda.application.ports import ContactRepository, UnitOfWork
from agenda.application.validation import validate_contact_fields

__all__ = [
    "ContactRepository",
    "ContactResponse",
    "DeleteContactUseCase",
    "GetContactsUseCase",
    "InsertContactRequest",
    "InsertContactUseCase",
    "UnitOfWork",
    "UpdateContactRequest",
    "UpdateContactUseCase",
    "validate_contact_fields",
]
