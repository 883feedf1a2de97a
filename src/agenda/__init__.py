"""
Agenda core: clean-architecture layout.

- domain: Contact entity, PhoneNumber value object, error messages. No outer dependencies.
- application: use cases (insert, update, delete, get), ports (ContactRepository, UnitOfWork), DTOs.
- infrastructure: adapters (InMemoryContactRepository, Neo4jContactRepository).
"""

from agenda.application import (
    ContactRepository,
    ContactResponse,
    DeleteContactUseCase,
    GetContactsUseCase,
    InsertContactRequest,
    InsertContactUseCase,
    UnitOfWork,
    UpdateContactRequest,
    UpdateContactUseCase,
)
from agenda.domain import (
    Contact,
    ContactNotFoundError,
    ContactValidationError,
    ErrorKind,
    PhoneNumber,
)
from agenda.infrastructure import InMemoryContactRepository, Neo4jContactRepository

__all__ = [
    "Contact",
    "ContactNotFoundError",
    "ContactRepository",
    "ContactResponse",
    "ContactValidationError",
    "DeleteContactUseCase",
    "ErrorKind",
    "GetContactsUseCase",
    "InMemoryContactRepository",
    "InsertContactRequest",
    "InsertContactUseCase",
    "Neo4jContactRepository",
    "PhoneNumber",
    "UnitOfWork",
    "UpdateContactRequest",
    "UpdateContactUseCase",
]
