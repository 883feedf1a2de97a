"""Contact use cases: insert, update, delete and queries. One commit per mutation."""

import logging

from agenda.application.dto import (
    ContactResponse,
    InsertContactRequest,
    UpdateContactRequest,
)
from agenda.application.ports import ContactRepository
from agenda.application.validation import validate_contact_fields
from agenda.domain import Contact, ContactNotFoundError, PhoneNumber

logger = logging.getLogger(__name__)


def _get_or_raise(repository: ContactRepository, contact_id: int) -> Contact:
    contact = repository.get_by_id(contact_id)
    if contact is None:
        logger.warning("Contact %s not found", contact_id)
        raise ContactNotFoundError(contact_id)
    return contact


class InsertContactUseCase:
    """Validate a new contact, store it and commit."""

    def __init__(self, repository: ContactRepository) -> None:
        self._repo = repository

    def execute(self, request: InsertContactRequest) -> ContactResponse:
        """Raises ContactValidationError for the first failing rule: name, email, phone."""
        name, email = validate_contact_fields(request.name, request.email)
        phone_number = PhoneNumber(request.phone_number)

        contact = Contact(name=name, phone_number=phone_number, email=email)
        self._repo.save(contact)
        self._repo.unit_of_work.commit()
        logger.info("Inserted contact %s (ddd %s)", contact.id, contact.ddd)
        return ContactResponse.from_contact(contact)


class UpdateContactUseCase:
    """Replace the name, phone number and email of an existing contact."""

    def __init__(self, repository: ContactRepository) -> None:
        self._repo = repository

    def execute(self, request: UpdateContactRequest) -> ContactResponse:
        contact = _get_or_raise(self._repo, request.id)

        phone_number = PhoneNumber(request.phone_number)
        name, email = validate_contact_fields(request.name, request.email)

        contact.update(name=name, phone_number=phone_number, email=email)
        self._repo.update(contact)
        self._repo.unit_of_work.commit()
        logger.info("Updated contact %s", contact.id)
        return ContactResponse.from_contact(contact)


class DeleteContactUseCase:
    def __init__(self, repository: ContactRepository) -> None:
        self._repo = repository

    def delete(self, contact_id: int) -> None:
        """Remove the contact and commit. Nothing is deleted or committed if it does not exist."""
        contact = _get_or_raise(self._repo, contact_id)
        self._repo.delete(contact)
        self._repo.unit_of_work.commit()
        logger.info("Deleted contact %s", contact_id)


class GetContactsUseCase:
    """Read-only queries. Never commits."""

    def __init__(self, repository: ContactRepository) -> None:
        self._repo = repository

    def execute(self, ddd: str | None = None) -> list[ContactResponse]:
        """Return contacts with the given area code, or all contacts when ddd is empty."""
        ddd = (ddd or "").strip() or None
        return [ContactResponse.from_contact(c) for c in self._repo.get_by_ddd(ddd)]

    def get_by_id(self, contact_id: int) -> ContactResponse | None:
        """Return a contact by id, or None if not found."""
        contact = self._repo.get_by_id(contact_id)
        if contact is None:
            return None
        return ContactResponse.from_contact(contact)

    def get_all(self) -> list[ContactResponse]:
        return [ContactResponse.from_contact(c) for c in self._repo.get_all()]
