"""Application ports (interfaces). Implemented by infrastructure adapters."""

from typing import Protocol

from agenda.domain import Contact


class UnitOfWork(Protocol):
    """Commit boundary for the changes made through a repository."""

    def commit(self) -> None:
        """Persist every pending change."""
        ...

    def rollback(self) -> None:
        """Discard changes made since the last commit."""
        ...


class ContactRepository(Protocol):
    """Persists and queries contacts."""

    @property
    def unit_of_work(self) -> UnitOfWork:
        ...

    def save(self, contact: Contact) -> None:
        """Store a new contact and assign its id."""
        ...

    def update(self, contact: Contact) -> None:
        ...

    def delete(self, contact: Contact) -> None:
        ...

    def get_by_id(self, contact_id: int) -> Contact | None:
        """Return the contact with the given id, or None."""
        ...

    def get_all(self) -> list[Contact]:
        ...

    def get_by_ddd(self, ddd: str | None) -> list[Contact]:
        """Return contacts whose area code equals ddd; all contacts when ddd is empty."""
        ...
