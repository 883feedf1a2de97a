"""Request and response types for the contact use cases."""

from dataclasses import dataclass

from agenda.domain import Contact


@dataclass(frozen=True)
class InsertContactRequest:
    """A new contact as submitted by a caller. Fields are raw, not yet validated."""

    name: str
    phone_number: str
    email: str


@dataclass(frozen=True)
class UpdateContactRequest:
    """Replacement data for an existing contact."""

    id: int
    name: str
    phone_number: str
    email: str


@dataclass(frozen=True)
class ContactResponse:
    """One contact as returned to callers."""

    id: int
    name: str
    phone_number: str
    email: str
    ddd: str

    @classmethod
    def from_contact(cls, contact: Contact) -> "ContactResponse":
        return cls(
            id=contact.id,
            name=contact.name,
            phone_number=contact.phone_number.value,
            email=contact.email,
            ddd=contact.ddd,
        )
