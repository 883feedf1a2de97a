"""Domain entity: Contact."""

from dataclasses import dataclass

from agenda.domain.phone_number import PhoneNumber


@dataclass(eq=False)
class Contact:
    """
    A person in the directory: name, phone number and email.
    Holds already-validated data; the use cases validate before creating or updating.
    id is 0 until persistence assigns one.
    """

    name: str
    phone_number: PhoneNumber
    email: str
    id: int = 0

    @classmethod
    def restore(
        cls, id: int, name: str, phone_number: PhoneNumber, email: str
    ) -> "Contact":
        """Rebuild a stored contact with its persisted identity."""
        return cls(name=name, phone_number=phone_number, email=email, id=id)

    @property
    def ddd(self) -> str:
        return self.phone_number.ddd

    def update(self, name: str, phone_number: PhoneNumber, email: str) -> None:
        """Replace name, phone number and email. No validation here."""
        self.name = name
        self.phone_number = phone_number
        self.email = email
