"""Unit tests for the contact use cases. In-memory repo, no database."""

import pytest

from agenda.application import (
    ContactResponse,
    DeleteContactUseCase,
    GetContactsUseCase,
    InsertContactRequest,
    InsertContactUseCase,
    UpdateContactRequest,
    UpdateContactUseCase,
)
from agenda.domain import Contact, ContactNotFoundError, ContactValidationError, PhoneNumber
from agenda.infrastructure import InMemoryContactRepository


class SpyContactRepository(InMemoryContactRepository):
    """In-memory repository that records which methods were called."""

    def __init__(self) -> None:
        super().__init__()
        self.calls: list[str] = []

    def save(self, contact):
        self.calls.append("save")
        super().save(contact)

    def update(self, contact):
        self.calls.append("update")
        super().update(contact)

    def delete(self, contact):
        self.calls.append("delete")
        super().delete(contact)

    def get_by_id(self, contact_id):
        self.calls.append("get_by_id")
        return super().get_by_id(contact_id)

    def get_all(self):
        self.calls.append("get_all")
        return super().get_all()

    def get_by_ddd(self, ddd):
        self.calls.append("get_by_ddd")
        return super().get_by_ddd(ddd)

    def count(self, name: str) -> int:
        return self.calls.count(name)


def _seed(repo: InMemoryContactRepository, name: str, phone: str, email: str) -> Contact:
    contact = Contact(name=name, phone_number=PhoneNumber(phone), email=email)
    repo.save(contact)
    repo.unit_of_work.commit()
    return contact


def _fresh_spy(*seed: tuple[str, str, str]) -> SpyContactRepository:
    repo = SpyContactRepository()
    for row in seed:
        _seed(repo, *row)
    repo.calls.clear()
    repo.unit_of_work.commit_count = 0
    return repo


# --- insert ---


def test_insert_valid_contact_saves_once_and_commits() -> None:
    repo = _fresh_spy()
    result = InsertContactUseCase(repo).execute(
        InsertContactRequest("João Silva", "11-99999-9999", "email@valido.com")
    )

    assert repo.count("save") == 1
    assert repo.unit_of_work.commit_count == 1
    assert isinstance(result, ContactResponse)
    assert result.id > 0
    assert result.name == "João Silva"
    assert result.phone_number == "11999999999"
    assert result.ddd == "11"
    assert repo.get_by_id(result.id) is not None


@pytest.mark.parametrize(
    "name, phone, email, expected",
    [
        ("", "1234567890", "joao.@example.com", "O nome é obrigatório."),
        ("   ", "123", "invalid-email", "O nome é obrigatório."),
        (
            "João Silva",
            "123",
            "joao.silva@example.com",
            "Número de telefone informado incorretamente, Modelo esperado: (dd) 99999-9999.",
        ),
        ("João Silva", "1234567890", "invalid-email", "Formato de e-mail inválido."),
        ("João Silva", "123", "invalid-email", "Formato de e-mail inválido."),
    ],
)
def test_insert_invalid_contact_raises_first_error(name, phone, email, expected) -> None:
    repo = _fresh_spy()
    with pytest.raises(ContactValidationError) as exc_info:
        InsertContactUseCase(repo).execute(InsertContactRequest(name, phone, email))

    assert str(exc_info.value) == expected
    assert repo.count("save") == 0
    assert repo.unit_of_work.commit_count == 0


def test_insert_strips_name_and_email() -> None:
    repo = _fresh_spy()
    result = InsertContactUseCase(repo).execute(
        InsertContactRequest("  Ana  ", "(21) 3333-4444", " ana@example.com ")
    )
    assert result.name == "Ana"
    assert result.email == "ana@example.com"


def test_insert_assigns_increasing_ids() -> None:
    repo = _fresh_spy()
    use_case = InsertContactUseCase(repo)
    first = use_case.execute(InsertContactRequest("A", "11999999999", "a@example.com"))
    second = use_case.execute(InsertContactRequest("B", "21999999999", "b@example.com"))
    assert second.id > first.id


# --- get ---


def test_filter_by_ddd_returns_matching_contact() -> None:
    repo = _fresh_spy(
        ("João Silva", "11-99999-9999", "john.doe@example.com"),
        ("Maria", "21-98888-7777", "maria@example.com"),
    )
    result = GetContactsUseCase(repo).execute("11")

    assert len(result) == 1
    assert result[0].name == "João Silva"
    assert result[0].ddd == "11"
    assert repo.count("get_by_ddd") == 1


def test_filter_with_empty_ddd_returns_all() -> None:
    repo = _fresh_spy(
        ("A", "11999999999", "a@example.com"),
        ("B", "21999999999", "b@example.com"),
    )
    assert len(GetContactsUseCase(repo).execute("")) == 2
    assert len(GetContactsUseCase(repo).execute(None)) == 2
    assert len(GetContactsUseCase(repo).execute("31")) == 0


def test_get_by_id_returns_contact() -> None:
    repo = _fresh_spy(("Teste", "1234567890", "test@example.com"))
    contact_id = repo.get_all()[0].id

    result = GetContactsUseCase(repo).get_by_id(contact_id)
    assert result is not None
    assert result.name == "Teste"
    assert result.id == contact_id


def test_get_by_id_unknown_returns_none() -> None:
    repo = _fresh_spy()
    assert GetContactsUseCase(repo).get_by_id(999) is None


def test_get_all_returns_every_contact_with_one_fetch() -> None:
    repo = _fresh_spy(
        ("teste 1", "1234567890", "teste1@example.com"),
        ("TESTE 2", "1187654321", "teste2@example.com"),
    )
    result = GetContactsUseCase(repo).get_all()

    assert {c.name for c in result} == {"teste 1", "TESTE 2"}
    assert repo.count("get_all") == 1


def test_queries_never_commit() -> None:
    repo = _fresh_spy(("A", "11999999999", "a@example.com"))
    use_case = GetContactsUseCase(repo)
    use_case.execute("11")
    use_case.get_all()
    use_case.get_by_id(1)
    assert repo.unit_of_work.commit_count == 0


# --- update ---


def test_update_replaces_fields_and_keeps_identity() -> None:
    repo = _fresh_spy(("Contato", "1133334444", "contato@example.com"))
    contact_id = repo.get_all()[0].id

    result = UpdateContactUseCase(repo).execute(
        UpdateContactRequest(
            contact_id, "Contato Atualizado", "(21) 98888-7777", "atualizado@example.com"
        )
    )

    assert result is not None
    assert result.id == contact_id
    assert result.name == "Contato Atualizado"
    assert result.phone_number == "21988887777"
    assert result.email == "atualizado@example.com"
    assert result.ddd == "21"
    assert repo.count("update") == 1
    assert repo.unit_of_work.commit_count == 1

    stored = repo.get_by_id(contact_id)
    assert stored.name == "Contato Atualizado"
    assert stored.phone_number == PhoneNumber("21988887777")


def test_update_unknown_id_raises_not_found() -> None:
    repo = _fresh_spy()
    with pytest.raises(ContactNotFoundError) as exc_info:
        UpdateContactUseCase(repo).execute(
            UpdateContactRequest(42, "X", "11999999999", "x@example.com")
        )
    assert exc_info.value.contact_id == 42
    assert repo.count("update") == 0
    assert repo.unit_of_work.commit_count == 0


def test_update_checks_phone_before_name() -> None:
    repo = _fresh_spy(("Contato", "11999999999", "c@example.com"))
    contact_id = repo.get_all()[0].id
    with pytest.raises(ContactValidationError) as exc_info:
        UpdateContactUseCase(repo).execute(
            UpdateContactRequest(contact_id, "", "123", "c@example.com")
        )
    assert "Número de telefone" in str(exc_info.value)


def test_update_invalid_email_leaves_contact_unchanged() -> None:
    repo = _fresh_spy(("Contato", "11999999999", "c@example.com"))
    contact_id = repo.get_all()[0].id
    with pytest.raises(ContactValidationError):
        UpdateContactUseCase(repo).execute(
            UpdateContactRequest(contact_id, "Novo", "11999999999", "invalid-email")
        )

    stored = repo.get_by_id(contact_id)
    assert stored.name == "Contato"
    assert repo.count("update") == 0
    assert repo.unit_of_work.commit_count == 0


# --- delete ---


def test_delete_existing_contact_deletes_and_commits_once() -> None:
    repo = _fresh_spy(("Contato", "11999999999", "c@example.com"))
    contact_id = repo.get_all()[0].id
    repo.calls.clear()

    DeleteContactUseCase(repo).delete(contact_id)

    assert repo.calls == ["get_by_id", "delete"]
    assert repo.unit_of_work.commit_count == 1
    assert repo.get_by_id(contact_id) is None


def test_delete_unknown_id_neither_deletes_nor_commits() -> None:
    repo = _fresh_spy()
    with pytest.raises(ContactNotFoundError):
        DeleteContactUseCase(repo).delete(999)

    assert repo.calls == ["get_by_id"]
    assert repo.unit_of_work.commit_count == 0
