"""In-memory implementation of ContactRepository and UnitOfWork (no DB)."""

import logging
import threading

from agenda.domain import Contact, PhoneNumber

logger = logging.getLogger(__name__)

# id -> (name, phone digits, email). Rows are copied so fetched entities never alias stored state.
_Row = tuple[str, str, str]


class InMemoryContactStore:
    """Committed contacts shared by every repository. Thread-safe.
    Order preserved by insertion.
    """

    def __init__(self) -> None:
        self._rows: dict[int, _Row] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def next_id(self) -> int:
        with self._lock:
            contact_id = self._next_id
            self._next_id += 1
            return contact_id

    def snapshot(self) -> dict[int, _Row]:
        with self._lock:
            return dict(self._rows)

    def apply(self, changes: dict[int, _Row | None]) -> None:
        """Write changed rows; None deletes. All changes land under one lock."""
        with self._lock:
            for contact_id, row in changes.items():
                if row is None:
                    self._rows.pop(contact_id, None)
                else:
                    self._rows[contact_id] = row


class InMemoryUnitOfWork:
    """Pushes the repository's pending changes to the store on commit; rollback drops them."""

    def __init__(self, repository: "InMemoryContactRepository") -> None:
        self._repo = repository
        self.commit_count = 0

    def commit(self) -> None:
        pending, self._repo._pending = self._repo._pending, {}
        self._repo._store.apply(pending)
        self.commit_count += 1
        logger.debug("Committed %d contact changes", len(pending))

    def rollback(self) -> None:
        logger.debug("Rolled back %d contact changes", len(self._repo._pending))
        self._repo._pending = {}


class InMemoryContactRepository:
    """One working set over an InMemoryContactStore.
    Writes are visible to this repository's reads immediately and to other repositories after commit.
    Use one repository per request; share the store.
    """

    def __init__(self, store: InMemoryContactStore | None = None) -> None:
        self._store = store if store is not None else InMemoryContactStore()
        self._pending: dict[int, _Row | None] = {}
        self._uow = InMemoryUnitOfWork(self)

    @property
    def unit_of_work(self) -> InMemoryUnitOfWork:
        return self._uow

    def save(self, contact: Contact) -> None:
        contact.id = self._store.next_id()
        self._pending[contact.id] = _to_row(contact)

    def update(self, contact: Contact) -> None:
        if contact.id in self._rows():
            self._pending[contact.id] = _to_row(contact)

    def delete(self, contact: Contact) -> None:
        if contact.id in self._rows():
            self._pending[contact.id] = None

    def get_by_id(self, contact_id: int) -> Contact | None:
        row = self._rows().get(contact_id)
        if row is None:
            return None
        return _to_contact(contact_id, row)

    def get_all(self) -> list[Contact]:
        return [_to_contact(cid, row) for cid, row in self._rows().items()]

    def get_by_ddd(self, ddd: str | None) -> list[Contact]:
        if not ddd:
            return self.get_all()
        return [c for c in self.get_all() if c.ddd == ddd]

    def close(self) -> None:
        """Discard uncommitted changes."""
        self._uow.rollback()

    def _rows(self) -> dict[int, _Row]:
        rows = self._store.snapshot()
        for contact_id, row in self._pending.items():
            if row is None:
                rows.pop(contact_id, None)
            else:
                rows[contact_id] = row
        return rows


def _to_row(contact: Contact) -> _Row:
    return (contact.name, contact.phone_number.value, contact.email)


def _to_contact(contact_id: int, row: _Row) -> Contact:
    name, phone, email = row
    return Contact.restore(contact_id, name, PhoneNumber(phone), email)
