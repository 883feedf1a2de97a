"""Neo4j implementation of ContactRepository and UnitOfWork.
Graph: one (:Contact {id, name, email, phone_number, ddd}) node per contact.
Ids come from a (:Sequence {name: 'contact'}) counter node, incremented inside the same transaction.
All reads and writes of one repository go through a single explicit transaction until commit.
"""

import logging

from agenda.domain import Contact, PhoneNumber

logger = logging.getLogger(__name__)

_CONSTRAINT_QUERIES = (
    """
    CREATE CONSTRAINT contact_id_unique IF NOT EXISTS
    FOR (c:Contact) REQUIRE c.id IS UNIQUE
    """,
    """
    CREATE CONSTRAINT sequence_name_unique IF NOT EXISTS
    FOR (s:Sequence) REQUIRE s.name IS UNIQUE
    """,
)

_NEXT_ID_QUERY = """
MERGE (s:Sequence {name: $sequence})
ON CREATE SET s.value = 0
SET s.value = s.value + 1
RETURN s.value AS id
"""

_CREATE_QUERY = """
CREATE (c:Contact {
    id: $id,
    name: $name,
    email: $email,
    phone_number: $phone_number,
    ddd: $ddd
})
"""

_UPDATE_QUERY = """
MATCH (c:Contact {id: $id})
SET c.name = $name,
    c.email = $email,
    c.phone_number = $phone_number,
    c.ddd = $ddd
"""

_DELETE_QUERY = """
MATCH (c:Contact {id: $id})
DETACH DELETE c
"""

_GET_BY_ID_QUERY = """
MATCH (c:Contact {id: $id})
RETURN c
"""

_LIST_QUERY = """
MATCH (c:Contact)
WHERE $ddd IS NULL OR c.ddd = $ddd
RETURN c
ORDER BY c.id
"""

CONTACT_SEQUENCE = "contact"


def ensure_contact_constraints(driver) -> None:
    """Create unique constraints on Contact(id) and Sequence(name) if missing."""
    with driver.session() as session:
        for query in _CONSTRAINT_QUERIES:
            session.run(query)


class Neo4jUnitOfWork:
    """Owns one driver session and the currently open transaction.

    The transaction is opened lazily on first use and closed by commit or rollback;
    the next query opens a new one.
    """

    def __init__(self, driver: object) -> None:
        self._driver = driver
        self._session = None
        self._tx = None

    @property
    def transaction(self):
        if self._tx is None:
            if self._session is None:
                self._session = self._driver.session()
            self._tx = self._session.begin_transaction()
        return self._tx

    def commit(self) -> None:
        if self._tx is None:
            return
        tx, self._tx = self._tx, None
        tx.commit()
        logger.debug("Neo4j transaction committed")

    def rollback(self) -> None:
        if self._tx is None:
            return
        tx, self._tx = self._tx, None
        tx.rollback()
        logger.debug("Neo4j transaction rolled back")

    def close(self) -> None:
        """Roll back anything uncommitted and release the session."""
        try:
            self.rollback()
        finally:
            if self._session is not None:
                self._session.close()
                self._session = None


class Neo4jContactRepository:
    """Stores contacts as Contact nodes. Changes are persisted only on unit_of_work.commit()."""

    def __init__(self, driver: object) -> None:
        self._uow = Neo4jUnitOfWork(driver)

    @property
    def unit_of_work(self) -> Neo4jUnitOfWork:
        return self._uow

    def save(self, contact: Contact) -> None:
        tx = self._uow.transaction
        record = tx.run(_NEXT_ID_QUERY, sequence=CONTACT_SEQUENCE).single()
        contact.id = record["id"]
        tx.run(_CREATE_QUERY, **_contact_params(contact))

    def update(self, contact: Contact) -> None:
        self._uow.transaction.run(_UPDATE_QUERY, **_contact_params(contact))

    def delete(self, contact: Contact) -> None:
        self._uow.transaction.run(_DELETE_QUERY, id=contact.id)

    def get_by_id(self, contact_id: int) -> Contact | None:
        record = self._uow.transaction.run(_GET_BY_ID_QUERY, id=contact_id).single()
        if not record:
            return None
        return _record_to_contact(record)

    def get_all(self) -> list[Contact]:
        return self.get_by_ddd(None)

    def get_by_ddd(self, ddd: str | None) -> list[Contact]:
        result = self._uow.transaction.run(_LIST_QUERY, ddd=ddd or None)
        return [_record_to_contact(rec) for rec in result]

    def close(self) -> None:
        self._uow.close()


def _contact_params(contact: Contact) -> dict:
    return {
        "id": contact.id,
        "name": contact.name,
        "email": contact.email,
        "phone_number": contact.phone_number.value,
        "ddd": contact.ddd,
    }


def _record_to_contact(record) -> Contact:
    c = record["c"]
    return Contact.restore(
        id=c["id"],
        name=c.get("name") or "",
        phone_number=PhoneNumber(c["phone_number"]),
        email=c.get("email") or "",
    )
