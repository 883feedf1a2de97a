"""Infrastructure layer: concrete implementations of application ports."""

from agenda.infrastructure.memory_repository import (
    InMemoryContactRepository,
    InMemoryContactStore,
    InMemoryUnitOfWork,
)
from agenda.infrastructure.persistence.neo4j_repository import (
    Neo4jContactRepository,
    Neo4jUnitOfWork,
    ensure_contact_constraints,
)
from agenda.infrastructure.phone import to_e164

__all__ = [
    "InMemoryContactRepository",
    "InMemoryContactStore",
    "InMemoryUnitOfWork",
    "Neo4jContactRepository",
    "Neo4jUnitOfWork",
    "ensure_contact_constraints",
    "to_e164",
]
