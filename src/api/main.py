"""
FastAPI backend: REST API over the contact use cases.
Run with uvicorn: uvicorn api.main:app --reload
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env from repo root (when run from repo root or from Docker)
for path in (
    Path(__file__).resolve().parent.parent.parent / ".env",
    Path.cwd() / ".env",
):
    if path.exists():
        load_dotenv(path)
        break

from collections.abc import Iterator
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request, Response
from fastapi.responses import JSONResponse
from neo4j import GraphDatabase
from pydantic import BaseModel

from agenda.application import (
    ContactRepository,
    ContactResponse,
    DeleteContactUseCase,
    GetContactsUseCase,
    InsertContactRequest,
    InsertContactUseCase,
    UpdateContactRequest,
    UpdateContactUseCase,
)
from agenda.domain import ContactNotFoundError, ContactValidationError, PhoneNumber
from agenda.infrastructure import (
    InMemoryContactRepository,
    InMemoryContactStore,
    Neo4jContactRepository,
    ensure_contact_constraints,
    to_e164,
)

logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=logging.INFO,
)
logger = logging.getLogger(__name__)

STORE_NEO4J = "neo4j"
STORE_MEMORY = "memory"


def _contact_store() -> str:
    return os.environ.get("CONTACT_STORE", STORE_NEO4J).strip().lower() or STORE_NEO4J


def _get_driver():
    uri = os.environ.get("NEO4J_URI", "bolt://localhost:7687").strip()
    user = os.environ.get("NEO4J_USER", "neo4j").strip()
    password = os.environ.get("NEO4J_PASSWORD", "password").strip()
    return GraphDatabase.driver(uri, auth=(user, password))


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.driver = None
    app.state.memory_store = None
    store = _contact_store()
    logger.info("Contact store: %s", store)
    try:
        if store == STORE_MEMORY:
            app.state.memory_store = InMemoryContactStore()
        else:
            app.state.driver = _get_driver()
            ensure_contact_constraints(app.state.driver)
        yield
    finally:
        if getattr(app.state, "driver", None) is not None:
            app.state.driver.close()


app = FastAPI(title="Agenda API", lifespan=lifespan)


def get_repository(request: Request) -> Iterator[ContactRepository]:
    """One repository per request. Uncommitted changes are rolled back if the request fails."""
    state = request.app.state
    if getattr(state, "memory_store", None) is not None:
        repo = InMemoryContactRepository(state.memory_store)
    else:
        if getattr(state, "driver", None) is None:
            state.driver = _get_driver()
        repo = Neo4jContactRepository(state.driver)
    try:
        yield repo
    except Exception:
        repo.unit_of_work.rollback()
        raise
    finally:
        repo.close()


# --- errors ---


@app.exception_handler(ContactValidationError)
def validation_error_handler(request: Request, exc: ContactValidationError):
    return JSONResponse(status_code=400, content={"detail": exc.message})


@app.exception_handler(ContactNotFoundError)
def not_found_handler(request: Request, exc: ContactNotFoundError):
    return JSONResponse(status_code=404, content={"detail": "Contact not found"})


# --- REST: health ---


@app.get("/health")
def health():
    return {"status": "ok"}


# --- REST: contacts ---


class ContactBody(BaseModel):
    name: str
    phone_number: str
    email: str


class ContactItem(BaseModel):
    id: int
    name: str
    phone_number: str
    email: str
    ddd: str
    formatted: str
    e164: str | None = None


def _to_item(c: ContactResponse) -> ContactItem:
    phone = PhoneNumber(c.phone_number)
    return ContactItem(
        id=c.id,
        name=c.name,
        phone_number=c.phone_number,
        email=c.email,
        ddd=c.ddd,
        formatted=phone.formatted,
        e164=to_e164(phone),
    )


@app.post("/contacts", status_code=201)
def create_contact(
    body: ContactBody,
    repo: ContactRepository = Depends(get_repository),
) -> ContactItem:
    created = InsertContactUseCase(repo).execute(
        InsertContactRequest(
            name=body.name, phone_number=body.phone_number, email=body.email
        )
    )
    return _to_item(created)


@app.get("/contacts")
def list_contacts(
    ddd: str | None = None,
    repo: ContactRepository = Depends(get_repository),
) -> list[ContactItem]:
    return [_to_item(c) for c in GetContactsUseCase(repo).execute(ddd)]


@app.get("/contacts/{contact_id}")
def get_contact(
    contact_id: int,
    repo: ContactRepository = Depends(get_repository),
) -> ContactItem:
    contact = GetContactsUseCase(repo).get_by_id(contact_id)
    if contact is None:
        raise ContactNotFoundError(contact_id)
    return _to_item(contact)


@app.put("/contacts/{contact_id}")
def update_contact(
    contact_id: int,
    body: ContactBody,
    repo: ContactRepository = Depends(get_repository),
) -> ContactItem:
    updated = UpdateContactUseCase(repo).execute(
        UpdateContactRequest(
            id=contact_id,
            name=body.name,
            phone_number=body.phone_number,
            email=body.email,
        )
    )
    return _to_item(updated)


@app.delete("/contacts/{contact_id}", status_code=204)
def delete_contact(
    contact_id: int,
    repo: ContactRepository = Depends(get_repository),
) -> Response:
    DeleteContactUseCase(repo).delete(contact_id)
    return Response(status_code=204)
