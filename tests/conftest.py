"""Shared test fixtures for the Docstore test suite.

Tests run against a single in-memory SQLite database shared through a
StaticPool. Tables are dropped and recreated before each test for
isolation.
"""

import os

# Point the app at the test database before any app imports.
os.environ["DATABASE_URL"] = os.environ.get("TEST_DATABASE_URL", "sqlite://")
os.environ["LOG_FORMAT"] = "text"
os.environ["ENVIRONMENT"] = "development"
os.environ["ENFORCE_FOLDER_PARENT_OWNERSHIP"] = "false"

import pytest
from fastapi.testclient import TestClient

from docstore.database import Base, SessionLocal, engine, get_db, init_db
from docstore.main import app
from docstore.schemas.document import DocumentCreate
from docstore.schemas.folder import FolderCreate
from docstore.schemas.user import UserCreate
from docstore.services import DocumentService, FolderService, UserService


@pytest.fixture(autouse=True)
def _clean_tables():
    """Recreate all tables before each test.

    Runs before the test (not after) so test failures leave data
    available for debugging.
    """
    Base.metadata.drop_all(bind=engine)
    init_db(engine)
    yield


@pytest.fixture()
def db():
    """Per-test database session."""
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture()
def client(db):
    """FastAPI TestClient with the DB dependency overridden to use the test session."""

    def _override_get_db():
        yield db

    app.dependency_overrides[get_db] = _override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Service-level factories
# ---------------------------------------------------------------------------

@pytest.fixture()
def make_user(db):
    counter = {"n": 0}

    def _make(username=None, email=None, **overrides):
        counter["n"] += 1
        username = username or f"user{counter['n']}"
        email = email or f"{username}@example.com"
        return UserService(db).create(UserCreate(username=username, email=email, **overrides))

    return _make


@pytest.fixture()
def make_folder(db):
    def _make(owner, name="Folder", parent=None, **overrides):
        data = FolderCreate(
            name=name,
            user_id=owner.id,
            parent_id=parent.id if parent is not None else None,
            **overrides,
        )
        return FolderService(db).create(data)

    return _make


@pytest.fixture()
def make_document(db):
    def _make(owner, title="Document", folder=None, content="Hello world.", **overrides):
        data = DocumentCreate(
            title=title,
            content=content,
            user_id=owner.id,
            folder_id=folder.id if folder is not None else None,
            **overrides,
        )
        return DocumentService(db).create(data)

    return _make


# ---------------------------------------------------------------------------
# HTTP payload factories
# ---------------------------------------------------------------------------

def user_payload(username: str = "alice", email: str = None, **overrides) -> dict:
    payload = {"username": username, "email": email or f"{username}@example.com"}
    payload.update(overrides)
    return payload


def folder_payload(user_id: str, name: str = "Folder", parent_id: str = None, **overrides) -> dict:
    payload = {"name": name, "user_id": user_id, "parent_id": parent_id}
    payload.update(overrides)
    return payload


def document_payload(
    user_id: str, title: str = "Document", folder_id: str = None, content: str = "Hello.", **overrides
) -> dict:
    payload = {"title": title, "content": content, "user_id": user_id, "folder_id": folder_id}
    payload.update(overrides)
    return payload
