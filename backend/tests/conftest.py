"""
Notes API — Test Configuration (conftest.py)
=============================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped, fresh for each test):
    ├── store:          Empty NoteStore
    ├── strict_service / legacy_service: NoteService over `store`
    ├── test_client:    HTTPX AsyncClient on an app with the strict policy
    ├── legacy_client:  HTTPX AsyncClient on an app with the legacy policy
    └── auth:           Builds Authorization headers for a user name
"""

import os

# Override settings for testing BEFORE any app imports
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["OWNERSHIP_POLICY"] = "strict"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.config import OwnershipPolicy, Settings
from app.main import create_app
from app.services.note_service import NoteService
from app.storage import NoteStore


@pytest.fixture
def store():
    """A fresh, empty note store."""
    return NoteStore()


@pytest.fixture
def strict_service(store):
    return NoteService(store=store, policy=OwnershipPolicy.STRICT)


@pytest.fixture
def legacy_service(store):
    return NoteService(store=store, policy=OwnershipPolicy.LEGACY)


@pytest.fixture
def auth():
    """
    Returns a helper building request headers for a user.

    Usage:
        await client.get("/notes", headers=auth("alice"))
    """
    def _headers(user: str) -> dict:
        return {"Authorization": f"Bearer {user}"}

    return _headers


@pytest.fixture
def sample_note_data():
    """Body for creating a note as alice."""
    return {"title": "Einkauf", "content": "Milch, Brot", "user": "alice"}


def _client_for(app):
    transport = ASGITransport(app=app)
    return AsyncClient(transport=transport, base_url="http://test")


@pytest_asyncio.fixture
async def test_client(store):
    """
    HTTPX AsyncClient talking to a strict-policy app.

    The app shares the `store` fixture, so tests can inspect the collection
    directly after a request.
    """
    app = create_app(settings=Settings(ownership_policy="strict"), store=store)
    async with _client_for(app) as client:
        yield client


@pytest_asyncio.fixture
async def legacy_client(store):
    """HTTPX AsyncClient talking to a legacy-policy app."""
    app = create_app(settings=Settings(ownership_policy="legacy"), store=store)
    async with _client_for(app) as client:
        yield client
