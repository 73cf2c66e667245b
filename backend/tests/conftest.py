"""
QuickNotes Backend: Test Configuration (conftest.py)
======================================================

What:  Shared pytest fixtures for the entire test suite.
How:   Every test gets its own NoteStore and its own app built around it, so
       no state leaks between tests.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── fixed_clock:   Controllable clock for deterministic timestamps
    ├── note_store:    Empty NoteStore using fixed_clock
    ├── note_service:  NoteService over note_store
    ├── app:           FastAPI app owning note_store
    └── test_client:   HTTPX AsyncClient talking to app
"""

import os
from datetime import datetime, timedelta, timezone

# Override settings for testing BEFORE any app imports
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["ADDR"] = "127.0.0.1:8080"

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from quicknotes.main import create_app
from quicknotes.services.note_service import NoteService
from quicknotes.services.note_store import NoteStore


class FixedClock:
    """Returns `now`, advanced manually with tick()."""

    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def tick(self, seconds: float = 1.0) -> None:
        self.now = self.now + timedelta(seconds=seconds)


@pytest.fixture
def fixed_clock():
    return FixedClock(datetime(2024, 1, 15, 12, 0, 0, tzinfo=timezone.utc))


@pytest.fixture
def note_store(fixed_clock):
    return NoteStore(clock=fixed_clock)


@pytest.fixture
def note_service(note_store):
    return NoteService(note_store)


@pytest.fixture
def app(note_store):
    return create_app(store=note_store)


@pytest_asyncio.fixture
async def test_client(app):
    """
    HTTPX AsyncClient routed directly to the app through ASGITransport.

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/notes")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
