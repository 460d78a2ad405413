"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient

from conference.client import ConferenceClient
from conference.main import create_app
from conference.models import SessionCreate
from conference.session_store import SessionStore


@pytest.fixture
def store() -> SessionStore:
    """A fresh, empty store for each test."""
    return SessionStore()


@pytest.fixture
def app(store):
    return create_app(store=store)


@pytest.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client for testing FastAPI endpoints."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def conference_client(app) -> AsyncGenerator[ConferenceClient, None]:
    """The API's own client, wired to the in-process app."""
    transport = ASGITransport(app=app)
    async with ConferenceClient("http://test", transport=transport) as cc:
        yield cc


def make_fields(
    title: str = "Microservices",
    speaker: str = "Charlie",
    time: str = "14:00",
    duration: int = 90,
) -> SessionCreate:
    return SessionCreate(title=title, speaker=speaker, time=time, duration=duration)
