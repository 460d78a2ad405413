"""Async client for the conference sessions API.

Usage:
    async with ConferenceClient("http://localhost:8080") as client:
        session = await client.create_session("Microservices", "Charlie", "14:00", 90)
        await client.delete_session(session.id)
"""

from __future__ import annotations

import logging

import httpx
from pydantic import TypeAdapter

from conference.errors import ConferenceAPIError
from conference.models import Session

logger = logging.getLogger(__name__)

_session_list_adapter = TypeAdapter(list[Session])


def _raise_for_status(resp: httpx.Response) -> None:
    try:
        message = resp.json().get("error", resp.text)
    except (ValueError, AttributeError):
        message = resp.text
    raise ConferenceAPIError(resp.status_code, message)


class ConferenceClient:
    def __init__(
        self,
        base_url: str = "http://localhost:8080",
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float = 10.0,
    ) -> None:
        self._http = httpx.AsyncClient(
            base_url=base_url,
            transport=transport,
            timeout=timeout,
        )

    async def __aenter__(self) -> ConferenceClient:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def list_sessions(self) -> list[Session]:
        resp = await self._http.get("/sessions")
        if resp.status_code != 200:
            _raise_for_status(resp)
        return _session_list_adapter.validate_json(resp.content)

    async def create_session(
        self, title: str, speaker: str, time: str, duration: int
    ) -> Session:
        payload = {"title": title, "speaker": speaker, "time": time, "duration": duration}
        resp = await self._http.post("/sessions", json=payload)
        if resp.status_code != 201:
            _raise_for_status(resp)
        session = Session.model_validate_json(resp.content)
        logger.debug("Created session %s", session.id)
        return session

    async def get_session(self, session_id: str) -> Session | None:
        """Fetch a session by ID. Returns None if not found."""
        resp = await self._http.get(f"/sessions/{session_id}")
        if resp.status_code == 404:
            return None
        if resp.status_code != 200:
            _raise_for_status(resp)
        return Session.model_validate_json(resp.content)

    async def delete_session(self, session_id: str) -> bool:
        """Delete a session. Returns False if not found."""
        resp = await self._http.delete(f"/sessions/{session_id}")
        if resp.status_code == 404:
            return False
        if resp.status_code != 204:
            _raise_for_status(resp)
        return True
