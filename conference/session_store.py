"""In-memory session store.

The store owns the canonical copy of every session. A single lock serializes
create/get/list/delete, and every value handed out is a snapshot, so callers
can never observe or cause a partially applied write.
"""

from __future__ import annotations

import logging
import threading
import uuid
from collections.abc import Callable

from conference.models import Session, SessionCreate

logger = logging.getLogger(__name__)

SAMPLE_SESSION = SessionCreate(
    title="REST API Fundamentals",
    speaker="Alice",
    time="10:00",
    duration=60,
)


def _new_id() -> str:
    return str(uuid.uuid4())


class SessionStore:
    """Thread-safe keyed collection of sessions, in insertion order."""

    def __init__(self, id_factory: Callable[[], str] = _new_id) -> None:
        self._id_factory = id_factory
        self._lock = threading.Lock()
        self._sessions: dict[str, Session] = {}

    def create(self, fields: SessionCreate) -> Session:
        """Assign a fresh id, store the session and return a snapshot."""
        with self._lock:
            session_id = self._id_factory()
            while not session_id or session_id in self._sessions:
                session_id = self._id_factory()
            session = Session(id=session_id, **fields.model_dump())
            self._sessions[session_id] = session
            snapshot = session.model_copy()

        logger.info("Session created: id=%s title=%r", session_id, fields.title)
        return snapshot

    def get(self, session_id: str) -> Session | None:
        """Fetch a session by ID. Returns None if not found."""
        with self._lock:
            session = self._sessions.get(session_id)
            return session.model_copy() if session is not None else None

    def list(self) -> list[Session]:
        """Snapshot of every session, oldest first."""
        with self._lock:
            return [session.model_copy() for session in self._sessions.values()]

    def delete(self, session_id: str) -> bool:
        """Delete a session. Returns False if not found."""
        with self._lock:
            removed = self._sessions.pop(session_id, None)

        if removed is None:
            return False
        logger.info("Session deleted: id=%s", session_id)
        return True

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)


def seed_sample_session(store: SessionStore) -> Session:
    """Pre-populate a store with the sample talk served on a fresh start."""
    return store.create(SAMPLE_SESSION)
