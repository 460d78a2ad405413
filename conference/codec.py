"""JSON codec for request and response bodies.

All encoding goes through pydantic so field values containing quotes or
control characters are escaped correctly.
"""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import TypeAdapter, ValidationError

from conference.errors import SessionValidationError
from conference.models import ErrorResponse, Session, SessionCreate

_session_list_adapter = TypeAdapter(list[Session])


def _describe(exc: ValidationError) -> str:
    """Flatten pydantic errors into one message, e.g. 'speaker: Field required'."""
    parts = []
    for error in exc.errors(include_url=False):
        location = ".".join(str(part) for part in error["loc"])
        parts.append(f"{location}: {error['msg']}" if location else error["msg"])
    return "; ".join(parts)


def decode_session_create(body: bytes | str) -> SessionCreate:
    """Parse and validate a create payload.

    Raises SessionValidationError for invalid JSON, a non-object body,
    missing or mistyped fields, empty title/speaker or a negative duration.
    """
    try:
        return SessionCreate.model_validate_json(body)
    except ValidationError as exc:
        raise SessionValidationError(_describe(exc)) from exc


def encode_session(session: Session) -> bytes:
    return session.model_dump_json().encode()


def encode_sessions(sessions: Iterable[Session]) -> bytes:
    """Encode as a JSON array; no sessions gives ``[]``."""
    return _session_list_adapter.dump_json(list(sessions))


def encode_error(message: str) -> bytes:
    return ErrorResponse(error=message).model_dump_json().encode()
