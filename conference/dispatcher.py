"""Dispatcher: runs a resolved route against the store and builds the reply."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from conference.codec import (
    decode_session_create,
    encode_error,
    encode_session,
    encode_sessions,
)
from conference.errors import SessionValidationError
from conference.routing import COLLECTION_PATH, Operation, resolve
from conference.session_store import SessionStore

logger = logging.getLogger(__name__)

JSON_HEADERS = {"Content-Type": "application/json"}


@dataclass(frozen=True)
class Reply:
    status_code: int
    body: bytes = b""
    headers: dict[str, str] = field(default_factory=dict)


def _json_reply(status_code: int, body: bytes, **headers: str) -> Reply:
    return Reply(status_code, body, {**JSON_HEADERS, **headers})


def _error_reply(status_code: int, message: str, **headers: str) -> Reply:
    return _json_reply(status_code, encode_error(message), **headers)


class SessionDispatcher:
    """Maps one request onto a store operation.

    Every outcome, including bad input and unknown routes, becomes a Reply;
    nothing raised by decoding escapes to the transport.
    """

    def __init__(self, store: SessionStore) -> None:
        self.store = store

    def dispatch(self, method: str, path: str, body: bytes = b"") -> Reply:
        reply = self._handle(method, path, body)
        logger.info("%s %s -> %d", method, path, reply.status_code)
        return reply

    def _handle(self, method: str, path: str, body: bytes) -> Reply:
        route = resolve(method, path)

        match route.operation:
            case Operation.LIST:
                return _json_reply(200, encode_sessions(self.store.list()))

            case Operation.CREATE:
                try:
                    fields = decode_session_create(body)
                except SessionValidationError as exc:
                    logger.info("Rejected session payload: %s", exc.message)
                    return _error_reply(400, exc.message)
                session = self.store.create(fields)
                return _json_reply(
                    201,
                    encode_session(session),
                    Location=f"{COLLECTION_PATH}/{session.id}",
                )

            case Operation.GET:
                session = self.store.get(route.session_id)
                if session is None:
                    return _error_reply(404, "session not found")
                return _json_reply(200, encode_session(session))

            case Operation.DELETE:
                if not self.store.delete(route.session_id):
                    return _error_reply(404, "session not found")
                return Reply(204)

            case Operation.METHOD_NOT_ALLOWED:
                return _error_reply(
                    405,
                    "method not allowed",
                    Allow=", ".join(route.allowed_methods),
                )

            case Operation.NOT_FOUND:
                return _error_reply(404, "route not found")

        raise AssertionError(f"unhandled operation: {route.operation}")
