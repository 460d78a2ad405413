"""Request routing: (method, path) -> session operation.

    GET    /sessions        LIST
    POST   /sessions        CREATE
    GET    /sessions/{id}   GET
    DELETE /sessions/{id}   DELETE

A known path with any other method resolves to METHOD_NOT_ALLOWED; anything
else (including ``/sessions/`` and ``/sessions/a/b``) resolves to NOT_FOUND.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

COLLECTION_PATH = "/sessions"
_ITEM_PREFIX = COLLECTION_PATH + "/"

COLLECTION_METHODS = ("GET", "POST")
ITEM_METHODS = ("GET", "DELETE")


class Operation(str, Enum):
    LIST = "list"
    CREATE = "create"
    GET = "get"
    DELETE = "delete"
    METHOD_NOT_ALLOWED = "method_not_allowed"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class Route:
    operation: Operation
    session_id: str | None = None
    allowed_methods: tuple[str, ...] = ()


def _extract_session_id(path: str) -> str | None:
    """Return the single segment after /sessions/, or None if malformed."""
    if not path.startswith(_ITEM_PREFIX):
        return None
    remainder = path[len(_ITEM_PREFIX):]
    if not remainder or "/" in remainder:
        return None
    return remainder


def resolve(method: str, path: str) -> Route:
    method = method.upper()

    if path == COLLECTION_PATH:
        if method == "GET":
            return Route(Operation.LIST)
        if method == "POST":
            return Route(Operation.CREATE)
        return Route(Operation.METHOD_NOT_ALLOWED, allowed_methods=COLLECTION_METHODS)

    session_id = _extract_session_id(path)
    if session_id is None:
        return Route(Operation.NOT_FOUND)

    if method == "GET":
        return Route(Operation.GET, session_id=session_id)
    if method == "DELETE":
        return Route(Operation.DELETE, session_id=session_id)
    return Route(
        Operation.METHOD_NOT_ALLOWED,
        session_id=session_id,
        allowed_methods=ITEM_METHODS,
    )
