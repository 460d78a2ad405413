"""Pydantic models: the wire contract between the server and its clients.

A Session serializes with keys in declaration order
(id, title, speaker, time, duration), so field order here is part of the
contract. Changes here must be mirrored by every client of the API.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------

class SessionCreate(BaseModel):
    """POST /sessions request body.

    Strict: no string-to-int coercion and no bools for ``duration``.
    Unknown keys (including a client-supplied ``id``) are ignored.
    """
    model_config = ConfigDict(strict=True, extra="ignore")

    title: str = Field(min_length=1)
    speaker: str = Field(min_length=1)
    time: str
    duration: int = Field(ge=0)


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------

class Session(BaseModel):
    """A scheduled conference talk, as stored and as returned by the API."""
    id: str = Field(min_length=1)
    title: str
    speaker: str
    time: str
    duration: int


class ErrorResponse(BaseModel):
    """Body of every 4xx reply."""
    error: str


class HealthResponse(BaseModel):
    """GET /health response."""
    status: Literal["ok"] = "ok"
    version: str = "0.1.0"
    session_count: int
