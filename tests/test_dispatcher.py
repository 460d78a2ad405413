"""Tests for the dispatcher, independent of the HTTP transport."""

from __future__ import annotations

import json

from conference.dispatcher import SessionDispatcher
from tests.conftest import make_fields

VALID_BODY = b'{"title":"Microservices","speaker":"Charlie","time":"14:00","duration":90}'


class TestDispatch:
    def test_list_empty(self, store):
        reply = SessionDispatcher(store).dispatch("GET", "/sessions")
        assert reply.status_code == 200
        assert reply.body == b"[]"
        assert reply.headers["Content-Type"] == "application/json"

    def test_create(self, store):
        reply = SessionDispatcher(store).dispatch("POST", "/sessions", VALID_BODY)
        assert reply.status_code == 201
        data = json.loads(reply.body)
        assert data["title"] == "Microservices"
        assert reply.headers["Location"] == f"/sessions/{data['id']}"
        assert len(store) == 1

    def test_create_invalid_does_not_touch_store(self, store):
        reply = SessionDispatcher(store).dispatch("POST", "/sessions", b'{"title":"X"}')
        assert reply.status_code == 400
        assert "error" in json.loads(reply.body)
        assert len(store) == 0

    def test_get(self, store):
        session = store.create(make_fields())
        reply = SessionDispatcher(store).dispatch("GET", f"/sessions/{session.id}")
        assert reply.status_code == 200
        assert json.loads(reply.body)["id"] == session.id

    def test_get_missing(self, store):
        reply = SessionDispatcher(store).dispatch("GET", "/sessions/unknown-id")
        assert reply.status_code == 404
        assert json.loads(reply.body) == {"error": "session not found"}

    def test_delete(self, store):
        session = store.create(make_fields())
        reply = SessionDispatcher(store).dispatch("DELETE", f"/sessions/{session.id}")
        assert reply.status_code == 204
        assert reply.body == b""
        assert "Content-Type" not in reply.headers
        assert store.get(session.id) is None

    def test_delete_missing(self, store):
        reply = SessionDispatcher(store).dispatch("DELETE", "/sessions/unknown-id")
        assert reply.status_code == 404

    def test_method_not_allowed_sets_allow(self, store):
        reply = SessionDispatcher(store).dispatch("PUT", "/sessions/abc")
        assert reply.status_code == 405
        assert reply.headers["Allow"] == "GET, DELETE"
        assert json.loads(reply.body) == {"error": "method not allowed"}

    def test_malformed_id_never_reaches_store(self, store):
        session = store.create(make_fields())
        reply = SessionDispatcher(store).dispatch("DELETE", f"/sessions/{session.id}/extra")
        assert reply.status_code == 404
        assert json.loads(reply.body) == {"error": "route not found"}
        assert len(store) == 1
