"""Error Responses — every failure path renders the same envelope.

Tests cover:
    - store failure → 500 with message + diagnostic details
    - unexpected exception → 500 generic message, no internals
    - malformed bodies → 400 VALIDATION_ERROR with field details
    - unknown routes → 404 envelope
    - every handler logs code, category and severity; log level follows severity
"""

import logging

import pytest
from httpx import ASGITransport, AsyncClient

from app.core.errors import DatabaseError
from app.infrastructure.database import get_db
from app.main import app
from app.services.record_store import OwnerScopedStore
from tests.api.helpers import as_user


async def test_store_failure_is_500_with_details(client, monkeypatch):
    async def failing_list(self, owner_id, filters=None):
        raise DatabaseError("Connection or operational error", "select")

    monkeypatch.setattr(OwnerScopedStore, "list", failing_list)

    res = await client.get("/api/tasks", headers=as_user("u1"))
    assert res.status_code == 500
    assert res.json() == {
        "error": "Database select failed",
        "code": "DATABASE_ERROR",
        "category": "database",
        "details": "Connection or operational error",
    }


@pytest.fixture
async def lenient_client(test_session_factory):
    """Client that turns unhandled app exceptions into responses."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()


async def test_unexpected_exception_is_generic_500(lenient_client, monkeypatch):
    async def exploding_insert(self, record):
        raise RuntimeError("secret internal detail")

    monkeypatch.setattr(OwnerScopedStore, "insert", exploding_insert)

    res = await lenient_client.post(
        "/api/notes", json={"titulo": "N"}, headers=as_user("u1"),
    )
    assert res.status_code == 500
    assert res.json()["code"] == "INTERNAL_ERROR"
    assert "secret" not in res.text

    # the process keeps serving other requests
    res = await lenient_client.get("/api/notes", headers=as_user("u1"))
    assert res.status_code == 200


async def test_non_object_body_is_validation_error(client):
    res = await client.post("/api/tasks", json=["titulo"], headers=as_user("u1"))
    assert res.status_code == 400
    body = res.json()
    assert body["code"] == "VALIDATION_ERROR"
    assert body["category"] == "validation"
    assert body["details"]


async def test_malformed_json_is_validation_error(client):
    res = await client.post(
        "/api/tasks",
        content=b"{not json",
        headers={**as_user("u1"), "content-type": "application/json"},
    )
    assert res.status_code == 400
    assert res.json()["code"] == "VALIDATION_ERROR"


async def test_unknown_route_uses_envelope(client):
    res = await client.get("/api/unknown", headers=as_user("u1"))
    assert res.status_code == 404
    assert res.json()["code"] == "HTTP_ERROR"
    assert res.json()["category"] == "resource_not_found"


def _handler_records(caplog):
    return [r for r in caplog.records if r.name == "app.api.error_handlers"]


async def test_store_failure_logged_at_its_severity(client, monkeypatch, caplog):
    async def failing_list(self, owner_id, filters=None):
        raise DatabaseError("Connection or operational error", "select")

    monkeypatch.setattr(OwnerScopedStore, "list", failing_list)
    caplog.set_level(logging.INFO, logger="app.api.error_handlers")

    await client.get("/api/tasks", headers=as_user("u1"))

    [record] = _handler_records(caplog)
    assert record.levelno == logging.CRITICAL
    assert record.severity == "critical"
    assert record.category == "database"
    assert "Connection or operational error" in record.getMessage()


async def test_client_errors_logged_as_warnings(client, caplog):
    caplog.set_level(logging.INFO, logger="app.api.error_handlers")

    await client.post("/api/tasks", json={}, headers=as_user("u1"))
    await client.post("/api/tasks", json=["titulo"], headers=as_user("u1"))
    await client.get("/api/unknown", headers=as_user("u1"))

    records = _handler_records(caplog)
    assert [r.error_code for r in records] == [
        "MISSING_REQUIRED_FIELD", "VALIDATION_ERROR", "HTTP_ERROR",
    ]
    assert [r.category for r in records] == [
        "validation", "validation", "resource_not_found",
    ]
    assert all(r.levelno == logging.WARNING for r in records)
    assert all(r.severity == "warning" for r in records)
