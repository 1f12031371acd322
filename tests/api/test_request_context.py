"""
Tests for the request context middleware.
"""

import uuid

import pytest
from fastapi.testclient import TestClient
from structlog.testing import capture_logs

from presi.infra.middleware.request_context import resolve_request_id
from presi.main import create_app


@pytest.mark.parametrize("incoming", ["req-123", "a.b_c", "x" * 64])
def test_plain_ids_are_kept(incoming):
    assert resolve_request_id(incoming) == incoming


@pytest.mark.parametrize("incoming", [None, "", "has space", "x" * 65, "id\nforged=1"])
def test_unsafe_ids_are_replaced(incoming):
    generated = resolve_request_id(incoming)

    assert generated != incoming
    assert uuid.UUID(generated)


def test_unsafe_header_is_not_echoed(client):
    response = client.get("/health", headers={"X-Request-ID": "has space"})

    echoed = response.headers["X-Request-ID"]
    assert echoed != "has space"
    assert uuid.UUID(echoed)


def test_request_end_is_logged_with_duration(client):
    with capture_logs() as logs:
        client.get("/health", headers={"X-Request-ID": "req-9"})

    (end,) = [e for e in logs if e["event"] == "request.end"]
    assert end["request_id"] == "req-9"
    assert end["status_code"] == 200
    assert end["duration_ms"] >= 0


def test_handler_error_is_logged_and_reraised():
    app = create_app()

    @app.get("/boom")
    async def boom():
        raise RuntimeError("kaboom")

    with TestClient(app, raise_server_exceptions=False) as test_client:
        with capture_logs() as logs:
            response = test_client.get("/boom", headers={"X-Request-ID": "req-err"})

    assert response.status_code == 500
    assert response.json()["error"] == "INTERNAL_SERVER_ERROR"
    (error,) = [e for e in logs if e["event"] == "request.error"]
    assert error["error_type"] == "RuntimeError"
    assert error["request_id"] == "req-err"
    assert error["log_level"] == "error"
