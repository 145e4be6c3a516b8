"""Testes dos endpoints de health e readiness."""

from __future__ import annotations

import json
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from starlette.requests import Request

from api.routes.health.router import health_check, readiness_check
from utils.errors import DatabaseUnavailableError


def _build_request_with_state(state: SimpleNamespace) -> Request:
    scope = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": "GET",
        "path": "/ready",
        "raw_path": b"/ready",
        "query_string": b"",
        "headers": [],
        "app": SimpleNamespace(state=state),
    }

    async def _receive() -> dict[str, object]:
        return {"type": "http.request", "body": b"", "more_body": False}

    return Request(scope, _receive)


@pytest.mark.asyncio
async def test_health_returns_ok() -> None:
    response = await health_check()

    assert response.status == "ok"


@pytest.mark.asyncio
async def test_readiness_returns_not_ready_without_dependencies() -> None:
    request = _build_request_with_state(
        SimpleNamespace(contact_store=None, process_update_use_case=None)
    )

    response = await readiness_check(request)
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 503
    assert payload["status"] == "not_ready"
    assert payload["checks"]["database"]["error"] == "not_configured"
    assert payload["checks"]["pipeline"]["status"] == "failed"


@pytest.mark.asyncio
async def test_readiness_returns_ready_when_database_pings() -> None:
    contact_store = MagicMock()
    contact_store.ping = AsyncMock(return_value=True)
    request = _build_request_with_state(
        SimpleNamespace(contact_store=contact_store, process_update_use_case=object())
    )

    response = await readiness_check(request)
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 200
    assert payload["status"] == "ready"
    assert payload["checks"]["database"]["status"] == "ok"
    contact_store.ping.assert_awaited_once()


@pytest.mark.asyncio
async def test_readiness_reports_database_failure() -> None:
    contact_store = MagicMock()
    contact_store.ping = AsyncMock(side_effect=DatabaseUnavailableError("down"))
    request = _build_request_with_state(
        SimpleNamespace(contact_store=contact_store, process_update_use_case=object())
    )

    response = await readiness_check(request)
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 503
    assert payload["checks"]["database"]["error"] == "DatabaseUnavailableError"
