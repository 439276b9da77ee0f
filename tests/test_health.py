"""Tests for perch.routes: health check handler and registration."""

import json
import logging
from typing import Any

import pytest

from perch.routes import HEALTH_PATH, add_health_check, health_check
from perch.testing import RecordingSend, make_scope


async def _receive() -> dict[str, Any]:
    return {"type": "http.request", "body": b"", "more_body": False}


class FakeRouter:
    def __init__(self) -> None:
        self.routes: dict[str, Any] = {}

    def handle_func(self, pattern: str, handler: Any) -> None:
        self.routes[pattern] = handler


class TestHealthCheck:
    async def test_reports_up(self) -> None:
        sink = RecordingSend()
        await health_check(make_scope("/health"), _receive, sink)

        assert sink.status == 200
        assert sink.headers["content-type"] == "application/json"
        assert json.loads(sink.body) == {"status": "up"}

    async def test_not_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.INFO, logger="perch.access")
        await health_check(make_scope("/health"), _receive, RecordingSend())
        assert [r for r in caplog.records if r.name == "perch.access"] == []


class TestAddHealthCheck:
    def test_registers_at_health_path(self) -> None:
        router = FakeRouter()
        add_health_check(router)
        assert router.routes == {HEALTH_PATH: health_check}
        assert HEALTH_PATH == "/health"
