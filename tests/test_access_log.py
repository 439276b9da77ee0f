"""Tests for perch.access_log: record rendering and emission."""

import json
import logging

import pytest

from perch.access_log import (
    AccessRecord,
    format_duration,
    format_json,
    format_text,
    log_access,
)


def _record(**overrides: object) -> AccessRecord:
    fields: dict[str, object] = {
        "status": 200,
        "elapsed": 0.0032,
        "remote_host": "10.0.0.1",
        "method": "GET",
        "url": "/health",
    }
    fields.update(overrides)
    return AccessRecord(**fields)  # type: ignore[arg-type]


class TestFormatDuration:
    @pytest.mark.parametrize(
        ("seconds", "expected"),
        [
            (0, "0s"),
            (0.00000085, "850ns"),
            (0.0000125, "12.5µs"),
            (0.0032, "3.2ms"),
            (1.5, "1.5s"),
            (2.0, "2s"),
            (90.0, "1m30s"),
            (61.5, "1m1.5s"),
            (3600.0, "1h0m0s"),
            (3725.0, "1h2m5s"),
        ],
    )
    def test_units(self, seconds: float, expected: str) -> None:
        assert format_duration(seconds) == expected


class TestFormatText:
    def test_field_order(self) -> None:
        parts = [p.strip() for p in format_text(_record()).split("|")[1:]]
        assert parts == ["200", "3.2ms", "10.0.0.1", "GET", "/health"]

    def test_column_widths(self) -> None:
        columns = format_text(_record()).split("|")
        assert len(columns[1]) == len(" 200 ")
        assert len(columns[2]) == 32
        assert len(columns[3]) == 17
        assert len(columns[4]) == 8

    def test_long_url_not_truncated(self) -> None:
        url = "/" + "a" * 60
        assert format_text(_record(url=url)).rstrip().endswith(url)


class TestFormatJSON:
    def test_keys_in_field_order(self) -> None:
        payload = json.loads(format_json(_record(status=503)))
        assert list(payload) == ["status", "elapsed", "remote", "method", "url"]
        assert payload["status"] == 503
        assert payload["elapsed"] == "3.2ms"


class TestLogAccess:
    def test_one_info_record(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.INFO, logger="perch.access")
        log_access(_record())

        assert len(caplog.records) == 1
        record = caplog.records[0]
        assert record.levelno == logging.INFO
        assert record.name == "perch.access"
        assert record.url == "/health"  # type: ignore[attr-defined]

    def test_explicit_logger(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.INFO, logger="custom")
        log_access(_record(), fmt="json", logger=logging.getLogger("custom"))

        (record,) = caplog.records
        assert record.name == "custom"
        assert json.loads(record.getMessage())["method"] == "GET"
