"""Access log records for sent responses.

One record per successful, non-suppressed ``ResponseBuilder.send()``.
Fields always appear in the same order: status, elapsed, remote host,
method, URL. Existing log parsers depend on that order; the column
widths are cosmetic.

Two renderers are provided:

- ``format_text`` renders the fixed-width pipe-separated line::

      | 200 | 1.204ms                        | 10.0.0.1        | GET    | /health

- ``format_json`` renders the same fields as one JSON object.
"""

import json
import logging
from dataclasses import dataclass

TEXT_FORMAT = "| %-3d | %-30s | %-15s | %-6s | %-30s"

# (nanoseconds per unit, unit suffix, decimals kept)
_UNITS: tuple[tuple[int, str, int], ...] = (
    (1_000_000_000, "s", 9),
    (1_000_000, "ms", 6),
    (1_000, "µs", 3),
)
_MINUTE_NS = 60 * 1_000_000_000
_HOUR_NS = 60 * _MINUTE_NS


@dataclass(frozen=True, slots=True)
class AccessRecord:
    """Everything the access log says about one response."""

    status: int
    elapsed: float  # seconds
    remote_host: str
    method: str
    url: str


def format_duration(seconds: float) -> str:
    """Render an elapsed time with the largest unit that keeps it >= 1.

    ``0.0000012`` -> ``"1.2µs"``, ``0.0035`` -> ``"3.5ms"``, ``2.0`` -> ``"2s"``.
    From one minute up, hours and minutes lead: ``90.0`` -> ``"1m30s"``,
    ``3600.0`` -> ``"1h0m0s"``.
    """
    ns = round(seconds * 1_000_000_000)
    if ns <= 0:
        return "0s"
    if ns >= _MINUTE_NS:
        hours, rest = divmod(ns, _HOUR_NS)
        minutes, rest = divmod(rest, _MINUTE_NS)
        secs = f"{rest / 1_000_000_000:.9f}".rstrip("0").rstrip(".") or "0"
        if hours:
            return f"{hours}h{minutes}m{secs}s"
        return f"{minutes}m{secs}s"
    for size, suffix, decimals in _UNITS:
        if ns >= size:
            value = f"{ns / size:.{decimals}f}".rstrip("0").rstrip(".")
            return f"{value}{suffix}"
    return f"{ns}ns"


def format_text(record: AccessRecord) -> str:
    """Fixed-width, pipe-separated access line."""
    return TEXT_FORMAT % (
        record.status,
        format_duration(record.elapsed),
        record.remote_host,
        record.method,
        record.url,
    )


def format_json(record: AccessRecord) -> str:
    """Access line as a JSON object, keys in log-field order."""
    return json.dumps(
        {
            "status": record.status,
            "elapsed": format_duration(record.elapsed),
            "remote": record.remote_host,
            "method": record.method,
            "url": record.url,
        },
        ensure_ascii=False,
    )


_FORMATTERS = {
    "text": format_text,
    "json": format_json,
}


def log_access(
    record: AccessRecord,
    *,
    fmt: str = "text",
    logger: logging.Logger | None = None,
) -> None:
    """Emit one INFO record for a sent response.

    The raw fields travel in ``extra`` so structured handlers can pick
    them up without parsing the message.
    """
    log = logger or logging.getLogger("perch.access")
    log.info(
        _FORMATTERS[fmt](record),
        extra={
            "status": record.status,
            "elapsed": record.elapsed,
            "remote_host": record.remote_host,
            "method": record.method,
            "url": record.url,
        },
    )
