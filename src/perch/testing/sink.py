"""In-memory ASGI sink and scope factory for tests.

Usage::

    sink = RecordingSend()
    builder = ResponseBuilder.from_scope(make_scope("/health"), sink)
    await builder.build(200, "ok").send()
    assert sink.status == 200
    assert sink.body == b"ok"
"""

from collections.abc import MutableMapping
from typing import Any


def make_scope(
    path: str = "/",
    *,
    method: str = "GET",
    query_string: bytes = b"",
    client: tuple[str, int] | None = ("127.0.0.1", 54321),
) -> dict[str, Any]:
    """Build a minimal ASGI HTTP scope."""
    return {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": method,
        "path": path,
        "raw_path": path.encode("latin-1"),
        "query_string": query_string,
        "root_path": "",
        "headers": [],
        "server": ("127.0.0.1", 8000),
        "client": client,
    }


class RecordingSend:
    __test__ = False  # Tell pytest this is not a test class
    """ASGI ``send`` callable that records every message.

    Pass ``fail_on`` to raise ``error`` when a message of that type is
    sent (e.g. ``"http.response.body"`` to simulate a broken pipe).
    """

    __slots__ = ("error", "fail_on", "messages")

    def __init__(
        self,
        *,
        fail_on: str | None = None,
        error: Exception | None = None,
    ) -> None:
        self.messages: list[MutableMapping[str, Any]] = []
        self.fail_on = fail_on
        self.error = error or BrokenPipeError("connection closed")

    async def __call__(self, message: MutableMapping[str, Any]) -> None:
        if message["type"] == self.fail_on:
            raise self.error
        self.messages.append(message)

    def _of_type(self, kind: str) -> list[MutableMapping[str, Any]]:
        return [m for m in self.messages if m["type"] == kind]

    @property
    def starts(self) -> list[MutableMapping[str, Any]]:
        """Every ``http.response.start`` message."""
        return self._of_type("http.response.start")

    @property
    def bodies(self) -> list[MutableMapping[str, Any]]:
        """Every ``http.response.body`` message."""
        return self._of_type("http.response.body")

    @property
    def status(self) -> int | None:
        starts = self.starts
        return starts[0]["status"] if starts else None

    @property
    def headers(self) -> dict[str, str]:
        """Headers of the first start message, decoded."""
        starts = self.starts
        if not starts:
            return {}
        return {
            name.decode("latin-1"): value.decode("latin-1") for name, value in starts[0]["headers"]
        }

    @property
    def body(self) -> bytes:
        return b"".join(m.get("body", b"") for m in self.bodies)
