"""Per-request response builder with a single terminal send.

Accumulates status, headers and body through chainable calls, then
writes everything to the ASGI sink in one ``send()`` and logs the
outcome::

    builder = ResponseBuilder.from_scope(scope, send)
    html = registry.render_html("404.tmpl", {"message": "Not here"})
    await builder.set_headers({"content-type": "text/html"}).build(404, html).send()

A builder is mutable: every chained call returns the same instance.
One builder belongs to one request task and is discarded after
``send()``.
"""

from __future__ import annotations

import json as json_module
import logging
import time
from collections.abc import Mapping
from typing import Any

from perch._internal.asgi import Scope, Send
from perch.access_log import AccessRecord, log_access
from perch.config import AccessLogConfig
from perch.errors import ResponseAlreadySentError, SerializationError
from perch.http.request import RequestInfo
from perch.server.sender import send_response

_DEFAULT_ACCESS_LOG = AccessLogConfig()


class ResponseBuilder:
    """Collects a response, then sends it exactly once."""

    __slots__ = (
        "_access_log",
        "_sent",
        "body",
        "headers",
        "log_ignored",
        "request",
        "sink",
        "start",
        "status",
    )

    def __init__(
        self,
        send: Send,
        request: RequestInfo,
        *,
        access_log: AccessLogConfig | None = None,
    ) -> None:
        self.sink = send
        self.request = request
        self.status: int = 200
        self.headers: dict[str, str] = {}
        self.body: str | bytes = ""
        self.log_ignored: bool = False
        self.start: float = time.perf_counter()
        self._access_log = access_log or _DEFAULT_ACCESS_LOG
        self._access_log.validate()
        self._sent = False

    @classmethod
    def from_scope(
        cls,
        scope: Scope,
        send: Send,
        *,
        access_log: AccessLogConfig | None = None,
    ) -> ResponseBuilder:
        """Bind a builder to a raw ASGI HTTP scope and its ``send``."""
        return cls(send, RequestInfo.from_scope(scope), access_log=access_log)

    # -- Chainable mutations --

    def set_headers(self, headers: Mapping[str, str]) -> ResponseBuilder:
        """Replace the whole header set. Previous headers are dropped."""
        self.headers = dict(headers)
        return self

    def build(self, status: int, body: str | bytes) -> ResponseBuilder:
        """Set status and body."""
        self.status = status
        self.body = body
        return self

    def ignore_log(self) -> ResponseBuilder:
        """Don't log this response. Useful for static files or health checks."""
        self.log_ignored = True
        return self

    # -- Terminal operations --

    async def send(self) -> None:
        """Write headers, status and body to the sink, then log.

        Raises ``WriteError`` if the sink fails; in that case nothing
        is logged. Raises ``ResponseAlreadySentError`` on a second call.
        """
        if self._sent:
            msg = f"Response for {self.request.method} {self.request.url} was already sent"
            raise ResponseAlreadySentError(msg)
        self._sent = True

        await send_response(self.status, self.headers, self.body, self.sink)

        elapsed = time.perf_counter() - self.start
        if self.log_ignored or not self._access_log.enabled:
            return
        log_access(
            AccessRecord(
                status=self.status,
                elapsed=elapsed,
                remote_host=self.request.remote_host,
                method=self.request.method,
                url=self.request.url,
            ),
            fmt=self._access_log.format,
            logger=logging.getLogger(self._access_log.logger_name),
        )

    async def build_and_send(
        self,
        status: int,
        body: str | bytes,
        headers: Mapping[str, str],
    ) -> None:
        """Replace headers, set status and body, and send.

        Usage::

            await builder.build_and_send(200, "Hello World", {"content-type": "text/plain"})
        """
        self.set_headers(headers)
        self.build(status, body)
        await self.send()

    async def as_json(self, status: int, body: Mapping[str, Any]) -> None:
        """Send ``body`` as a JSON document.

        Encoding happens before the sink is touched; a value that cannot
        be encoded raises ``SerializationError`` and nothing is written.
        Only the ``content-type`` header is overwritten, whatever case the
        caller used for its name.

        Usage::

            await builder.as_json(200, {"message": "Hello World"})
        """
        try:
            encoded = json_module.dumps(
                body, separators=(",", ":"), sort_keys=True, ensure_ascii=False, allow_nan=False
            )
        except (TypeError, ValueError) as exc:
            raise SerializationError(reason=str(exc)) from exc
        for name in [n for n in self.headers if n.lower() == "content-type"]:
            del self.headers[name]
        self.headers["content-type"] = "application/json"
        self.build(status, encoded)
        await self.send()
