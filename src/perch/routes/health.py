"""Health check endpoint.

perch ships no router. ``add_health_check`` registers the handler on
any router exposing ``handle_func(pattern, handler)``.
"""

from typing import Protocol

from perch._internal.asgi import ASGIHandler, Receive, Scope, Send
from perch.http.response import ResponseBuilder

HEALTH_PATH = "/health"


class RouteRegistrar(Protocol):
    """Anything that can bind an ASGI handler to a path pattern."""

    def handle_func(self, pattern: str, handler: ASGIHandler) -> object: ...


async def health_check(scope: Scope, receive: Receive, send: Send) -> None:  # noqa: ARG001
    """Answer ``{"status": "up"}`` without writing an access log line."""
    await (
        ResponseBuilder.from_scope(scope, send)
        .ignore_log()
        .set_headers({"content-type": "application/json"})
        .build(200, b'{"status": "up"}')
        .send()
    )


def add_health_check(router: RouteRegistrar) -> None:
    """Register ``health_check`` at ``/health``."""
    router.handle_func(HEALTH_PATH, health_check)
