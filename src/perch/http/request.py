"""Read-only request descriptor.

Only what the access log needs: method, URL, and the peer address.
Frozen at creation, parsed once from the ASGI scope.
"""

from __future__ import annotations

from dataclasses import dataclass

from perch._internal.asgi import Scope


def strip_port(remote_addr: str) -> str:
    """Drop a ``:port`` suffix from a peer address.

    Splits at the first colon. A bracketed IPv6 address
    (``[::1]:8000``) yields the address between the brackets.
    """
    if remote_addr.startswith("["):
        end = remote_addr.find("]")
        if end != -1:
            return remote_addr[1:end]
    return remote_addr.split(":", 1)[0]


@dataclass(frozen=True, slots=True)
class RequestInfo:
    """Metadata about the inbound request, used for access logging."""

    method: str
    url: str
    remote_addr: str = ""

    @property
    def remote_host(self) -> str:
        """The peer address without its port."""
        return strip_port(self.remote_addr)

    @classmethod
    def from_scope(cls, scope: Scope) -> RequestInfo:
        """Parse an ASGI HTTP scope into a descriptor."""
        path = scope.get("path", "/")
        qs = scope.get("query_string", b"")
        url = f"{path}?{qs.decode('latin-1')}" if qs else path

        client = scope.get("client")
        if client:
            host, port = client[0], client[1]
            remote_addr = f"[{host}]:{port}" if ":" in host else f"{host}:{port}"
        else:
            remote_addr = ""

        return cls(
            method=scope.get("method", "GET"),
            url=url,
            remote_addr=remote_addr,
        )
