"""Typed ASGI definitions.

Raw aliases for the callables a server hands to an ASGI app. Users
interact with ResponseBuilder and RequestInfo, not these.
"""

from collections.abc import Awaitable, Callable, MutableMapping
from typing import Any, TypeAlias

# Raw ASGI callables, as servers pass them
Scope: TypeAlias = MutableMapping[str, Any]
Receive: TypeAlias = Callable[[], Awaitable[MutableMapping[str, Any]]]
Send: TypeAlias = Callable[[MutableMapping[str, Any]], Awaitable[None]]
ASGIHandler: TypeAlias = Callable[[Scope, Receive, Send], Awaitable[None]]
