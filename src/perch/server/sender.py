"""ASGI response sending: translates a built response into ASGI messages.

One ``http.response.start`` (status and headers) followed by one
``http.response.body``. No streaming.
"""

import logging
from collections.abc import Mapping

from perch._internal.asgi import Send
from perch.errors import WriteError

logger = logging.getLogger("perch.server")


def encode_body(body: str | bytes) -> bytes:
    """Body as bytes, UTF-8 for text."""
    if isinstance(body, str):
        return body.encode("utf-8")
    return body


def raw_headers(headers: Mapping[str, str], body: bytes) -> list[tuple[bytes, bytes]]:
    """Encode a header mapping for ASGI.

    Names and values are passed through unvalidated. ``content-length``
    is added unless the caller set one.
    """
    encoded: list[tuple[bytes, bytes]] = [
        (name.lower().encode("latin-1"), value.encode("latin-1")) for name, value in headers.items()
    ]
    if not any(name == b"content-length" for name, _ in encoded):
        encoded.append((b"content-length", str(len(body)).encode("latin-1")))
    return encoded


async def send_response(
    status: int,
    headers: Mapping[str, str],
    body: str | bytes,
    send: Send,
) -> None:
    """Write status, headers and body to the ASGI sink.

    Any failure while encoding or writing is raised as ``WriteError``
    with the original exception chained. Nothing is retried.
    """
    try:
        payload = encode_body(body)
        start = {
            "type": "http.response.start",
            "status": status,
            "headers": raw_headers(headers, payload),
        }
        await send(start)
        await send(
            {
                "type": "http.response.body",
                "body": payload,
            }
        )
    except Exception as exc:
        logger.debug("Response write failed: %s", exc)
        raise WriteError(reason=str(exc) or type(exc).__name__) from exc
