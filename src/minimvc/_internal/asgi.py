"""ASGI type aliases and the message plumbing the front controller needs."""

from collections.abc import Awaitable, Callable, MutableMapping
from typing import Any, TypeAlias

from minimvc.http.response import Response

# Raw ASGI types
Scope: TypeAlias = MutableMapping[str, Any]
Receive: TypeAlias = Callable[[], Awaitable[MutableMapping[str, Any]]]
Send: TypeAlias = Callable[[MutableMapping[str, Any]], Awaitable[None]]


class RequestTooLarge(Exception):  # noqa: N818
    """The request body exceeded ``AppConfig.max_content_length``."""


async def read_body(receive: Receive, limit: int) -> bytes:
    """Drain ``http.request`` messages into one bytes object."""
    chunks: list[bytes] = []
    size = 0
    while True:
        message = await receive()
        if message["type"] == "http.disconnect":
            break
        chunk = message.get("body", b"")
        size += len(chunk)
        if size > limit:
            raise RequestTooLarge(size)
        chunks.append(chunk)
        if not message.get("more_body", False):
            break
    return b"".join(chunks)


def _body_allowed(status: int) -> bool:
    """Whether an HTTP status code permits a response body."""
    # RFC: 1xx, 204, and 304 responses do not include a message body.
    return not (100 <= status < 200 or status in {204, 304})


def response_messages(response: Response) -> list[dict[str, Any]]:
    """Encode a Response as its ``http.response.start`` and body messages.

    Raises ``UnicodeEncodeError`` for header values outside latin-1, before
    anything has been sent.
    """
    body = response.body_bytes if _body_allowed(response.status) else b""
    raw_headers = [(b"content-type", response.content_type.encode("latin-1"))]
    raw_headers.extend(
        (name.lower().encode("latin-1"), value.encode("latin-1"))
        for name, value in response.headers
    )
    raw_headers.append((b"content-length", str(len(body)).encode("latin-1")))
    return [
        {"type": "http.response.start", "status": response.status, "headers": raw_headers},
        {"type": "http.response.body", "body": body},
    ]


async def send_response(response: Response, send: Send) -> None:
    """Translate a Response into ASGI send() calls."""
    for message in response_messages(response):
        await send(message)
