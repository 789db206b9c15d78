"""Async in-process client for minimvc applications.

Requests go straight into ``App.__call__`` as ASGI messages; responses
come back as the same ``Response`` type handlers build.
"""

from typing import Any

from minimvc._internal.asgi import Receive, Scope
from minimvc.app import App
from minimvc.http.response import Response


def _scope(method: str, target: str, headers: dict[str, str] | None) -> Scope:
    path, _, query = target.partition("?")
    return {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": method,
        "path": path,
        "query_string": query.encode("latin-1"),
        "headers": [
            (name.lower().encode("latin-1"), value.encode("latin-1"))
            for name, value in (headers or {}).items()
        ],
        "client": ("127.0.0.1", 0),
    }


def _receiver(body: bytes) -> Receive:
    pending = iter([{"type": "http.request", "body": body, "more_body": False}])

    async def receive() -> dict[str, Any]:
        return next(pending, {"type": "http.disconnect"})

    return receive


class _Capture:
    """ASGI ``send`` callable that records what the app emitted."""

    __slots__ = ("body", "headers", "status")

    def __init__(self) -> None:
        self.status = 0
        self.headers: list[tuple[str, str]] = []
        self.body = bytearray()

    async def __call__(self, message: dict[str, Any]) -> None:
        if message["type"] == "http.response.start":
            self.status = message["status"]
            self.headers = [
                (name.decode("latin-1"), value.decode("latin-1"))
                for name, value in message.get("headers", ())
            ]
        elif message["type"] == "http.response.body":
            self.body += message.get("body", b"")

    def to_response(self) -> Response:
        content_type = next((v for k, v in self.headers if k == "content-type"), "")
        return Response(
            body=bytes(self.body),
            status=self.status,
            content_type=content_type,
            headers=tuple((k, v) for k, v in self.headers if k != "content-type"),
        )


class TestClient:
    """Drive an App without a server.

    Usage::

        async with TestClient(app) as client:
            response = await client.get("/products/12345/categories/abcde")
            assert response.text == "Product ID: 12345, Category ID: abcde"

    The method is sent exactly as given, so ``client.request("get", "/")``
    does not match a ``GET`` route.
    """

    __test__ = False  # not a pytest test class
    __slots__ = ("app",)

    def __init__(self, app: App) -> None:
        self.app = app

    async def __aenter__(self) -> "TestClient":
        self.app.freeze()
        return self

    async def __aexit__(self, *args: object) -> None:
        return None

    async def request(
        self,
        method: str,
        path: str,
        *,
        headers: dict[str, str] | None = None,
        body: bytes = b"",
    ) -> Response:
        """Send one request; *path* may carry a ``?query``."""
        capture = _Capture()
        await self.app(_scope(method, path, headers), _receiver(body), capture)
        return capture.to_response()

    async def get(self, path: str, *, headers: dict[str, str] | None = None) -> Response:
        return await self.request("GET", path, headers=headers)

    async def post(
        self, path: str, *, headers: dict[str, str] | None = None, body: bytes = b""
    ) -> Response:
        return await self.request("POST", path, headers=headers, body=body)

    async def put(
        self, path: str, *, headers: dict[str, str] | None = None, body: bytes = b""
    ) -> Response:
        return await self.request("PUT", path, headers=headers, body=body)

    async def delete(self, path: str, *, headers: dict[str, str] | None = None) -> Response:
        return await self.request("DELETE", path, headers=headers)
