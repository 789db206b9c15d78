"""Immutable HTTP request.

The router only reads ``method`` and ``path``; the rest is carried for
middleware and handlers. Bodies are read in full by the ASGI entry point
before dispatch, since dispatch itself never suspends.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Any
from urllib.parse import parse_qs

from minimvc.http.cookies import parse_cookies
from minimvc.http.headers import Headers


def _parse_query(query_string: str) -> dict[str, str]:
    """First value per key, blank values kept."""
    parsed = parse_qs(query_string, keep_blank_values=True)
    return {key: values[0] for key, values in parsed.items()}


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request.

    Build one directly with ``Request.build()`` or from an ASGI scope
    with ``Request.from_asgi()``.
    """

    method: str
    path: str
    headers: Headers = field(default_factory=Headers)
    query: Mapping[str, str] = field(default_factory=dict)
    cookies: Mapping[str, str] = field(default_factory=dict)
    path_params: Mapping[str, str] = field(default_factory=dict)
    body: bytes = b""
    client: tuple[str, int] | None = None

    @classmethod
    def build(
        cls,
        method: str,
        path: str,
        *,
        headers: Mapping[str, str] | None = None,
        query_string: str = "",
        body: bytes = b"",
    ) -> Request:
        """Create a Request without a transport, e.g. for direct dispatch."""
        hdrs = Headers(headers)
        return cls(
            method=method,
            path=path,
            headers=hdrs,
            query=_parse_query(query_string),
            cookies=parse_cookies(hdrs.get("cookie", "")),
            body=body,
        )

    @classmethod
    def from_asgi(cls, scope: Mapping[str, Any], body: bytes = b"") -> Request:
        """Create a Request from an ASGI HTTP scope."""
        headers = Headers.from_asgi(scope.get("headers", ()))
        client = scope.get("client")
        return cls(
            method=scope["method"],
            path=scope["path"],
            headers=headers,
            query=_parse_query(scope.get("query_string", b"").decode("latin-1")),
            cookies=parse_cookies(headers.get("cookie", "")),
            body=body,
            client=tuple(client) if client else None,
        )

    def with_path_params(self, path_params: Mapping[str, str]) -> Request:
        """Return a copy carrying the matched route's named captures."""
        return replace(self, path_params=dict(path_params))

    @property
    def content_type(self) -> str | None:
        """The Content-Type header value."""
        return self.headers.get("content-type")
