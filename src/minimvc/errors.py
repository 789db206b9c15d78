"""minimvc exception hierarchy.

Shared across Router, App, and middleware so every module raises and
catches the same types.
"""

from dataclasses import dataclass
from typing import Any


class MiniMVCError(Exception):
    """Base for all minimvc-specific errors."""


class ConfigurationError(MiniMVCError):
    """Raised when app configuration is invalid.

    Typically raised at startup, while routes are being registered.
    """


class RouteError(ConfigurationError):
    """A route registration is malformed.

    Bad method, bad path template, or a handler / middleware reference
    that can never be invoked. Raised by ``Router.add()`` so a broken
    route fails the app at startup instead of being skipped.
    """


class HandlerInvocationError(MiniMVCError):
    """The path variables of a match cannot be bound to its handler.

    Signals a mismatch between the route template and the handler's
    signature (e.g. two placeholders, one parameter). Never caught by
    the router.
    """

    def __init__(
        self, message: str, *, route: Any = None, path_args: tuple[str, ...] = ()
    ) -> None:
        super().__init__(message)
        self.route = route
        self.path_args = path_args


@dataclass(frozen=True, slots=True)
class HTTPError(MiniMVCError):
    """An error that maps directly to an HTTP status code."""

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class NotFound(HTTPError):  # noqa: N818
    """404 — no route matched the request method and path."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)
