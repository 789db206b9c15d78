"""Middleware protocol and the Abort signal.

A middleware is any object with a ``before`` hook::

    class RequestLog:
        def before(self, request: Request) -> Abort | None:
            log.info("%s %s", request.method, request.path)
            return None

No base class required. The router checks the shape, not the lineage.

Returning ``None`` lets dispatch continue. Returning an ``Abort`` (or a
bare ``Response`` / ``Redirect``, which is wrapped) stops it: no further
middleware runs and the handler is never called. The aborting middleware
owns the response.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol, TypeAlias, runtime_checkable

from minimvc.http.request import Request
from minimvc.http.response import Redirect, Response

# Anything a middleware or handler may hand back as a finished response
AnyResponse: TypeAlias = Response | Redirect


@dataclass(frozen=True, slots=True)
class Abort:
    """Stop dispatch; ``response`` is sent instead of calling the handler."""

    response: AnyResponse


@runtime_checkable
class Middleware(Protocol):
    """Protocol for minimvc middleware.

    Register either an instance (shared by every dispatch) or a class /
    zero-argument factory (called once per dispatch for a fresh instance)::

        router.add("GET", "/hello", hello, [RequireSession])
        router.add("GET", "/world", world, [lambda: LoginRequired(current_user)])
    """

    def before(self, request: Request) -> Abort | None: ...


# A middleware reference as accepted at registration time
MiddlewareRef: TypeAlias = Middleware | Callable[[], Middleware]


def redirect(location: str, status: int = 302) -> Abort:
    """Short-circuit dispatch with a redirect to *location*."""
    return Abort(Redirect(location, status=status))


def instantiate(ref: Any) -> Middleware:
    """Turn a registered middleware reference into an object with ``before``.

    Classes and factories are called here, once per dispatch. Instances
    are returned unchanged.
    """
    if not isinstance(ref, type) and hasattr(ref, "before"):
        return ref
    instance = ref()
    if not hasattr(instance, "before"):
        msg = f"Middleware factory {ref!r} returned {type(instance).__name__}, which has no before()"
        raise TypeError(msg)
    return instance


def as_abort(result: object, middleware: object) -> Abort | None:
    """Normalise a ``before()`` return value."""
    if result is None:
        return None
    if isinstance(result, Abort):
        return result
    if isinstance(result, Response | Redirect):
        return Abort(result)
    msg = (
        f"{type(middleware).__name__}.before() returned {type(result).__name__}; "
        "expected None, Abort, Response or Redirect"
    )
    raise TypeError(msg)
