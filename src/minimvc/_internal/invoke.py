"""Invoke helpers — resolve a route's handler and call it with path args.

Handlers are plain callables or ``ControllerAction`` references. Binding
is checked against the handler signature before the call, so a route /
handler mismatch surfaces as ``HandlerInvocationError`` instead of a
``TypeError`` from somewhere inside the handler.
"""

import inspect
from collections.abc import Callable
from typing import Any

from minimvc.errors import HandlerInvocationError
from minimvc.routing.route import ControllerAction, RouteMatch


def resolve_handler(handler: Callable[..., Any] | ControllerAction) -> Callable[..., Any]:
    """Return the callable for *handler*, constructing its controller if needed."""
    if isinstance(handler, ControllerAction):
        return handler.resolve()
    return handler


def check_binding(func: Callable[..., Any], match: RouteMatch) -> None:
    """Raise ``HandlerInvocationError`` if ``func(*match.args)`` cannot bind."""
    try:
        sig = inspect.signature(func)
    except (TypeError, ValueError):
        # Builtins without introspectable signatures are called as-is.
        return
    try:
        sig.bind(*match.args)
    except TypeError as exc:
        route = match.route
        msg = (
            f"Handler {route.handler_name} for {route.method} {route.path} "
            f"cannot take {len(match.args)} path argument(s) {match.args!r}: {exc}"
        )
        raise HandlerInvocationError(msg, route=route, path_args=match.args) from exc


def invoke(match: RouteMatch) -> Any:
    """Call the matched route's handler with its path args, in capture order."""
    func = resolve_handler(match.route.handler)
    check_binding(func, match)
    return func(*match.args)
