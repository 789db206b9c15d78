"""Ordered router with anchored template matching and a before() chain.

Routes are registered during setup and frozen into an immutable tuple
when the app starts serving. Matching walks the table in registration
order and the first route whose method and full path match wins. There
is no "most specific" resolution: an earlier broad route shadows a
later narrow one.
"""

import logging
from collections.abc import Callable, Iterable
from typing import Any

from minimvc._internal.invoke import invoke
from minimvc._internal.types import Handler
from minimvc.errors import NotFound, RouteError
from minimvc.http.request import Request
from minimvc.middleware.protocol import MiddlewareRef, as_abort, instantiate
from minimvc.routing.params import compile_path
from minimvc.routing.result import DispatchOutcome, DispatchResult
from minimvc.routing.route import ControllerAction, Route, RouteMatch

logger = logging.getLogger("minimvc.routing")


def _check_method(method: object) -> str:
    if not isinstance(method, str) or not method or any(c.isspace() for c in method):
        msg = f"Invalid HTTP method {method!r}: expected a non-empty verb such as 'GET'."
        raise RouteError(msg)
    return method


def _normalize_handler(handler: Any, path: str) -> Callable[..., Any] | ControllerAction:
    """Accept a callable, a ControllerAction, or a ``(Controller, "action")`` pair."""
    if isinstance(handler, tuple):
        if len(handler) != 2:
            msg = f"Handler for {path!r} must be a (controller, action) pair, got {handler!r}"
            raise RouteError(msg)
        handler = ControllerAction(*handler)

    if isinstance(handler, ControllerAction):
        controller, action = handler.controller, handler.action
        if not isinstance(controller, type):
            msg = f"Controller for {path!r} must be a class, got {controller!r}"
            raise RouteError(msg)
        if not isinstance(action, str) or not callable(getattr(controller, action, None)):
            msg = f"{controller.__qualname__} has no callable action {action!r} (route {path!r})"
            raise RouteError(msg)
        return handler

    if not callable(handler):
        msg = f"Handler for {path!r} is not callable: {handler!r}"
        raise RouteError(msg)
    return handler


def _check_middleware(middleware: Iterable[Any], path: str) -> tuple[Any, ...]:
    chain = tuple(middleware)
    for ref in chain:
        if isinstance(ref, type):
            if not callable(getattr(ref, "before", None)):
                msg = f"Middleware class {ref.__qualname__} for {path!r} has no before() hook"
                raise RouteError(msg)
        elif not (callable(getattr(ref, "before", None)) or callable(ref)):
            msg = (
                f"Middleware for {path!r} must be an instance with before() "
                f"or a zero-argument factory, got {ref!r}"
            )
            raise RouteError(msg)
    return chain


class Router:
    """Ordered route table plus the dispatch engine.

    Usage::

        router = Router()
        router.add("GET", "/", (HomeController, "index"))
        router.add("GET", "/products/{id}/categories/{cat}", (ProductController, "categories"))
        router.add("GET", "/hello", (HomeController, "hello"), [LoginRequired(current_user)])
        router.compile()

        result = router.dispatch("GET", "/products/12345/categories/abcde")
        # ProductController().categories("12345", "abcde")
    """

    __slots__ = ("_compiled", "_routes")

    def __init__(self) -> None:
        self._routes: list[Route] | tuple[Route, ...] = []
        self._compiled = False

    # -- Registration --

    def add(
        self,
        method: str,
        path: str,
        handler: Handler,
        middleware: Iterable[MiddlewareRef] = (),
        *,
        name: str | None = None,
    ) -> Route:
        """Append a route. Must be called before compile().

        Raises ``RouteError`` if the method, path template, handler, or any
        middleware reference is malformed.
        """
        if self._compiled:
            msg = "Cannot add routes after compilation."
            raise RuntimeError(msg)

        compiled = compile_path(path)
        route = Route(
            method=_check_method(method),
            path=path,
            handler=_normalize_handler(handler, path),
            middleware=_check_middleware(middleware, path),
            pattern=compiled.pattern,
            param_names=compiled.param_names,
            name=name,
        )
        self._routes.append(route)  # type: ignore[union-attr]
        return route

    register = add

    def compile(self) -> None:
        """Freeze the route table. No more routes can be added."""
        if not self._compiled:
            self._routes = tuple(self._routes)
            self._compiled = True

    @property
    def compiled(self) -> bool:
        return self._compiled

    @property
    def routes(self) -> tuple[Route, ...]:
        """All registered routes, in registration order."""
        return tuple(self._routes)

    def __len__(self) -> int:
        return len(self._routes)

    # -- Matching --

    def find(self, method: str, path: str) -> RouteMatch | None:
        """Return the first route matching *method* and the whole *path*."""
        for route in self._routes:
            if route.method != method:
                continue
            m = route.pattern.fullmatch(path)
            if m is not None:
                return RouteMatch(route=route, args=m.groups())
        return None

    def match(self, method: str, path: str) -> RouteMatch:
        """Like ``find()``, but raises ``NotFound`` when nothing matches."""
        match = self.find(method, path)
        if match is None:
            raise NotFound(f"No route matches {method} {path!r}")
        return match

    # -- Dispatch --

    def dispatch(self, method: str, path: str, request: Request | None = None) -> DispatchResult:
        """Match, run the route's middleware in order, then call its handler.

        Returns a ``DispatchResult`` for the three terminal states (not
        found, aborted by middleware, handled). Raises
        ``HandlerInvocationError`` when the path variables cannot be bound
        to the handler. Exceptions from middleware or handlers propagate
        unchanged.
        """
        match = self.find(method, path)
        if match is None:
            logger.debug("No route matches %s %s", method, path)
            return DispatchResult(DispatchOutcome.NOT_FOUND, method, path)

        route = match.route
        if request is None:
            request = Request.build(method, path)
        request = request.with_path_params(match.path_params)

        for ref in route.middleware:
            mw = instantiate(ref)
            abort = as_abort(mw.before(request), mw)
            if abort is not None:
                logger.debug("%s %s aborted by %r", method, path, mw)
                return DispatchResult(
                    DispatchOutcome.ABORTED,
                    method,
                    path,
                    route=route,
                    args=match.args,
                    response=abort.response,
                    aborted_by=mw,
                )

        logger.debug("%s %s -> %s%r", method, path, route.handler_name, match.args)
        value = invoke(match)
        return DispatchResult(
            DispatchOutcome.HANDLED,
            method,
            path,
            route=route,
            args=match.args,
            value=value,
        )
