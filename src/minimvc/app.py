"""minimvc application class — the front controller.

Mutable during setup (route registration). Frozen at runtime when
``handle()`` or ``__call__()`` is first invoked.
"""

import logging
import threading
import traceback
from collections.abc import Callable, Iterable
from dataclasses import replace
from typing import Any

from minimvc._internal.asgi import (
    Receive,
    RequestTooLarge,
    Scope,
    Send,
    read_body,
    response_messages,
    send_response,
)
from minimvc._internal.types import Handler
from minimvc.config import AppConfig
from minimvc.errors import ConfigurationError
from minimvc.http.request import Request
from minimvc.http.response import Redirect, Response
from minimvc.middleware.protocol import MiddlewareRef
from minimvc.routing.result import DispatchOutcome, DispatchResult
from minimvc.routing.route import Route
from minimvc.routing.router import Router

logger = logging.getLogger("minimvc.server")


def to_response(value: Any) -> Response:
    """Convert a handler return value into a Response."""
    if isinstance(value, Response):
        return value
    if isinstance(value, Redirect):
        return value.to_response()
    if value is None:
        return Response()
    if isinstance(value, str | bytes):
        return Response(body=value)
    msg = (
        f"Handler returned {type(value).__name__}; "
        "expected str, bytes, Response, Redirect or None"
    )
    raise TypeError(msg)


class App:
    """The minimvc application.

    Owns a ``Router``, turns dispatch results into responses, and speaks
    ASGI. Register routes at import time, then hand the app to any ASGI
    server::

        app = App()
        app.get("/", (HomeController, "index"))
        app.get("/hello", (HomeController, "hello"), [LoginRequired(current_user)])

        @app.route("/products/{id}/categories/{cat}")
        def categories(product_id: str, category_id: str) -> str:
            return f"Product ID: {product_id}, Category ID: {category_id}"

    Thread safety:
        Setup is single-threaded. The freeze transition uses a Lock +
        double-check so exactly one thread compiles the router. After
        that the route table is a tuple and is only read.
    """

    __slots__ = ("_freeze_lock", "_frozen", "config", "router")

    def __init__(self, config: AppConfig | None = None, *, router: Router | None = None) -> None:
        self.config: AppConfig = config or AppConfig()
        self.router: Router = router if router is not None else Router()
        self._frozen: bool = False
        self._freeze_lock: threading.Lock = threading.Lock()

    # -- Route registration --

    def add(
        self,
        method: str,
        path: str,
        handler: Handler,
        middleware: Iterable[MiddlewareRef] = (),
        *,
        name: str | None = None,
    ) -> Route:
        """Register a route. See ``Router.add()``."""
        self._check_not_frozen()
        return self.router.add(method, path, handler, middleware, name=name)

    def get(
        self,
        path: str,
        handler: Handler,
        middleware: Iterable[MiddlewareRef] = (),
        *,
        name: str | None = None,
    ) -> Route:
        """Register a ``GET`` route."""
        return self.add("GET", path, handler, middleware, name=name)

    def post(
        self,
        path: str,
        handler: Handler,
        middleware: Iterable[MiddlewareRef] = (),
        *,
        name: str | None = None,
    ) -> Route:
        """Register a ``POST`` route."""
        return self.add("POST", path, handler, middleware, name=name)

    def put(
        self,
        path: str,
        handler: Handler,
        middleware: Iterable[MiddlewareRef] = (),
        *,
        name: str | None = None,
    ) -> Route:
        """Register a ``PUT`` route."""
        return self.add("PUT", path, handler, middleware, name=name)

    def delete(
        self,
        path: str,
        handler: Handler,
        middleware: Iterable[MiddlewareRef] = (),
        *,
        name: str | None = None,
    ) -> Route:
        """Register a ``DELETE`` route."""
        return self.add("DELETE", path, handler, middleware, name=name)

    def route(
        self,
        path: str,
        *,
        methods: Iterable[str] = ("GET",),
        middleware: Iterable[MiddlewareRef] = (),
        name: str | None = None,
    ) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        """Register a function handler via decorator.

        *methods* is one verb (``"POST"``) or several; each gets its own route.
        """
        verbs = (methods,) if isinstance(methods, str) else tuple(methods)
        chain = tuple(middleware)

        def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
            for method in verbs:
                self.add(method, path, func, chain, name=name)
            return func

        return decorator

    # -- Request handling --

    def dispatch(self, request: Request) -> DispatchResult:
        """Dispatch *request* through the router without building a response."""
        self._ensure_frozen()
        if not request.path:
            request = replace(request, path=self.config.default_path)
        return self.router.dispatch(request.method, request.path, request)

    def handle(self, request: Request) -> Response:
        """Front controller: dispatch *request* and build its Response.

        No match gives a 404 with ``config.not_found_body``. An abort sends
        the middleware's own response. Otherwise the handler's return value
        becomes the response.
        """
        result = self.dispatch(request)
        if result.outcome is DispatchOutcome.NOT_FOUND:
            return Response(
                body=self.config.not_found_body,
                status=404,
                content_type=self.config.not_found_content_type,
            )
        if result.outcome is DispatchOutcome.ABORTED:
            return to_response(result.response)
        return to_response(result.value)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI entry point."""
        if scope["type"] != "http":
            return

        try:
            body = await read_body(receive, self.config.max_content_length)
        except RequestTooLarge:
            await send_response(Response("Payload Too Large", status=413), send)
            return

        request = Request.from_asgi(scope, body)
        try:
            messages = response_messages(self.handle(request))
        except Exception as exc:
            messages = response_messages(self._internal_error(exc, request))
        for message in messages:
            await send(message)

    def _internal_error(self, exc: Exception, request: Request) -> Response:
        logger.exception("Unhandled error in %s %s", request.method, request.path)
        if self.config.debug:
            body = "".join(traceback.format_exception(exc))
        else:
            body = "Internal Server Error"
        return Response(body=body, status=500, content_type="text/plain; charset=utf-8")

    # -- Freeze --

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        """Compile the router. Called automatically on first request."""
        self._ensure_frozen()

    def _ensure_frozen(self) -> None:
        if self._frozen:
            return
        with self._freeze_lock:
            if self._frozen:
                return
            self.router.compile()
            logger.debug("Route table frozen with %d route(s)", len(self.router))
            self._frozen = True

    def _check_not_frozen(self) -> None:
        if self._frozen:
            msg = "Cannot modify the app after it has started serving requests."
            raise ConfigurationError(msg)
