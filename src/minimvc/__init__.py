"""minimvc — a small MVC front controller.

Ordered routes with ``{placeholder}`` paths, per-route ``before()``
middleware that can short-circuit, and controllers called with path
variables as positional arguments.

Basic usage::

    from minimvc import App
    from minimvc.middleware import LoginRequired

    class ProductController:
        def categories(self, product_id: str, category_id: str) -> str:
            return f"Product ID: {product_id}, Category ID: {category_id}"

    app = App()
    app.get("/products/{id}/categories/{cat}", (ProductController, "categories"))

Run it under any ASGI server, or dispatch directly::

    result = app.router.dispatch("GET", "/products/12345/categories/abcde")
"""

__version__ = "0.1.0"
__all__ = [
    "Abort",
    "App",
    "AppConfig",
    "ConfigurationError",
    "ControllerAction",
    "DispatchOutcome",
    "DispatchResult",
    "HTTPError",
    "HandlerInvocationError",
    "Middleware",
    "MiniMVCError",
    "NotFound",
    "Redirect",
    "Request",
    "Response",
    "Route",
    "RouteError",
    "RouteMatch",
    "Router",
    "redirect",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import minimvc`` fast while providing a clean top-level API.
    """
    if name == "App":
        from minimvc.app import App

        return App

    if name == "AppConfig":
        from minimvc.config import AppConfig

        return AppConfig

    if name == "Request":
        from minimvc.http.request import Request

        return Request

    if name in ("Response", "Redirect"):
        from minimvc.http import response as _resp

        return getattr(_resp, name)

    if name in ("Abort", "Middleware", "redirect"):
        from minimvc.middleware import protocol as _mw

        return getattr(_mw, name)

    if name == "Router":
        from minimvc.routing.router import Router

        return Router

    if name in ("ControllerAction", "Route", "RouteMatch"):
        from minimvc.routing import route as _route

        return getattr(_route, name)

    if name in ("DispatchOutcome", "DispatchResult"):
        from minimvc.routing import result as _result

        return getattr(_result, name)

    if name in (
        "ConfigurationError",
        "HTTPError",
        "HandlerInvocationError",
        "MiniMVCError",
        "NotFound",
        "RouteError",
    ):
        from minimvc import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
