"""``minimvc routes`` and ``minimvc match`` — route table introspection.

Routes are listed in registration order, which is also match order.
"""

import argparse
import sys

from minimvc.cli._resolve import resolve_router
from minimvc.routing.route import Route
from minimvc.routing.router import Router


def _load(args: argparse.Namespace) -> Router:
    try:
        return resolve_router(args.app)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc


def _middleware_names(route: Route) -> str:
    names = []
    for ref in route.middleware:
        if isinstance(ref, type):
            names.append(ref.__name__)
        else:
            names.append(type(ref).__name__ if hasattr(ref, "before") else repr(ref))
    return ", ".join(names) or "-"


def run_routes(args: argparse.Namespace) -> None:
    """Print a METHOD / PATH / HANDLER / MIDDLEWARE table."""
    router = _load(args)
    routes = router.routes
    if not routes:
        print("No routes registered.")
        return

    rows: list[tuple[str, str, str, str]] = []
    for route in routes:
        handler_name = route.handler_name
        if route.name:
            handler_name = f"{handler_name} ({route.name})"
        rows.append((route.method, route.path, handler_name, _middleware_names(route)))

    # Column widths
    max_method = max(max(len(r[0]) for r in rows), 6)  # "METHOD" header
    max_path = max(max(len(r[1]) for r in rows), 4)  # "PATH" header
    max_handler = max(max(len(r[2]) for r in rows), 7)  # "HANDLER" header

    fmt = f"{{:<{max_method}}}  {{:<{max_path}}}  {{:<{max_handler}}}  {{}}"
    print(fmt.format("METHOD", "PATH", "HANDLER", "MIDDLEWARE"))
    sep_len = max_method + max_path + max_handler + 6 + max(len(r[3]) for r in rows)
    print("-" * min(sep_len, 80))
    for row in rows:
        print(fmt.format(*row).rstrip())


def run_match(args: argparse.Namespace) -> None:
    """Print the route that would win for METHOD PATH, without dispatching."""
    router = _load(args)
    match = router.find(args.method, args.path)
    if match is None:
        print(f"No route matches {args.method} {args.path}", file=sys.stderr)
        raise SystemExit(1)

    route = match.route
    print(f"{route.method} {route.path} -> {route.handler_name}")
    if match.args:
        print("args: " + ", ".join(repr(a) for a in match.args))
    if route.middleware:
        print(f"middleware: {_middleware_names(route)}")
