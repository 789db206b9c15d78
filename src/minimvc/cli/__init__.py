"""minimvc CLI — inspect route tables.

Entry point registered as ``minimvc`` in ``pyproject.toml``::

    [project.scripts]
    minimvc = "minimvc.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``minimvc`` command."""
    parser = argparse.ArgumentParser(
        prog="minimvc",
        description="minimvc — a small MVC front controller.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- minimvc routes ---------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List registered routes in order")
    routes_parser.add_argument(
        "app",
        help="Import string (e.g. myapp:app)",
    )

    # -- minimvc match ----------------------------------------------------
    match_parser = subparsers.add_parser("match", help="Show which route a request would hit")
    match_parser.add_argument(
        "app",
        help="Import string (e.g. myapp:app)",
    )
    match_parser.add_argument("method", help="HTTP method, e.g. GET")
    match_parser.add_argument("path", help="Request path, e.g. /products/1/categories/2")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "routes":
        from minimvc.cli._routes import run_routes

        run_routes(args)
    elif args.command == "match":
        from minimvc.cli._routes import run_match

        run_match(args)
