"""Import resolution — resolves ``"module:attribute"`` strings to a Router.

Shared by ``minimvc routes`` and ``minimvc match``.
"""

import importlib

from minimvc.app import App
from minimvc.routing.router import Router


def resolve_router(import_string: str) -> Router:
    """Resolve an import string to the Router it names.

    Accepts ``"module:attribute"`` format. When the attribute portion
    is omitted, defaults to ``"app"`` (e.g. ``"myapp"`` resolves to
    ``myapp.app``).

    The attribute may be an ``App``, a ``Router``, or a zero-argument
    factory returning either.

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
        TypeError: If the resolved object is not an App or Router.
    """
    module_path, _, attr_name = import_string.partition(":")
    if not attr_name:
        attr_name = "app"

    module = importlib.import_module(module_path)
    obj = getattr(module, attr_name)

    # Support factory functions
    if callable(obj) and not isinstance(obj, App | Router):
        try:
            obj = obj()
        except Exception as exc:
            msg = f"Factory function {import_string!r} raised an error: {exc}"
            raise TypeError(msg) from exc

    if isinstance(obj, App):
        return obj.router
    if isinstance(obj, Router):
        return obj

    msg = f"{import_string!r} resolved to {type(obj).__name__}, not a minimvc App or Router"
    raise TypeError(msg)
