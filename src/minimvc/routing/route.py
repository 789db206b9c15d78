"""Route, RouteMatch and ControllerAction frozen dataclasses."""

import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class ControllerAction:
    """A ``(controller class, method name)`` handler reference.

    The controller is constructed with no arguments on every dispatch,
    then the named method is looked up on the fresh instance::

        router.add("GET", "/", ControllerAction(HomeController, "index"))
        router.add("GET", "/", (HomeController, "index"))  # same thing
    """

    controller: type
    action: str

    def resolve(self) -> Callable[..., Any]:
        """Instantiate the controller and return the bound action."""
        instance = self.controller()
        return getattr(instance, self.action)

    def __str__(self) -> str:
        return f"{self.controller.__qualname__}.{self.action}"


@dataclass(frozen=True, slots=True)
class Route:
    """A frozen route definition.

    Created by ``Router.add()``. ``pattern`` is the compiled, anchored
    form of ``path``; ``param_names`` lists its placeholders in
    left-to-right order.
    """

    method: str
    path: str
    handler: Callable[..., Any] | ControllerAction
    middleware: tuple[Any, ...]
    pattern: re.Pattern[str]
    param_names: tuple[str, ...] = ()
    name: str | None = None

    @property
    def handler_name(self) -> str:
        """Human-readable handler reference for logs and the CLI."""
        if isinstance(self.handler, ControllerAction):
            return str(self.handler)
        return getattr(self.handler, "__qualname__", None) or repr(self.handler)


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful route match.

    ``args`` holds the captured path variables in placeholder order,
    without the whole-path match.
    """

    route: Route
    args: tuple[str, ...]

    @property
    def path_params(self) -> dict[str, str]:
        return dict(zip(self.route.param_names, self.args, strict=True))
