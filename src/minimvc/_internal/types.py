"""Shared type aliases used across minimvc modules."""

from collections.abc import Callable
from typing import Any, TypeAlias

from minimvc.routing.route import ControllerAction

# A callable, a ControllerAction, or a (Controller, "action") pair
Handler: TypeAlias = Callable[..., Any] | ControllerAction | tuple[type, str]
