"""Tests for minimvc.routing.route — Route, RouteMatch, ControllerAction."""

import re

import pytest

from minimvc.routing.route import ControllerAction, Route, RouteMatch


def _handler() -> str:
    return "ok"


class _Counter:
    instances = 0

    def __init__(self) -> None:
        type(self).instances += 1

    def show(self, item_id: str) -> str:
        return f"item {item_id}"


def _route(path: str = "/", handler=_handler, param_names: tuple[str, ...] = ()) -> Route:
    return Route(
        method="GET",
        path=path,
        handler=handler,
        middleware=(),
        pattern=re.compile(re.escape(path)),
        param_names=param_names,
    )


class TestControllerAction:
    def test_resolve_returns_bound_method(self) -> None:
        action = ControllerAction(_Counter, "show")
        bound = action.resolve()
        assert bound("7") == "item 7"

    def test_resolve_constructs_fresh_controller(self) -> None:
        _Counter.instances = 0
        action = ControllerAction(_Counter, "show")
        first = action.resolve()
        second = action.resolve()
        assert _Counter.instances == 2
        assert first.__self__ is not second.__self__

    def test_str(self) -> None:
        assert str(ControllerAction(_Counter, "show")) == "_Counter.show"

    def test_frozen(self) -> None:
        action = ControllerAction(_Counter, "show")
        with pytest.raises(AttributeError):
            action.action = "other"  # type: ignore[misc]


class TestRoute:
    def test_creation(self) -> None:
        route = _route("/users")
        assert route.method == "GET"
        assert route.path == "/users"
        assert route.handler is _handler
        assert route.middleware == ()
        assert route.name is None

    def test_handler_name_for_function(self) -> None:
        assert _route().handler_name == "_handler"

    def test_handler_name_for_controller_action(self) -> None:
        route = _route(handler=ControllerAction(_Counter, "show"))
        assert route.handler_name == "_Counter.show"

    def test_frozen(self) -> None:
        route = _route()
        with pytest.raises(AttributeError):
            route.path = "/other"  # type: ignore[misc]


class TestRouteMatch:
    def test_args_and_path_params(self) -> None:
        route = _route("/p/{id}/c/{cat}", param_names=("id", "cat"))
        match = RouteMatch(route=route, args=("12345", "abcde"))
        assert match.args == ("12345", "abcde")
        assert match.path_params == {"id": "12345", "cat": "abcde"}

    def test_no_params(self) -> None:
        match = RouteMatch(route=_route(), args=())
        assert match.path_params == {}

    def test_frozen(self) -> None:
        route = _route()
        match = RouteMatch(route=route, args=())
        with pytest.raises(AttributeError):
            match.route = route  # type: ignore[misc]
