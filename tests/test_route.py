"""Tests for waymark.routing.route — Route, RouteMatch, handler variants."""

import pytest

from waymark.errors import RoutingError, RoutingErrorReason
from waymark.routing.route import (
    CallableHandler,
    ControllerReference,
    Route,
    RouteMatch,
    resolve_handler,
)
from waymark.routing.values import Metadata, ParameterValues


def _handler() -> str:
    return "yeah"


class Controller:
    def simple(self) -> str:
        return "simple"


class TestResolveHandler:
    def test_callable(self) -> None:
        assert resolve_handler(_handler) == CallableHandler(func=_handler)

    def test_controller_pair(self) -> None:
        assert resolve_handler((Controller, "simple")) == ControllerReference(target=Controller, action="simple")

    def test_controller_list(self) -> None:
        assert resolve_handler(["Controller", "simple"]) == ControllerReference(target="Controller", action="simple")

    def test_already_resolved(self) -> None:
        ref = ControllerReference(target=Controller, action="simple")
        assert resolve_handler(ref) is ref

    @pytest.mark.parametrize(
        "value",
        [None, 42, "not callable", (Controller,), (Controller, "a", "b"), (Controller, 1)],
    )
    def test_rejected(self, value: object) -> None:
        with pytest.raises(RoutingError) as exc_info:
            resolve_handler(value)
        assert exc_info.value.reason is RoutingErrorReason.INVALID_HANDLER


class TestRoute:
    def test_creation(self) -> None:
        route = Route(frozenset({"GET"}), "test-route", "/test", _handler)

        assert route.name == "test-route"
        assert route.url == "/test"
        assert route.methods == frozenset({"GET"})
        assert route.callable is _handler
        assert route.controller is None
        assert route.action is None
        assert route.has_parameters is False
        assert route.get_parameters() == []
        assert route.is_static is True

    def test_single_method_string(self) -> None:
        route = Route("GET", "test-route", "/test", _handler)  # type: ignore[arg-type]
        assert route.methods == frozenset({"GET"})

    def test_methods_are_opaque_and_case_sensitive(self) -> None:
        route = Route({"PURGE", "get"}, "r", "/r", _handler)  # type: ignore[arg-type]
        assert route.supports_method("PURGE")
        assert route.supports_method("get")
        assert not route.supports_method("GET")

    def test_empty_methods_rejected(self) -> None:
        with pytest.raises(RoutingError) as exc_info:
            Route(frozenset(), "r", "/r", _handler)
        assert exc_info.value.reason is RoutingErrorReason.EMPTY_METHODS

    @pytest.mark.parametrize("url", ["test", "/test/", "test/", "//test"])
    def test_url_normalized(self, url: str) -> None:
        assert Route(frozenset({"GET"}), "r", url, _handler).url == "/test"

    def test_root_url(self) -> None:
        assert Route(frozenset({"GET"}), "root", "", _handler).url == "/"

    def test_controller_handler(self) -> None:
        route = Route(frozenset({"GET"}), "simple", "/simple", (Controller, "simple"))  # type: ignore[arg-type]
        assert route.controller is Controller
        assert route.action == "simple"
        assert route.callable is None

    def test_invalid_handler_rejected_at_construction(self) -> None:
        with pytest.raises(RoutingError) as exc_info:
            Route(frozenset({"GET"}), "r", "/r", "nope")  # type: ignore[arg-type]
        assert exc_info.value.reason is RoutingErrorReason.INVALID_HANDLER

    def test_invalid_catch_all_rejected(self) -> None:
        with pytest.raises(RoutingError) as exc_info:
            Route(frozenset({"GET"}), "r", "/files/*/x", _handler)
        assert exc_info.value.reason is RoutingErrorReason.INVALID_CATCH_ALL

    def test_parameters(self) -> None:
        route = Route(frozenset({"GET"}), "complex", "/complex/{id}/{name}", _handler)
        assert route.has_parameters is True
        assert route.get_parameters() == ["id", "name"]
        assert route.parameters == ("id", "name")
        assert route.is_static is False

    def test_catch_all(self) -> None:
        route = Route(frozenset({"GET"}), "catch", "/catch/{param}/*", _handler)
        assert route.has_catch_all is True
        assert route.get_parameters() == ["param"]
        assert route.is_static is False

    def test_catch_all_only_is_not_static(self) -> None:
        route = Route(frozenset({"GET"}), "files", "/files/*", _handler)
        assert route.has_parameters is False
        assert route.is_static is False

    def test_no_metadata(self) -> None:
        route = Route(frozenset({"GET"}), "r", "/r", _handler)
        assert isinstance(route.metadata, Metadata)
        assert route.has_metadata_values is False
        assert route.metadata.get_all() == {}

    def test_metadata(self) -> None:
        route = Route(frozenset({"GET"}), "r", "/r", _handler, {"template": "yeah.html"})  # type: ignore[arg-type]
        assert route.has_metadata_values is True
        assert route.get_metadata_value("template") == "yeah.html"
        assert route.get_metadata_value("missing") is None

    def test_frozen(self) -> None:
        route = Route(frozenset({"GET"}), "r", "/r", _handler)
        with pytest.raises(AttributeError):
            route.url = "/other"  # type: ignore[misc]

    def test_identity_hashable(self) -> None:
        a = Route(frozenset({"GET"}), "r", "/r", _handler)
        b = Route(frozenset({"GET"}), "r", "/r", _handler)
        assert a != b
        assert len({a, b}) == 2


class TestBindParameterValues:
    def _route(self) -> Route:
        return Route(frozenset({"GET"}), "test-route", "/test/{p1}/{p2}", _handler)

    def test_bind(self) -> None:
        route = self._route()
        match = route.bind_parameter_values({"p1": "test1", "p2": "test2"})

        assert match.route is route
        assert match.has_parameter_values is True
        assert match.get_parameter_value("p1") == "test1"
        assert match.get_parameter_value("p2") == "test2"

    def test_order_of_assignment_irrelevant(self) -> None:
        match = self._route().bind_parameter_values([("p2", "b"), ("p1", "a")])
        assert match.args == ["b", "a"]
        assert match.kwargs == {"p1": "a", "p2": "b"}

    def test_count_mismatch(self) -> None:
        with pytest.raises(RoutingError) as exc_info:
            self._route().bind_parameter_values(ParameterValues())
        assert exc_info.value.reason is RoutingErrorReason.PARAMETER_COUNT_MISMATCH

    def test_name_mismatch(self) -> None:
        with pytest.raises(RoutingError) as exc_info:
            self._route().bind_parameter_values({"p2": "test2", "p3": "test3"})
        assert exc_info.value.reason is RoutingErrorReason.PARAMETER_NAME_MISMATCH

    def test_route_is_not_mutated(self) -> None:
        route = self._route()
        route.bind_parameter_values({"p1": "a", "p2": "b"})
        second = route.bind_parameter_values({"p1": "c", "p2": "d"})
        assert second.kwargs == {"p1": "c", "p2": "d"}
        assert not hasattr(route, "parameter_values")


class TestRouteMatch:
    def test_defaults(self) -> None:
        route = Route(frozenset({"GET"}), "r", "/r", _handler)
        match = RouteMatch(route=route)
        assert match.has_parameter_values is False
        assert match.catch_all == ()
        assert match.handler == CallableHandler(func=_handler)

    def test_bind_catch_all_values(self) -> None:
        route = Route(frozenset({"GET"}), "files", "/files/*", _handler)
        match = RouteMatch(route=route)
        bound = match.bind_catch_all_values(["a", "b"])
        assert bound.catch_all == ("a", "b")
        assert match.catch_all == ()
        assert bound.bind_catch_all_values([]).catch_all == ()

    def test_rebind_parameters_keeps_catch_all(self) -> None:
        route = Route(frozenset({"GET"}), "catch", "/catch/{param}/*", _handler)
        match = route.bind_parameter_values({"param": "x"}).bind_catch_all_values(["y"])
        rebound = match.bind_parameter_values({"param": "z"})
        assert rebound.kwargs == {"param": "z"}
        assert rebound.catch_all == ("y",)

    def test_rebind_parameters_validates(self) -> None:
        route = Route(frozenset({"GET"}), "catch", "/catch/{param}/*", _handler)
        match = RouteMatch(route=route)
        with pytest.raises(RoutingError) as exc_info:
            match.bind_parameter_values({"other": "z"})
        assert exc_info.value.reason is RoutingErrorReason.PARAMETER_NAME_MISMATCH

    def test_hashable_by_identity(self) -> None:
        route = Route(frozenset({"GET"}), "r", "/r/{id}", _handler)
        first = route.bind_parameter_values({"id": "1"})
        second = route.bind_parameter_values({"id": "1"})
        assert isinstance(hash(first), int)
        assert len({first, second, first}) == 2

    def test_frozen(self) -> None:
        route = Route(frozenset({"GET"}), "r", "/r", _handler)
        match = RouteMatch(route=route)
        with pytest.raises(AttributeError):
            match.catch_all = ("x",)  # type: ignore[misc]
