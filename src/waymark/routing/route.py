"""Route and RouteMatch frozen dataclasses."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, replace
from typing import Any, TypeAlias

from waymark._internal.types import Handler
from waymark.errors import RoutingError, RoutingErrorReason
from waymark.routing.pattern import PathSegment, normalize_path, parse_pattern
from waymark.routing.values import Metadata, ParameterValues


@dataclass(frozen=True, slots=True)
class CallableHandler:
    """A handler invoked directly by the caller."""

    func: Handler


@dataclass(frozen=True, slots=True)
class ControllerReference:
    """A ``(target, action)`` pair resolved by an external dispatcher.

    ``target`` is opaque here: usually a class or an import string.
    """

    target: Any
    action: str


RouteHandler: TypeAlias = CallableHandler | ControllerReference


def resolve_handler(value: Any) -> RouteHandler:
    """Classify a raw handler value.

    A two-element tuple or list becomes a ``ControllerReference``; anything
    callable becomes a ``CallableHandler``. Raises ``RoutingError``
    (``INVALID_HANDLER``) for every other shape.
    """
    if isinstance(value, (CallableHandler, ControllerReference)):
        return value

    if isinstance(value, (tuple, list)):
        if len(value) == 2 and isinstance(value[1], str) and value[1]:
            target, action = value
            return ControllerReference(target=target, action=action)
        msg = f"Controller reference must be a (target, action) pair, got {value!r}"
        raise RoutingError(RoutingErrorReason.INVALID_HANDLER, msg)

    if callable(value):
        return CallableHandler(func=value)

    msg = f"Handler must be callable or a (target, action) pair, got {type(value).__name__}"
    raise RoutingError(RoutingErrorReason.INVALID_HANDLER, msg)


def _methods(methods: Iterable[str] | str) -> frozenset[str]:
    if isinstance(methods, str):
        return frozenset((methods,))
    return frozenset(methods)


@dataclass(frozen=True, slots=True, eq=False)
class Route:
    """A frozen route definition.

    Created during setup and registered on a ``Router``. Construction
    normalizes ``url``, validates the pattern and classifies ``handler``::

        Route({"GET", "POST"}, "complex", "complex/{id}/{name}/", show_complex)
        Route("GET", "simple", "/simple", (Controller, "simple"))

    A route never holds match state; matching produces a ``RouteMatch``.
    """

    methods: frozenset[str]
    name: str
    url: str
    handler: RouteHandler
    metadata: Metadata = field(default_factory=Metadata)
    segments: tuple[PathSegment, ...] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        methods = _methods(self.methods)
        if not methods:
            msg = f"Route {self.name!r} declares no methods"
            raise RoutingError(RoutingErrorReason.EMPTY_METHODS, msg)

        url = normalize_path(self.url)
        object.__setattr__(self, "methods", methods)
        object.__setattr__(self, "url", url)
        object.__setattr__(self, "segments", parse_pattern(url))
        object.__setattr__(self, "handler", resolve_handler(self.handler))
        if not isinstance(self.metadata, Metadata):
            object.__setattr__(self, "metadata", Metadata(self.metadata))

    def supports_method(self, method: str) -> bool:
        return method in self.methods

    @property
    def parameters(self) -> tuple[str, ...]:
        """Placeholder names, in pattern order."""
        return tuple(seg.param_name for seg in self.segments if seg.is_param and seg.param_name)

    def get_parameters(self) -> list[str]:
        return list(self.parameters)

    @property
    def has_parameters(self) -> bool:
        return any(seg.is_param for seg in self.segments)

    @property
    def has_catch_all(self) -> bool:
        return bool(self.segments) and self.segments[-1].is_catch_all

    @property
    def is_static(self) -> bool:
        """True when the pattern only matches the identical path."""
        return not self.has_parameters and not self.has_catch_all

    @property
    def callable(self) -> Handler | None:
        if isinstance(self.handler, CallableHandler):
            return self.handler.func
        return None

    @property
    def controller(self) -> Any:
        if isinstance(self.handler, ControllerReference):
            return self.handler.target
        return None

    @property
    def action(self) -> str | None:
        if isinstance(self.handler, ControllerReference):
            return self.handler.action
        return None

    @property
    def has_metadata_values(self) -> bool:
        return len(self.metadata) > 0

    def get_metadata_value(self, name: str) -> Any:
        return self.metadata.get(name)

    def bind_parameter_values(
        self,
        values: ParameterValues | Mapping[str, str] | Iterable[tuple[str, str]],
    ) -> "RouteMatch":
        """Validate *values* against the placeholders and return a new match.

        Raises ``RoutingError`` (``PARAMETER_COUNT_MISMATCH``) when the number
        of values differs from the number of placeholders, and
        (``PARAMETER_NAME_MISMATCH``) when the names differ.
        """
        if not isinstance(values, ParameterValues):
            values = ParameterValues(values)

        expected = self.parameters
        if len(values) != len(expected):
            msg = f"Route {self.name!r} expects {len(expected)} value(s), got {len(values)}"
            raise RoutingError(RoutingErrorReason.PARAMETER_COUNT_MISMATCH, msg)

        if set(values) != set(expected):
            msg = (
                f"Route {self.name!r} expects values for {', '.join(expected)}, "
                f"got {', '.join(values)}"
            )
            raise RoutingError(RoutingErrorReason.PARAMETER_NAME_MISMATCH, msg)

        return RouteMatch(route=self, parameters=values)


@dataclass(frozen=True, slots=True, eq=False)
class RouteMatch:
    """Result of a successful route match.

    Owned by the caller; every ``Router.match`` call returns a fresh one, so
    concurrent matches against the same route never share state.
    """

    route: Route
    parameters: ParameterValues = field(default_factory=ParameterValues)
    catch_all: tuple[str, ...] = ()

    def bind_parameter_values(
        self,
        values: ParameterValues | Mapping[str, str] | Iterable[tuple[str, str]],
    ) -> "RouteMatch":
        """Return a copy with *values* validated and bound."""
        return replace(self.route.bind_parameter_values(values), catch_all=self.catch_all)

    def bind_catch_all_values(self, values: Iterable[str]) -> "RouteMatch":
        """Return a copy with the catch-all segments replaced. No arity check."""
        return replace(self, catch_all=tuple(values))

    @property
    def handler(self) -> RouteHandler:
        return self.route.handler

    def get_parameter_value(self, name: str) -> str | None:
        return self.parameters.get(name)

    @property
    def has_parameter_values(self) -> bool:
        return len(self.parameters) > 0

    @property
    def args(self) -> list[str]:
        """Parameter values in pattern order, for positional invocation."""
        return self.parameters.get_all()

    @property
    def kwargs(self) -> dict[str, str]:
        return self.parameters.as_dict()
