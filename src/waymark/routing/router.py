"""Route table with name lookup, URL building, and two-phase matching.

Routes are registered during setup. ``match`` first tries an exact lookup
of the normalized path among static patterns, then walks the method's
routes in registration order and returns the first structurally
compatible one. There is no notion of specificity: registration order is
the only tie-break.
"""

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from waymark.config import RouterConfig
from waymark.errors import RoutingError, RoutingErrorReason
from waymark.routing.pattern import (
    CATCH_ALL,
    PLACEHOLDER_END,
    PLACEHOLDER_START,
    SEPARATOR,
    normalize_path,
    split_path,
)
from waymark.routing.route import Route, RouteMatch


class Router:
    """Route table keyed by method token.

    Usage::

        router = Router()
        router.add("GET", "user", "/users/{id}", show_user)
        router.add(["GET", "POST"], "files", "/files/*", ("FileController", "serve"))
        router.compile()
        match = router.match("GET", "/users/42")
        router.build_url("user", {"id": 42})  # "/users/42"
    """

    __slots__ = ("_by_method", "_compiled", "_config", "_direct", "_logger", "_names")

    def __init__(self, config: RouterConfig | None = None) -> None:
        self._config = config or RouterConfig()
        self._logger = logging.getLogger(self._config.logger_name)
        # Registration order per method; load-bearing for ambiguity resolution
        self._by_method: dict[str, list[Route]] = {}
        # Normalized pattern -> route per method, for direct matches
        self._direct: dict[str, dict[str, Route]] = {}
        self._names: dict[str, Route] = {}
        self._compiled = False

    @property
    def config(self) -> RouterConfig:
        return self._config

    @property
    def frozen(self) -> bool:
        return self._compiled

    @property
    def methods(self) -> list[str]:
        """Method tokens in first-registered order."""
        return list(self._by_method)

    def add(
        self,
        methods: Iterable[str] | str,
        name: str,
        url: str,
        handler: Any,
        metadata: Mapping[str, Any] | None = None,
    ) -> Route:
        """Build a ``Route`` and register it. Returns the route."""
        route = Route(methods, name, url, handler, metadata)  # type: ignore[arg-type]
        self.add_route(route)
        return route

    def add_route(self, route: Route) -> None:
        """Register *route* under every method it declares.

        Raises ``RoutingError`` when the router is frozen (``ROUTER_FROZEN``),
        the name is taken (``DUPLICATE_NAME``), or one of the methods already
        holds the same pattern (``DUPLICATE_ROUTE``). Nothing is registered
        when an error is raised.
        """
        if self._compiled:
            msg = f"Cannot add route {route.name!r} after compilation"
            raise RoutingError(RoutingErrorReason.ROUTER_FROZEN, msg)

        if route.name in self._names:
            existing = self._names[route.name]
            msg = f"Route name {route.name!r} is already used by {existing.url!r}"
            raise RoutingError(RoutingErrorReason.DUPLICATE_NAME, msg)

        methods = sorted(route.methods)
        for method in methods:
            existing = self._direct.get(method, {}).get(route.url)
            if existing is not None:
                msg = f"{method} {route.url!r} is already registered as {existing.name!r}"
                raise RoutingError(RoutingErrorReason.DUPLICATE_ROUTE, msg)

        for method in methods:
            self._by_method.setdefault(method, []).append(route)
            self._direct.setdefault(method, {})[route.url] = route
            self._logger.debug("Registered %s %s as %r", method, route.url, route.name)

        self._names[route.name] = route

    def add_routes(self, *routes: Route) -> None:
        for route in routes:
            self.add_route(route)

    def compile(self) -> None:
        """Freeze the router. No more routes can be added."""
        self._compiled = True
        self._logger.debug("Compiled %d route(s)", len(self._names))

    def routes(self, method: str | None = None) -> list[Route]:
        """Return registered routes in registration order.

        With *method*, only the routes registered for that token; otherwise
        every distinct route.
        """
        if method is not None:
            return list(self._by_method.get(method, ()))
        return list(self._names.values())

    def get_route_by_name(self, name: str, method: str | None = None) -> Route | None:
        route = self._names.get(name)
        if route is None or (method is not None and not route.supports_method(method)):
            return None
        return route

    def build_url(
        self,
        name: str,
        parameters: Mapping[str, Any] | None = None,
        catch_all: Sequence[Any] | None = None,
    ) -> str:
        """Build the URL for the route named *name*.

        Each ``{key}`` is replaced by ``str(value)``. Placeholders that are
        not supplied stay in the output as written. Parameters are ignored
        entirely for routes without placeholders. Substitution runs key by key
        on the partly built URL, so a value containing ``{other}`` is expanded
        again when ``other`` comes later.

        A catch-all route keeps its trailing ``*`` unless *catch_all* is
        given: then ``*`` is replaced by those segments, or dropped with its
        separator when the sequence is empty.

        Raises ``RoutingError`` (``ROUTE_NOT_FOUND``) for an unknown name and
        (``PARAMETER_NOT_IN_URL``) for a key with no placeholder.
        """
        route = self._names.get(name)
        if route is None:
            msg = f"Route {name!r} not found"
            raise RoutingError(RoutingErrorReason.ROUTE_NOT_FOUND, msg)

        url = route.url
        if route.has_parameters and parameters:
            for key, value in parameters.items():
                placeholder = f"{PLACEHOLDER_START}{key}{PLACEHOLDER_END}"
                if placeholder not in url:
                    msg = f"Parameter {key!r} not found in url {route.url!r}"
                    raise RoutingError(RoutingErrorReason.PARAMETER_NOT_IN_URL, msg)
                url = url.replace(placeholder, str(value))

        if route.has_catch_all and catch_all is not None:
            tail = SEPARATOR.join(str(segment) for segment in catch_all)
            if tail:
                url = url[: -len(CATCH_ALL)] + tail
            else:
                url = url[: -len(SEPARATOR + CATCH_ALL)] or SEPARATOR

        return url

    def match(self, method: str, path: str) -> RouteMatch | None:
        """Match a method and an already-decoded path.

        Returns a fresh ``RouteMatch`` on success, ``None`` when nothing
        matches. Matching is case-sensitive; leading and trailing slashes
        are insignificant.
        """
        path = normalize_path(path)
        direct = self._direct.get(method)
        if direct is None:
            self._logger.debug("No routes for method %s", method)
            return None

        route = direct.get(path)
        if route is not None and route.is_static:
            return RouteMatch(route=route)

        parts = split_path(path)
        for route in self._by_method[method]:
            walked = self._walk(route, parts)
            if walked is None:
                continue
            values, rest = walked
            return route.bind_parameter_values(values).bind_catch_all_values(rest)

        self._logger.debug("No route matches %s %r", method, path)
        return None

    def _walk(self, route: Route, parts: list[str]) -> tuple[list[tuple[str, str]], list[str]] | None:
        """Compare path parts with a route's segments.

        Returns the bound ``(name, value)`` pairs and catch-all parts, or
        ``None`` if the route does not fit.
        """
        segments = route.segments
        catch_all = route.has_catch_all
        required = len(segments) - 1 if catch_all else len(segments)
        if len(parts) < required:
            return None
        if len(parts) > len(segments) and not catch_all and self._config.strict_segments:
            return None

        values: list[tuple[str, str]] = []
        rest: list[str] = []
        for index, part in enumerate(parts):
            segment = segments[index] if index < len(segments) else None
            if segment is None and not catch_all:
                # Surplus segment on a lenient router
                continue
            if segment is None or segment.is_catch_all:
                rest.append(part)
            elif segment.is_param:
                if not part and not self._config.allow_empty_segments:
                    return None
                values.append((segment.param_name or "", part))
            elif part != segment.value:
                return None

        return values, rest
