"""Waymark — a URL routing table for Python.

Maps an (HTTP method, path) pair to a registered handler, binding
``{name}`` placeholders and trailing ``*`` catch-all segments.

Basic usage::

    from waymark import Router

    router = Router()
    router.add("GET", "user", "/users/{id}", show_user)
    router.add("GET", "static", "/static/*", ("StaticController", "serve"))

    match = router.match("GET", "/users/42")
    match.kwargs           # {"id": "42"}
    router.build_url("user", {"id": 7})  # "/users/7"

Invoking handlers is up to the caller: ``match.handler`` is either a
``CallableHandler`` or a ``ControllerReference``.
"""

__version__ = "0.1.0"
__all__ = [
    "CallableHandler",
    "ConfigurationError",
    "ControllerReference",
    "Metadata",
    "ParameterValues",
    "Route",
    "RouteMatch",
    "Router",
    "RouterConfig",
    "RoutingError",
    "RoutingErrorReason",
    "WaymarkError",
]

# Public name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "CallableHandler": "waymark.routing.route",
    "ConfigurationError": "waymark.errors",
    "ControllerReference": "waymark.routing.route",
    "Metadata": "waymark.routing.values",
    "ParameterValues": "waymark.routing.values",
    "Route": "waymark.routing.route",
    "RouteMatch": "waymark.routing.route",
    "Router": "waymark.routing.router",
    "RouterConfig": "waymark.config",
    "RoutingError": "waymark.errors",
    "RoutingErrorReason": "waymark.errors",
    "WaymarkError": "waymark.errors",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import waymark`` fast while providing a clean top-level API.
    """
    module_path = _LAZY_IMPORTS.get(name)
    if module_path is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_path), name)
