"""Router import resolution — resolves ``"module:attribute"`` strings to Router instances.

Shared utility used by every ``waymark`` subcommand to locate a route
table from a user-supplied import string.
"""

import argparse
import importlib
import logging
import sys

from waymark.errors import ConfigurationError
from waymark.routing.router import Router

logger = logging.getLogger("waymark.cli")


def resolve_router(import_string: str) -> Router:
    """Resolve an import string to a waymark Router instance.

    Accepts ``"module:attribute"`` format.  When the attribute portion
    is omitted, defaults to ``"router"`` (e.g. ``"myapp.urls"`` resolves to
    ``myapp.urls.router``).

    Supports factory functions: if the resolved object is callable and
    not a Router instance, it will be called with no arguments.

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
        ConfigurationError: If the resolved object is not a ``Router``.

    """
    module_path, _, attr_name = import_string.partition(":")
    if not attr_name:
        attr_name = "router"

    module = importlib.import_module(module_path)
    obj = getattr(module, attr_name)

    if callable(obj) and not isinstance(obj, Router):
        try:
            obj = obj()
        except Exception as exc:
            msg = f"Factory function {import_string!r} raised an error: {exc}"
            raise ConfigurationError(msg) from exc

    if not isinstance(obj, Router):
        msg = f"{import_string!r} resolved to {type(obj).__name__}, not a waymark.Router instance"
        raise ConfigurationError(msg)

    return obj


def load_router(args: argparse.Namespace) -> Router:
    """Resolve ``args.router`` or exit with status 1."""
    try:
        router = resolve_router(args.router)
    except (ModuleNotFoundError, AttributeError, ConfigurationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    logger.debug("Resolved %s to a router with %d route(s)", args.router, len(router.routes()))
    return router
