"""``waymark routes`` — list registered routes.

Resolves an import string to a Router and prints every route with
method, pattern, name and handler.
"""

import argparse

from waymark.cli._resolve import load_router
from waymark.routing.route import CallableHandler, Route


def describe_handler(route: Route) -> str:
    handler = route.handler
    if isinstance(handler, CallableHandler):
        return getattr(handler.func, "__qualname__", repr(handler.func))
    target = getattr(handler.target, "__qualname__", str(handler.target))
    return f"{target}.{handler.action}"


def run_routes(args: argparse.Namespace) -> None:
    """Print a table of METHOD, PATTERN, NAME, and HANDLER.

    Routes are listed per method in registration order, which is the
    order ``match`` tries them in.
    """
    router = load_router(args)

    methods = [args.method] if args.method else router.methods
    rows: list[tuple[str, str, str, str]] = [
        (method, route.url, route.name, describe_handler(route))
        for method in methods
        for route in router.routes(method)
    ]
    if not rows:
        print("No routes registered.")
        return

    max_method = max(max(len(r[0]) for r in rows), 6)  # "METHOD" header
    max_url = max(max(len(r[1]) for r in rows), 7)  # "PATTERN" header
    max_name = max(max(len(r[2]) for r in rows), 4)  # "NAME" header

    fmt = f"{{:<{max_method}}}  {{:<{max_url}}}  {{:<{max_name}}}  {{}}"
    print(fmt.format("METHOD", "PATTERN", "NAME", "HANDLER"))
    sep_len = max_method + max_url + max_name + 6 + max(len(r[3]) for r in rows)
    print("-" * min(sep_len, 80))
    for row in rows:
        print(fmt.format(*row))
