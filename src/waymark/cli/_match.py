"""``waymark match`` — show which route a request would reach."""

import argparse

from waymark.cli._resolve import load_router
from waymark.cli._routes import describe_handler


def run_match(args: argparse.Namespace) -> None:
    """Print the matched route and its bound values; exit 1 on no match."""
    router = load_router(args)

    match = router.match(args.method, args.path)
    if match is None:
        print(f"No route matches {args.method} {args.path!r}")
        raise SystemExit(1)

    route = match.route
    print(f"route:     {route.name}")
    print(f"pattern:   {route.url}")
    print(f"handler:   {describe_handler(route)}")
    for name, value in match.parameters.items():
        print(f"param:     {name}={value!r}")
    if route.has_catch_all:
        print(f"catch-all: {list(match.catch_all)!r}")
