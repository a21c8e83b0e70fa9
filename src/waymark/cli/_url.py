"""``waymark url`` — reverse a route name into a URL."""

import argparse
import sys

from waymark.cli._resolve import load_router
from waymark.errors import RoutingError


def parse_assignments(pairs: list[str]) -> dict[str, str]:
    """Turn ``["id=2", "name=stuff"]`` into a dict. Raises ``ValueError``."""
    parameters: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            msg = f"Expected key=value, got {pair!r}"
            raise ValueError(msg)
        parameters[key] = value
    return parameters


def run_url(args: argparse.Namespace) -> None:
    router = load_router(args)

    try:
        parameters = parse_assignments(args.parameters)
        url = router.build_url(args.name, parameters, args.catch_all)
    except (ValueError, RoutingError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    print(url)
