"""Waymark CLI — inspect a route table from the command line.

Entry point registered as ``waymark`` in ``pyproject.toml``::

    [project.scripts]
    waymark = "waymark.cli:main"
"""

import argparse
import logging
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``waymark`` command."""
    parser = argparse.ArgumentParser(
        prog="waymark",
        description="Waymark — inspect and exercise a URL routing table.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log registration and matching details to stderr",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- waymark routes ---------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List registered routes")
    routes_parser.add_argument("router", help="Import string (e.g. myapp.urls:router)")
    routes_parser.add_argument("--method", default=None, help="Only list routes for this method")

    # -- waymark match ----------------------------------------------------
    match_parser = subparsers.add_parser("match", help="Match a method and path")
    match_parser.add_argument("router", help="Import string (e.g. myapp.urls:router)")
    match_parser.add_argument("method", help="Method token (e.g. GET)")
    match_parser.add_argument("path", help="Decoded request path")

    # -- waymark url ------------------------------------------------------
    url_parser = subparsers.add_parser("url", help="Build a URL from a route name")
    url_parser.add_argument("router", help="Import string (e.g. myapp.urls:router)")
    url_parser.add_argument("name", help="Route name")
    url_parser.add_argument(
        "parameters",
        nargs="*",
        metavar="key=value",
        help="Placeholder values",
    )
    url_parser.add_argument(
        "--catch-all",
        nargs="*",
        default=None,
        metavar="SEGMENT",
        help="Trailing segments for a catch-all route",
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "routes":
        from waymark.cli._routes import run_routes

        run_routes(args)
    elif args.command == "match":
        from waymark.cli._match import run_match

        run_match(args)
    elif args.command == "url":
        from waymark.cli._url import run_url

        run_url(args)
