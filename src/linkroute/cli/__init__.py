"""linkroute CLI — inspect, build, and dry-run deep links.

Entry point registered as ``linkroute`` in ``pyproject.toml``::

    [project.scripts]
    linkroute = "linkroute.cli:main"
"""

import argparse
import logging
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``linkroute`` command."""
    parser = argparse.ArgumentParser(
        prog="linkroute",
        description="linkroute — deep link parsing, routing, and dispatch.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log parser, handler, and analytics activity to stderr",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- linkroute parse --------------------------------------------------
    parse_parser = subparsers.add_parser("parse", help="Parse and validate a link")
    parse_parser.add_argument("url", help="Raw deep link (e.g. acp://sessions/abc123)")

    # -- linkroute routes -------------------------------------------------
    subparsers.add_parser("routes", help="List the deep link route table")

    # -- linkroute build --------------------------------------------------
    build_parser = subparsers.add_parser("build", help="Build a shareable link for a path")
    build_parser.add_argument("path", help="In-app path (e.g. /sessions/abc123)")
    build_parser.add_argument(
        "-q",
        "--query",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Query parameter (repeatable)",
    )
    build_parser.add_argument(
        "--dev",
        action="store_true",
        help="Use the custom scheme instead of a universal link",
    )

    # -- linkroute resolve ------------------------------------------------
    resolve_parser = subparsers.add_parser(
        "resolve",
        help="Dry-run a link through the handlers and print the analytics report",
    )
    resolve_parser.add_argument("url", help="Raw deep link")
    resolve_parser.add_argument(
        "--source",
        choices=("initial", "foreground", "background"),
        default="foreground",
        help="How the link reached the app",
    )
    resolve_parser.add_argument(
        "--anonymous",
        action="store_true",
        help="Resolve as a signed-out user",
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "parse":
        from linkroute.cli._parse import run_parse

        run_parse(args)
    elif args.command == "routes":
        from linkroute.cli._routes import run_routes

        run_routes(args)
    elif args.command == "build":
        from linkroute.cli._build import run_build

        run_build(args)
    elif args.command == "resolve":
        from linkroute.cli._resolve import run_resolve

        run_resolve(args)
