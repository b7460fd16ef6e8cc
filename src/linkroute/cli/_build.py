"""``linkroute build`` — print a shareable link for an in-app path."""

import argparse
import sys

from linkroute.builder import build_deep_link
from linkroute.config import LinkConfig


def run_build(args: argparse.Namespace) -> None:
    query: dict[str, str] = {}
    for item in args.query:
        key, sep, value = item.partition("=")
        if not sep or not key:
            print(f"Error: query parameter must be KEY=VALUE, got {item!r}", file=sys.stderr)
            raise SystemExit(2)
        query[key] = value

    print(build_deep_link(args.path, query or None, config=LinkConfig(development=args.dev)))
