"""``linkroute parse`` — show how a raw link is parsed and routed."""

import argparse

from linkroute.parser import parse_deep_link
from linkroute.routing.defaults import get_handler_name, requires_auth


def run_parse(args: argparse.Namespace) -> None:
    """Print the parsed descriptor for ``args.url``.

    Exits with status 1 when the link is invalid.
    """
    link = parse_deep_link(args.url)

    print(f"scheme:   {link.scheme or '-'}")
    print(f"hostname: {link.hostname or '-'}")
    print(f"path:     {link.path or '-'}")
    if link.query_params:
        print("query:")
        for key, value in link.query_params.items():
            print(f"  {key} = {value}")
    else:
        print("query:    -")
    print(f"valid:    {'yes' if link.is_valid else 'no'}")

    if not link.is_valid:
        print(f"error:    {link.error_message}")
        raise SystemExit(1)

    handler = get_handler_name(link.path)
    print(f"handler:  {handler.value if handler is not None else '-'}")
    print(f"auth:     {'required' if requires_auth(link.path) else 'not required'}")
