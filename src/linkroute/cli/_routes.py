"""``linkroute routes`` — list the route table.

Prints every route in match order with its pattern, handler, and whether
it requires authentication.
"""

import argparse

from linkroute.handlers.dispatch import get_handler
from linkroute.routing.defaults import DEFAULT_ROUTE_TABLE
from linkroute.routing.router import describe_pattern


def run_routes(args: argparse.Namespace) -> None:
    """Print a table of PATTERN, HANDLER, and AUTH for the default routes."""
    # Build rows: (pattern, handler, auth)
    rows: list[tuple[str, str, str]] = []
    for route in DEFAULT_ROUTE_TABLE:
        handler_func = get_handler(route.handler)
        handler = f"{route.handler.value} ({handler_func.__name__})"
        auth = "yes" if route.requires_auth else "no"
        rows.append((describe_pattern(route.pattern), handler, auth))

    # Column widths
    max_pattern = max(max(len(r[0]) for r in rows), 7)  # "PATTERN" header
    max_handler = max(max(len(r[1]) for r in rows), 7)  # "HANDLER" header

    fmt = f"{{:<{max_pattern}}}  {{:<{max_handler}}}  {{}}"
    print(fmt.format("PATTERN", "HANDLER", "AUTH"))
    print("-" * min(max_pattern + max_handler + 8, 80))
    for pattern, handler, auth in rows:
        print(fmt.format(pattern, handler, auth))
