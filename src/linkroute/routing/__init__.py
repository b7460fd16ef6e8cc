"""Routing — ordered deep link route table with first-match-wins matching.

Routes are declared once as frozen definitions and compiled into an
immutable table at import time.
"""

from linkroute.routing.defaults import (
    DEFAULT_ROUTE_TABLE,
    DEFAULT_ROUTES,
    find_matching_route,
    get_handler_name,
    requires_auth,
)
from linkroute.routing.params import is_valid_notification_id, is_valid_session_id
from linkroute.routing.route import (
    AlternationPattern,
    CapturePattern,
    HandlerName,
    LiteralPattern,
    RouteDefinition,
    RouteMatch,
    RoutePattern,
)
from linkroute.routing.router import (
    RouteTable,
    describe_pattern,
    extract_route_params,
    match_pattern,
)

__all__ = [
    "DEFAULT_ROUTES",
    "DEFAULT_ROUTE_TABLE",
    "AlternationPattern",
    "CapturePattern",
    "HandlerName",
    "LiteralPattern",
    "RouteDefinition",
    "RouteMatch",
    "RoutePattern",
    "RouteTable",
    "describe_pattern",
    "extract_route_params",
    "find_matching_route",
    "get_handler_name",
    "is_valid_notification_id",
    "is_valid_session_id",
    "match_pattern",
    "requires_auth",
]
