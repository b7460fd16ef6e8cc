"""The application's deep link route table.

Order matters: ``/sessions/new`` is also a well-formed session id, so its
literal route is declared before the ``/sessions/{id}`` capture.
"""

from linkroute.routing.params import session_params_valid
from linkroute.routing.route import (
    AlternationPattern,
    CapturePattern,
    HandlerName,
    LiteralPattern,
    RouteDefinition,
)
from linkroute.routing.router import RouteTable

SETTINGS_SECTIONS = ("appearance", "notifications", "repos")

SESSION_DETAIL_PATTERN = CapturePattern("/sessions", "id")
SETTINGS_SECTION_PATTERN = AlternationPattern("/settings", "section", SETTINGS_SECTIONS)

DEFAULT_ROUTES: tuple[RouteDefinition, ...] = (
    RouteDefinition(LiteralPattern("/sessions/new"), HandlerName.SESSION_CREATE),
    RouteDefinition(
        SESSION_DETAIL_PATTERN,
        HandlerName.SESSION_DETAIL,
        validate_params=session_params_valid,
    ),
    RouteDefinition(LiteralPattern("/sessions"), HandlerName.SESSIONS_LIST),
    RouteDefinition(LiteralPattern("/notifications"), HandlerName.NOTIFICATIONS_LIST),
    RouteDefinition(SETTINGS_SECTION_PATTERN, HandlerName.SETTINGS),
    RouteDefinition(LiteralPattern("/settings"), HandlerName.SETTINGS),
    RouteDefinition(LiteralPattern("/chat"), HandlerName.CHAT),
    RouteDefinition(
        LiteralPattern("/auth/callback"),
        HandlerName.OAUTH_CALLBACK,
        requires_auth=False,
    ),
)

DEFAULT_ROUTE_TABLE = RouteTable(DEFAULT_ROUTES)


def find_matching_route(path: str) -> RouteDefinition | None:
    """First route in the default table matching *path*."""
    return DEFAULT_ROUTE_TABLE.match(path)


def requires_auth(path: str) -> bool:
    """Whether *path* needs an authenticated user (True when unmatched)."""
    return DEFAULT_ROUTE_TABLE.requires_auth(path)


def get_handler_name(path: str) -> HandlerName | None:
    return DEFAULT_ROUTE_TABLE.handler_name_for(path)
