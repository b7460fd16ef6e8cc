"""Handler selection and the dispatch failure boundary.

Mirrors the route table: ``HandlerName`` is the closed set of handlers a
route can name, and ``get_handler`` maps each one to its implementation in
a single exhaustive ``match``. Adding a handler name without a case is a
type-checker error, not a silent runtime miss.
"""

import logging
from collections.abc import Awaitable, Callable
from typing import assert_never

from linkroute.handlers.builtin import (
    handle_chat,
    handle_notifications,
    handle_oauth_callback,
    handle_session_create,
    handle_session_detail,
    handle_sessions_list,
    handle_settings,
)
from linkroute.handlers.context import HandlerContext
from linkroute.parser import ParsedDeepLink
from linkroute.routing.route import HandlerName

logger = logging.getLogger("linkroute.handlers")

type DeepLinkHandler = Callable[[ParsedDeepLink, HandlerContext], Awaitable[bool]]


def get_handler(name: HandlerName) -> DeepLinkHandler:
    """Return the implementation for a handler name."""
    match name:
        case HandlerName.SESSION_DETAIL:
            return handle_session_detail
        case HandlerName.SESSION_CREATE:
            return handle_session_create
        case HandlerName.SESSIONS_LIST:
            return handle_sessions_list
        case HandlerName.NOTIFICATIONS_LIST:
            return handle_notifications
        case HandlerName.SETTINGS:
            return handle_settings
        case HandlerName.CHAT:
            return handle_chat
        case HandlerName.OAUTH_CALLBACK:
            return handle_oauth_callback
        case _:
            assert_never(name)


def registered_handlers() -> dict[HandlerName, DeepLinkHandler]:
    """Every handler name with its implementation, in declaration order."""
    return {name: get_handler(name) for name in HandlerName}


async def route_deep_link(
    link: ParsedDeepLink,
    handler_name: str | None,
    context: HandlerContext,
) -> bool:
    """Run the handler named *handler_name* for *link*.

    Returns the handler's result. Unknown names return False without
    touching the context. Any exception raised inside the handler is
    logged and turned into False; nothing propagates to the caller.
    """
    try:
        name = HandlerName(handler_name)
    except ValueError:
        logger.warning("Unknown deep link handler: %r", handler_name)
        return False

    handler = get_handler(name)
    try:
        return bool(await handler(link, context))
    except Exception:
        logger.exception("Deep link handler %s failed for %s", name, link.path)
        return False
