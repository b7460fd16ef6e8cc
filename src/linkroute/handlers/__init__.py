"""Deep link handlers and the dispatcher.

Handlers receive a parsed link and a ``HandlerContext`` of host
capabilities, navigate, and report whether navigation was clean.
"""

from linkroute.handlers.context import (
    HandlerContext,
    Navigator,
    PrefetchCache,
    SessionsSource,
)
from linkroute.handlers.dispatch import (
    DeepLinkHandler,
    get_handler,
    registered_handlers,
    route_deep_link,
)

__all__ = [
    "DeepLinkHandler",
    "HandlerContext",
    "Navigator",
    "PrefetchCache",
    "SessionsSource",
    "get_handler",
    "registered_handlers",
    "route_deep_link",
]
