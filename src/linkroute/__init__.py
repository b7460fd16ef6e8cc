"""linkroute — deep link parsing, routing, and dispatch.

Resolves custom-scheme (``acp://…``) and universal (``https://…``) links into
in-app navigation and keeps a bounded log of every attempt.

Basic usage::

    from linkroute import DeepLinkAnalytics, HandlerContext, LinkResolver

    context = HandlerContext(navigator=router, cache=query_cache, is_authenticated=True)
    resolver = LinkResolver(context, DeepLinkAnalytics())
    await resolver.resolve("acp://sessions/abc123", "foreground")

Parsing on its own::

    from linkroute import parse_deep_link

    link = parse_deep_link("acp://settings/appearance")
    link.is_valid, link.path  # (True, '/settings/appearance')
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "DeepLinkAnalytics",
    "DeepLinkEvent",
    "HandlerContext",
    "HandlerName",
    "LinkConfig",
    "LinkResolver",
    "LinkRouteError",
    "LinkSource",
    "ParsedDeepLink",
    "QueryParams",
    "build_deep_link",
    "get_handler_name",
    "parse_deep_link",
    "requires_auth",
    "route_deep_link",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import linkroute`` fast while providing a clean top-level API.
    """
    if name in ("ParsedDeepLink", "parse_deep_link"):
        from linkroute import parser

        return getattr(parser, name)

    if name in ("HandlerName", "get_handler_name", "requires_auth"):
        from linkroute import routing

        return getattr(routing, name)

    if name in ("HandlerContext", "route_deep_link"):
        from linkroute import handlers

        return getattr(handlers, name)

    if name in ("DeepLinkAnalytics", "DeepLinkEvent", "LinkSource"):
        from linkroute import analytics

        return getattr(analytics, name)

    if name == "LinkResolver":
        from linkroute.resolver import LinkResolver

        return LinkResolver

    if name == "QueryParams":
        from linkroute.query import QueryParams

        return QueryParams

    if name == "LinkConfig":
        from linkroute.config import LinkConfig

        return LinkConfig

    if name == "build_deep_link":
        from linkroute.builder import build_deep_link

        return build_deep_link

    if name in ("ConfigurationError", "LinkRouteError"):
        from linkroute import errors

        return getattr(errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
