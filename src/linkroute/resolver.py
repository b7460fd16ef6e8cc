"""Link resolution — the host-side pipeline around parse and dispatch.

For every incoming link: parse, apply the auth gate, pick the handler,
dispatch, and record the outcome in analytics. Rejected links send the user
to the configured fallback screen.

Usage::

    resolver = LinkResolver(context, analytics)

    # OS link listener
    await resolver.resolve(url, LinkSource.FOREGROUND)
"""

import logging
import time
from collections.abc import Callable
from dataclasses import replace
from typing import Any

from linkroute._internal.invoke import invoke
from linkroute.analytics import DeepLinkAnalytics, LinkSource
from linkroute.errors import AUTH_REQUIRED, NO_HANDLER
from linkroute.handlers.context import HandlerContext
from linkroute.handlers.dispatch import route_deep_link
from linkroute.parser import parse_deep_link
from linkroute.routing.defaults import DEFAULT_ROUTE_TABLE
from linkroute.routing.router import RouteTable

logger = logging.getLogger("linkroute.resolver")

type StartCallback = Callable[[str], Any]
type CompleteCallback = Callable[[str, bool], Any]
type ErrorCallback = Callable[[str, Exception], Any]


class LinkResolver:
    """Resolve raw links into navigation and record every attempt.

    One resolution runs at a time per resolver. A link that arrives while
    another is being resolved is ignored (logged, not recorded), matching
    how the OS can deliver the same link twice during a cold launch.

    Each accepted link produces exactly one analytics event. Errors raised
    by the completion and error callbacks are logged, not propagated.
    """

    __slots__ = (
        "_analytics",
        "_busy",
        "_context",
        "_on_complete",
        "_on_error",
        "_on_start",
        "_table",
    )

    def __init__(
        self,
        context: HandlerContext,
        analytics: DeepLinkAnalytics,
        *,
        table: RouteTable = DEFAULT_ROUTE_TABLE,
        on_navigation_start: StartCallback | None = None,
        on_navigation_complete: CompleteCallback | None = None,
        on_navigation_error: ErrorCallback | None = None,
    ) -> None:
        self._context = context
        self._analytics = analytics
        self._table = table
        self._on_start = on_navigation_start
        self._on_complete = on_navigation_complete
        self._on_error = on_navigation_error
        self._busy = False

    @property
    def analytics(self) -> DeepLinkAnalytics:
        return self._analytics

    @property
    def context(self) -> HandlerContext:
        return self._context

    def set_authenticated(self, is_authenticated: bool) -> None:
        """Update the auth flag used for subsequent resolutions."""
        self._context = replace(self._context, is_authenticated=is_authenticated)

    async def resolve(
        self,
        url: str,
        source: LinkSource | str = LinkSource.FOREGROUND,
    ) -> bool:
        """Resolve *url*. Returns True only for a clean navigation."""
        if self._busy:
            logger.warning("Already resolving a deep link, ignoring: %s", url)
            return False
        self._busy = True
        try:
            success = await self._resolve(url, LinkSource(source))
            await self._notify(self._on_complete, url, success)
            return success
        finally:
            self._busy = False

    async def _resolve(self, url: str, source: LinkSource) -> bool:
        context = self._context
        start = time.perf_counter()
        try:
            if self._on_start is not None:
                await invoke(self._on_start, url)

            link = parse_deep_link(url, table=self._table, config=context.config)
            if not link.is_valid:
                message = link.error_message or "Unknown error"
                logger.warning("Invalid deep link %s: %s", url, message)
                return await self._reject(url, message, source, context)

            if self._table.requires_auth(link.path) and not context.is_authenticated:
                logger.warning("Deep link requires authentication: %s", url)
                return await self._reject(url, AUTH_REQUIRED, source, context)

            handler_name = self._table.handler_name_for(link.path)
            if handler_name is None:
                logger.warning("No handler for path: %s", link.path)
                return await self._reject(url, NO_HANDLER.format(path=link.path), source, context)

            success = await route_deep_link(link, handler_name, context)
            elapsed_ms = (time.perf_counter() - start) * 1000
            self._analytics.track_navigation(url, link, handler_name, source, elapsed_ms)
            return success
        except Exception as exc:
            logger.exception("Error handling deep link %s", url)
            self._analytics.track_validation_failure(url, str(exc) or type(exc).__name__, source)
            await self._notify(self._on_error, url, exc)
            await invoke(context.navigator.push, context.config.fallback_path)
            return False

    async def _reject(
        self,
        url: str,
        message: str,
        source: LinkSource,
        context: HandlerContext,
    ) -> bool:
        await invoke(context.navigator.push, context.config.fallback_path)
        self._analytics.track_validation_failure(url, message, source)
        return False

    async def _notify(self, callback: Callable[..., Any] | None, *args: Any) -> None:
        if callback is None:
            return
        try:
            await invoke(callback, *args)
        except Exception:
            logger.exception("Deep link callback %r failed", callback)
