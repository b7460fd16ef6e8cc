"""Route-specific deep link handlers.

Each handler navigates to the destination for one route and may warm the
cache first. Handlers return True on a clean navigation and False when they
had to degrade (fallback destination, failed prefetch).

Query parameters a destination screen cannot use yet are recognized and
logged, not forwarded.
"""

import logging

from linkroute._internal.invoke import invoke
from linkroute.handlers.context import HandlerContext, Loader
from linkroute.parser import ParsedDeepLink
from linkroute.routing.defaults import SESSION_DETAIL_PATTERN, SETTINGS_SECTION_PATTERN
from linkroute.routing.params import is_valid_session_id
from linkroute.routing.router import extract_route_params

logger = logging.getLogger("linkroute.handlers")


def _session_detail_loader(context: HandlerContext, session_id: str) -> Loader:
    sessions = context.sessions

    async def load() -> object:
        if sessions is None:
            return None
        return await invoke(sessions.fetch_session_detail, session_id)

    return load


def _sessions_loader(context: HandlerContext) -> Loader:
    sessions = context.sessions

    async def load() -> object:
        if sessions is None:
            return None
        return await invoke(sessions.fetch_sessions)

    return load


async def handle_session_detail(link: ParsedDeepLink, context: HandlerContext) -> bool:
    """``/sessions/{id}`` — prefetch the session, then open it.

    An id that fails validation sends the user to the fallback screen. A
    failed prefetch still navigates (the screen loads its own data) but
    reports False.
    """
    params = extract_route_params(link.path, SESSION_DETAIL_PATTERN)
    session_id = params.get("id") or link.query_params.get("id")

    if not session_id or not is_valid_session_id(session_id):
        logger.warning("Invalid session ID: %r", session_id)
        await invoke(context.navigator.push, context.config.fallback_path)
        return False

    destination = f"/sessions/{session_id}"
    try:
        await invoke(
            context.cache.prefetch,
            ("session", session_id),
            _session_detail_loader(context, session_id),
        )
    except Exception:
        logger.warning("Failed to prefetch session %s", session_id, exc_info=True)
        await invoke(context.navigator.push, destination)
        return False

    await invoke(context.navigator.push, destination)

    tab = link.query_params.get("tab")
    if tab:
        logger.debug("Session tab parameter not applied yet: %s", tab)
    return True


async def handle_session_create(link: ParsedDeepLink, context: HandlerContext) -> bool:
    """``/sessions/new`` — open the creation screen."""
    await invoke(context.navigator.push, "/sessions/new")

    prefill = {
        key: link.query_params[key]
        for key in ("repo", "workflow", "pr")
        if link.query_params.get(key)
    }
    if prefill:
        logger.debug("Session creation parameters not forwarded yet: %s", prefill)
    return True


async def handle_sessions_list(link: ParsedDeepLink, context: HandlerContext) -> bool:
    """``/sessions`` — best-effort prefetch of the list, then open it."""
    try:
        await invoke(context.cache.prefetch, ("sessions",), _sessions_loader(context))
    except Exception:
        logger.warning("Failed to prefetch sessions", exc_info=True)

    await invoke(context.navigator.push, "/sessions")

    filter_value = link.query_params.get("filter")
    if filter_value:
        logger.debug("Sessions filter not applied yet: %s", filter_value)
    return True


async def handle_notifications(link: ParsedDeepLink, context: HandlerContext) -> bool:
    await invoke(context.navigator.push, "/notifications")

    filter_value = link.query_params.get("filter")
    if filter_value:
        logger.debug("Notifications filter not applied yet: %s", filter_value)
    return True


async def handle_settings(link: ParsedDeepLink, context: HandlerContext) -> bool:
    """``/settings`` or ``/settings/{section}``."""
    section = extract_route_params(link.path, SETTINGS_SECTION_PATTERN).get("section")
    if section:
        await invoke(context.navigator.push, f"/settings/{section}")
    else:
        await invoke(context.navigator.push, "/settings")
    return True


async def handle_chat(link: ParsedDeepLink, context: HandlerContext) -> bool:
    await invoke(context.navigator.push, "/chat")

    session_id = link.query_params.get("session")
    if session_id:
        logger.debug("Chat session context not forwarded yet: %s", session_id)
    return True


async def handle_oauth_callback(link: ParsedDeepLink, context: HandlerContext) -> bool:
    """``/auth/callback`` — nothing to do, the OAuth flow owns this transition."""
    logger.debug("OAuth callback left to the OAuth flow: %s", link.path)
    return True
