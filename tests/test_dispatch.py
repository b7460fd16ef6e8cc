"""Tests for linkroute.handlers.dispatch — handler selection and failure boundary."""

import logging

import pytest

from linkroute.handlers import get_handler, registered_handlers, route_deep_link
from linkroute.handlers.context import HandlerContext
from linkroute.parser import ParsedDeepLink, parse_deep_link
from linkroute.routing.route import HandlerName
from linkroute.testing import RecordingCache, make_context


class _ExplodingNavigator:
    def push(self, path: str) -> None:
        raise RuntimeError(f"navigation stack unavailable for {path}")

    def replace(self, path: str) -> None:
        raise RuntimeError(f"navigation stack unavailable for {path}")


class TestGetHandler:
    @pytest.mark.parametrize("name", list(HandlerName))
    def test_every_name_has_a_handler(self, name: HandlerName) -> None:
        assert callable(get_handler(name))

    def test_registered_handlers_cover_closed_set(self) -> None:
        handlers = registered_handlers()
        assert list(handlers) == list(HandlerName)
        assert handlers[HandlerName.CHAT].__name__ == "handle_chat"


class TestRouteDeepLink:
    @pytest.mark.anyio
    async def test_dispatches_by_name(self) -> None:
        ctx = make_context()
        link = parse_deep_link("acp://settings/repos")

        assert await route_deep_link(link, "settings", ctx) is True
        assert ctx.navigator.pushed == ["/settings/repos"]

    @pytest.mark.anyio
    async def test_accepts_enum_member(self) -> None:
        ctx = make_context()
        link = parse_deep_link("acp://chat")

        assert await route_deep_link(link, HandlerName.CHAT, ctx) is True
        assert ctx.navigator.pushed == ["/chat"]

    @pytest.mark.anyio
    async def test_unknown_handler(self, caplog: pytest.LogCaptureFixture) -> None:
        ctx = make_context()
        link = parse_deep_link("acp://chat")

        with caplog.at_level(logging.WARNING, logger="linkroute.handlers"):
            result = await route_deep_link(link, "unknown-handler", ctx)

        assert result is False
        assert ctx.navigator.calls == []
        assert ctx.cache.keys == []
        assert "unknown-handler" in caplog.text

    @pytest.mark.anyio
    async def test_missing_handler_name(self) -> None:
        ctx = make_context()
        link = ParsedDeepLink(scheme="acp", path="/nowhere")

        assert await route_deep_link(link, None, ctx) is False
        assert ctx.navigator.calls == []

    @pytest.mark.anyio
    async def test_handler_exception_is_contained(self, caplog: pytest.LogCaptureFixture) -> None:
        ctx = HandlerContext(
            navigator=_ExplodingNavigator(),
            cache=RecordingCache(),
            is_authenticated=True,
        )
        link = parse_deep_link("acp://notifications")

        with caplog.at_level(logging.ERROR, logger="linkroute.handlers"):
            result = await route_deep_link(link, "notifications-list", ctx)

        assert result is False
        assert "notifications-list" in caplog.text

    @pytest.mark.anyio
    async def test_degraded_handler_result_passes_through(self) -> None:
        ctx = make_context(cache=RecordingCache(error=TimeoutError("slow")))
        link = parse_deep_link("acp://sessions/abc123")

        assert await route_deep_link(link, "session-detail", ctx) is False
        assert ctx.navigator.pushed == ["/sessions/abc123"]
