"""Ordered route table with first-match-wins path matching.

The table is built once from a sequence of route definitions and is
immutable afterwards. Matching walks the routes in declared order and
returns the first one whose pattern matches the *whole* path.
"""

from collections.abc import Iterable, Iterator
from dataclasses import replace
from typing import assert_never

from linkroute.errors import ConfigurationError
from linkroute.routing.route import (
    AlternationPattern,
    CapturePattern,
    HandlerName,
    LiteralPattern,
    RouteDefinition,
    RouteMatch,
    RoutePattern,
)


def match_pattern(pattern: RoutePattern, path: str) -> dict[str, str] | None:
    """Match a normalized *path* against one pattern.

    Returns the captured parameters (empty for literals) on a full-path
    match, ``None`` otherwise.

    Examples::

        match_pattern(LiteralPattern("/chat"), "/chat")              -> {}
        match_pattern(CapturePattern("/sessions", "id"), "/sessions/a1") -> {"id": "a1"}
        match_pattern(CapturePattern("/sessions", "id"), "/sessions/a/b") -> None
    """
    match pattern:
        case LiteralPattern(path=literal):
            return {} if path == literal else None
        case CapturePattern(prefix=prefix, name=name):
            segment = _segment_after(prefix, path)
            if segment is None or pattern.regex.fullmatch(segment) is None:
                return None
            return {name: segment}
        case AlternationPattern(prefix=prefix, name=name, choices=choices):
            segment = _segment_after(prefix, path)
            if segment is None or segment not in choices:
                return None
            return {name: segment}
        case _:
            assert_never(pattern)


def describe_pattern(pattern: RoutePattern) -> str:
    """Human-readable form of a pattern, used for listings."""
    match pattern:
        case LiteralPattern(path=literal):
            return literal
        case CapturePattern(prefix=prefix, name=name):
            return f"{prefix}/{{{name}}}"
        case AlternationPattern(prefix=prefix, name=name, choices=choices):
            return f"{prefix}/{{{name}:{'|'.join(choices)}}}"
        case _:
            assert_never(pattern)


def extract_route_params(path: str, pattern: RoutePattern) -> dict[str, str]:
    """Re-apply *pattern* to *path* and return its named captures.

    Returns an empty dict when the pattern does not match.
    """
    return match_pattern(pattern, path) or {}


def _segment_after(prefix: str, path: str) -> str | None:
    """Return the single segment following *prefix*, or None."""
    head = prefix.rstrip("/") + "/"
    if not path.startswith(head):
        return None
    segment = path[len(head) :]
    if not segment or "/" in segment:
        return None
    return segment


class RouteTable:
    """Ordered, immutable deep link route table.

    Usage::

        table = RouteTable([
            RouteDefinition(LiteralPattern("/chat"), HandlerName.CHAT),
        ])
        route = table.match("/chat")
    """

    __slots__ = ("_routes",)

    def __init__(self, routes: Iterable[RouteDefinition]) -> None:
        frozen: list[RouteDefinition] = []
        for route in routes:
            try:
                handler = HandlerName(route.handler)
            except ValueError:
                msg = (
                    f"Route {describe_pattern(route.pattern)!r} names unknown handler "
                    f"{route.handler!r}. Known handlers: "
                    f"{', '.join(h.value for h in HandlerName)}"
                )
                raise ConfigurationError(msg) from None
            if handler is not route.handler:
                route = replace(route, handler=handler)
            frozen.append(route)
        self._routes = tuple(frozen)

    @property
    def routes(self) -> tuple[RouteDefinition, ...]:
        """Return all routes in declared order."""
        return self._routes

    def __iter__(self) -> Iterator[RouteDefinition]:
        return iter(self._routes)

    def __len__(self) -> int:
        return len(self._routes)

    def match(self, path: str) -> RouteDefinition | None:
        """Return the first route whose pattern matches *path*."""
        result = self.match_with_params(path)
        return result.route if result is not None else None

    def match_with_params(self, path: str) -> RouteMatch | None:
        """Like ``match()``, but also returns the captured parameters."""
        for route in self._routes:
            params = match_pattern(route.pattern, path)
            if params is not None:
                return RouteMatch(route=route, params=params)
        return None

    def requires_auth(self, path: str) -> bool:
        """Whether *path* needs an authenticated user.

        Unmatched paths require auth.
        """
        route = self.match(path)
        return route.requires_auth if route is not None else True

    def handler_name_for(self, path: str) -> HandlerName | None:
        """Return the handler name for *path*, or None when unmatched."""
        route = self.match(path)
        return route.handler if route is not None else None
