"""Deep link analytics.

Bounded in-memory log of resolution attempts for monitoring and debugging.
The host constructs one recorder at startup and hands it to whatever issues
dispatches; nothing in this module is global.

Free-threading safety:
    - DeepLinkEvent is a frozen dataclass with a read-only query map
      (immutable, safe to share)
    - DeepLinkAnalytics guards its buffer with a Lock, so append and
      eviction happen as one step and the cap holds exactly
    - Every query returns a copy, never the live buffer
"""

import logging
import threading
from collections import Counter, deque
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from time import time
from typing import Self

from linkroute.config import LinkConfig
from linkroute.errors import ConfigurationError
from linkroute.parser import ParsedDeepLink
from linkroute.query import QueryParams, freeze_query

logger = logging.getLogger("linkroute.analytics")

RECENT_FAILURES_IN_REPORT = 5


class LinkSource(StrEnum):
    """How the link reached the app."""

    INITIAL = "initial"  # cold launch
    FOREGROUND = "foreground"  # received while running
    BACKGROUND = "background"  # received while backgrounded, now resumed


@dataclass(frozen=True, slots=True)
class DeepLinkEvent:
    """A single resolution attempt. Immutable, including ``query_params``."""

    url: str
    path: str
    handler: str | None
    is_valid: bool
    source: LinkSource
    query_params: Mapping[str, str] = field(default_factory=QueryParams)
    error_message: str | None = None
    navigation_time: float | None = None  # milliseconds
    timestamp: float = field(default_factory=time)

    def __post_init__(self) -> None:
        object.__setattr__(self, "query_params", freeze_query(self.query_params))


@dataclass(frozen=True, slots=True)
class DeepLinkStats:
    """Aggregate counts over the retained events."""

    total: int
    valid: int
    invalid: int
    average_navigation_time: float
    by_handler: dict[str, int]
    by_source: dict[str, int]


class DeepLinkAnalytics:
    """Bounded FIFO log of deep link events.

    Usage::

        analytics = DeepLinkAnalytics(max_events=100)
        analytics.track_navigation(url, link, "session-detail", "foreground", 42.0)
        print(analytics.generate_report())
    """

    __slots__ = ("_debug", "_events", "_lock")

    def __init__(self, max_events: int = 100, *, debug: bool = False) -> None:
        if max_events < 1:
            msg = f"max_events must be at least 1, got {max_events}"
            raise ConfigurationError(msg)
        self._events: deque[DeepLinkEvent] = deque(maxlen=max_events)
        self._lock = threading.Lock()
        self._debug = debug

    @classmethod
    def from_config(cls, config: LinkConfig) -> Self:
        return cls(max_events=config.max_events, debug=config.debug)

    @property
    def max_events(self) -> int:
        return self._events.maxlen or 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._events)

    # -- recording -----------------------------------------------------------

    def track_navigation(
        self,
        url: str,
        link: ParsedDeepLink,
        handler: str | None,
        source: LinkSource | str,
        navigation_time: float | None = None,
    ) -> DeepLinkEvent:
        """Record a navigation attempt built from a parsed link."""
        event = DeepLinkEvent(
            url=url,
            path=link.path,
            handler=str(handler) if handler is not None else None,
            is_valid=link.is_valid,
            source=LinkSource(source),
            query_params=link.query_params,
            error_message=link.error_message,
            navigation_time=navigation_time,
        )
        self._append(event)
        return event

    def track_validation_failure(
        self,
        url: str,
        error_message: str,
        source: LinkSource | str,
    ) -> DeepLinkEvent:
        """Record a link that was rejected before any handler ran."""
        event = DeepLinkEvent(
            url=url,
            path="",
            handler=None,
            is_valid=False,
            source=LinkSource(source),
            error_message=error_message,
        )
        self._append(event)
        return event

    def _append(self, event: DeepLinkEvent) -> None:
        # deque(maxlen) evicts the oldest event on overflow
        with self._lock:
            self._events.append(event)
        if self._debug:
            self._log_event(event)

    def _log_event(self, event: DeepLinkEvent) -> None:
        status = "ok" if event.is_valid else "rejected"
        timing = f" ({event.navigation_time:.0f}ms)" if event.navigation_time is not None else ""
        logger.info(
            "[%s] %s -> %s%s %s",
            status,
            event.source.value,
            event.path or event.url,
            timing,
            dict(event.query_params),
        )
        if event.error_message:
            logger.warning("Deep link error: %s", event.error_message)

    # -- queries -------------------------------------------------------------

    def get_events(self) -> list[DeepLinkEvent]:
        """All retained events, oldest first."""
        with self._lock:
            return list(self._events)

    def get_valid_events(self) -> list[DeepLinkEvent]:
        return [e for e in self.get_events() if e.is_valid]

    def get_failed_events(self) -> list[DeepLinkEvent]:
        return [e for e in self.get_events() if not e.is_valid]

    def get_average_navigation_time(self) -> float:
        """Mean navigation time over events that recorded one, else 0."""
        return _average_navigation_time(self.get_events())

    def get_stats(self) -> DeepLinkStats:
        return _build_stats(self.get_events())

    def generate_report(self) -> str:
        """Plain-text summary for debugging.

        Totals, per-handler and per-source counts, and the last five
        failures.
        """
        events = self.get_events()
        stats = _build_stats(events)
        failures = [e for e in events if not e.is_valid]

        lines = [
            "",
            "=== Deep Link Analytics Report ===",
            "",
            f"Total navigations: {stats.total}",
            f"Valid: {stats.valid}",
            f"Invalid: {stats.invalid}",
            f"Average navigation time: {stats.average_navigation_time:.2f}ms",
            "",
            "By Handler:",
        ]
        lines.extend(f"  {handler}: {count}" for handler, count in stats.by_handler.items())
        lines.extend(["", "By Source:"])
        lines.extend(f"  {source}: {count}" for source, count in stats.by_source.items())

        if failures:
            lines.extend(["", "Recent Failures:"])
            lines.extend(
                f"  {e.path} - {e.error_message}"
                for e in failures[-RECENT_FAILURES_IN_REPORT:]
            )

        return "\n".join(lines) + "\n"

    def clear(self) -> None:
        """Drop every retained event."""
        with self._lock:
            self._events.clear()


def _build_stats(events: list[DeepLinkEvent]) -> DeepLinkStats:
    valid = sum(1 for e in events if e.is_valid)
    by_handler = Counter(e.handler for e in events if e.handler)
    by_source = Counter(e.source.value for e in events)
    return DeepLinkStats(
        total=len(events),
        valid=valid,
        invalid=len(events) - valid,
        average_navigation_time=_average_navigation_time(events),
        by_handler=dict(by_handler),
        by_source=dict(by_source),
    )


def _average_navigation_time(events: list[DeepLinkEvent]) -> float:
    times = [e.navigation_time for e in events if e.navigation_time is not None]
    if not times:
        return 0
    return sum(times) / len(times)
