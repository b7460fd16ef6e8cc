"""Host capabilities consumed by deep link handlers.

Handlers never talk to the navigation stack, the query cache, or the API
directly. The host bundles those capabilities into a ``HandlerContext``
per dispatch. Each protocol method may be sync or async.

No base class required. The dispatcher checks the shape, not the lineage.
"""

from collections.abc import Awaitable, Callable, Hashable
from dataclasses import dataclass, field
from typing import Any, Protocol

from linkroute.config import LinkConfig

# Zero-argument data loader handed to the cache on prefetch
type Loader = Callable[[], Any]

# Cache keys are tuples like ("session", "abc123")
type CacheKey = tuple[Hashable, ...]


class Navigator(Protocol):
    """Navigation stack capability. Return values are ignored."""

    def push(self, path: str) -> Any: ...

    def replace(self, path: str) -> Any: ...


class PrefetchCache(Protocol):
    """Cache warm-up capability.

    Only success or failure of ``prefetch`` is inspected. A raised
    exception (or rejected awaitable) is a failed prefetch.
    """

    def prefetch(self, key: CacheKey, loader: Loader) -> Awaitable[Any] | Any: ...


class SessionsSource(Protocol):
    """Session data the prefetch loaders read from."""

    def fetch_session_detail(self, session_id: str) -> Any: ...

    def fetch_sessions(self) -> Any: ...


@dataclass(frozen=True, slots=True)
class HandlerContext:
    """Everything a handler needs for one dispatch.

    ``sessions`` is optional: without it, loaders resolve to ``None`` and
    the cache decides what a ``None`` fill means.
    """

    navigator: Navigator
    cache: PrefetchCache
    is_authenticated: bool
    sessions: SessionsSource | None = None
    config: LinkConfig = field(default_factory=LinkConfig)
