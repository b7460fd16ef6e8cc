"""Recording fakes for the host capabilities.

Stand-ins for the navigation stack, the query cache, and the sessions API
that record what handlers asked of them. Used by the test suite and by the
``linkroute resolve`` command.
"""

from collections.abc import Callable, Hashable
from typing import Any

from linkroute._internal.invoke import invoke
from linkroute.config import LinkConfig
from linkroute.handlers.context import HandlerContext


class RecordingNavigator:
    """Navigator that records ``push``/``replace`` calls in order.

    Pass *echo* to also report each call (e.g. ``print``).
    """

    def __init__(self, echo: Callable[[str], Any] | None = None) -> None:
        self.calls: list[tuple[str, str]] = []
        self._echo = echo

    def push(self, path: str) -> None:
        self._record("push", path)

    def replace(self, path: str) -> None:
        self._record("replace", path)

    def _record(self, action: str, path: str) -> None:
        self.calls.append((action, path))
        if self._echo is not None:
            self._echo(f"{action} {path}")

    @property
    def pushed(self) -> list[str]:
        return [path for action, path in self.calls if action == "push"]

    @property
    def replaced(self) -> list[str]:
        return [path for action, path in self.calls if action == "replace"]


class RecordingCache:
    """Prefetch cache that runs the loader and keeps the result.

    Set *error* to make every prefetch fail with that exception.
    """

    def __init__(self, error: BaseException | None = None) -> None:
        self.keys: list[tuple[Hashable, ...]] = []
        self.data: dict[tuple[Hashable, ...], Any] = {}
        self.error = error

    async def prefetch(self, key: tuple[Hashable, ...], loader: Callable[[], Any]) -> None:
        self.keys.append(key)
        if self.error is not None:
            raise self.error
        self.data[key] = await invoke(loader)


class StubSessions:
    """In-memory sessions API. Raises *error* from every fetch when set."""

    def __init__(
        self,
        sessions: dict[str, dict[str, Any]] | None = None,
        error: BaseException | None = None,
    ) -> None:
        self.sessions = sessions if sessions is not None else {}
        self.error = error
        self.requested: list[str] = []

    async def fetch_session_detail(self, session_id: str) -> dict[str, Any]:
        self.requested.append(session_id)
        if self.error is not None:
            raise self.error
        return self.sessions.get(session_id, {"id": session_id})

    async def fetch_sessions(self) -> list[dict[str, Any]]:
        if self.error is not None:
            raise self.error
        return list(self.sessions.values())


def make_context(
    *,
    is_authenticated: bool = True,
    navigator: RecordingNavigator | None = None,
    cache: RecordingCache | None = None,
    sessions: StubSessions | None = None,
    config: LinkConfig | None = None,
) -> HandlerContext:
    """Build a ``HandlerContext`` wired to fresh recording fakes."""
    return HandlerContext(
        navigator=navigator if navigator is not None else RecordingNavigator(),
        cache=cache if cache is not None else RecordingCache(),
        is_authenticated=is_authenticated,
        sessions=sessions if sessions is not None else StubSessions(),
        config=config if config is not None else LinkConfig(),
    )
