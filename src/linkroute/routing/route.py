"""Route pattern variants and frozen route definitions."""

import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import StrEnum

from linkroute.routing.params import IDENTIFIER


class HandlerName(StrEnum):
    """The closed set of handlers a route can name."""

    SESSION_DETAIL = "session-detail"
    SESSION_CREATE = "session-create"
    SESSIONS_LIST = "sessions-list"
    NOTIFICATIONS_LIST = "notifications-list"
    SETTINGS = "settings"
    CHAT = "chat"
    OAUTH_CALLBACK = "oauth-callback"


@dataclass(frozen=True, slots=True)
class LiteralPattern:
    """Exact path: ``/sessions``."""

    path: str


@dataclass(frozen=True, slots=True)
class CapturePattern:
    """A prefix followed by one captured segment: ``/sessions/{id}``.

    The segment must consist entirely of *allowed* (a regex character class).
    """

    prefix: str
    name: str
    allowed: str = IDENTIFIER
    regex: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "regex", re.compile(self.allowed))


@dataclass(frozen=True, slots=True)
class AlternationPattern:
    """A prefix followed by one of a fixed set of literal segments.

    ``/settings/{section:appearance|notifications|repos}``
    """

    prefix: str
    name: str
    choices: tuple[str, ...]


type RoutePattern = LiteralPattern | CapturePattern | AlternationPattern

type ParamValidator = Callable[[Mapping[str, str]], bool]


@dataclass(frozen=True, slots=True)
class RouteDefinition:
    """A frozen deep link route.

    Built once when the route table is created, never mutated.
    """

    pattern: RoutePattern
    handler: HandlerName
    requires_auth: bool = True
    validate_params: ParamValidator | None = None


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful route match."""

    route: RouteDefinition
    params: dict[str, str]
