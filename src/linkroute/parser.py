"""Deep link parsing and path normalization.

Turns a raw link string — custom scheme (``acp://sessions/abc123``) or
universal link (``https://ambient-code.redhat.com/sessions/abc123``) — into
an immutable ``ParsedDeepLink``. Parsing never raises: every failure is
reported through ``is_valid`` and ``error_message``.

Usage::

    from linkroute.parser import parse_deep_link

    link = parse_deep_link("acp://sessions/abc123?tab=logs")
    if link.is_valid:
        ...
"""

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from urllib.parse import urlsplit

from linkroute.config import LinkConfig
from linkroute.errors import (
    INVALID_PARAMS,
    MISSING_PATH,
    PARSE_FAILED,
    UNSUPPORTED_ROUTE,
    LinkParseError,
)
from linkroute.query import QueryParams, freeze_query
from linkroute.routing.defaults import DEFAULT_ROUTE_TABLE
from linkroute.routing.router import RouteTable

logger = logging.getLogger("linkroute.parser")

_SLASH_RUN = re.compile(r"/{2,}")

_DEFAULT_CONFIG = LinkConfig()


@dataclass(frozen=True, slots=True)
class ParsedDeepLink:
    """Structured, validated view of one raw link.

    ``error_message`` is set only when ``is_valid`` is False. Any mapping
    passed as ``query_params`` is copied into read-only ``QueryParams``.
    """

    scheme: str
    path: str
    query_params: Mapping[str, str] = field(default_factory=QueryParams)
    is_valid: bool = False
    hostname: str | None = None
    error_message: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "query_params", freeze_query(self.query_params))


@dataclass(frozen=True, slots=True)
class _LinkParts:
    scheme: str
    hostname: str | None
    path: str
    query: str


def normalize_path(path: str) -> str:
    """Collapse ``/`` runs, drop a trailing ``/``, and ensure one leading ``/``.

    Idempotent: normalizing a normalized path returns it unchanged.

    Examples::

        >>> normalize_path("sessions//abc123/")
        '/sessions/abc123'
        >>> normalize_path("/")
        '/'
    """
    collapsed = _SLASH_RUN.sub("/", path)
    if len(collapsed) > 1:
        collapsed = collapsed.rstrip("/")
    if not collapsed.startswith("/"):
        collapsed = f"/{collapsed}"
    return collapsed


def parse_query(query: str) -> QueryParams:
    """Decode a query string into a read-only flat map; later keys win."""
    return QueryParams.parse(query)


def split_link(url: str, *, config: LinkConfig = _DEFAULT_CONFIG) -> _LinkParts:
    """Decompose *url* into scheme, hostname, path, and query.

    For custom schemes the authority is part of the in-app path
    (``acp://sessions/abc`` is ``/sessions/abc``). For web schemes it is
    the hostname.

    Raises ``LinkParseError`` if the string cannot be decomposed.
    """
    if not isinstance(url, str):
        raise LinkParseError(repr(url), f"expected a string, got {type(url).__name__}")
    try:
        parts = urlsplit(url.strip())
    except ValueError as exc:
        raise LinkParseError(url, str(exc)) from exc

    scheme = parts.scheme.lower()
    if scheme in config.web_schemes:
        return _LinkParts(
            scheme=scheme,
            hostname=parts.hostname or None,
            path=parts.path,
            query=parts.query,
        )

    path = parts.path
    if parts.netloc:
        path = f"{parts.netloc}/{path.lstrip('/')}" if path else parts.netloc
    return _LinkParts(scheme=scheme, hostname=None, path=path, query=parts.query)


def parse_deep_link(
    url: str,
    *,
    table: RouteTable = DEFAULT_ROUTE_TABLE,
    config: LinkConfig = _DEFAULT_CONFIG,
) -> ParsedDeepLink:
    """Parse and validate a raw deep link.

    Never raises. Invalid links carry one of the fixed failure messages
    from ``linkroute.errors``.
    """
    try:
        parts = split_link(url, config=config)
        if not parts.path.strip("/"):
            return ParsedDeepLink(scheme=parts.scheme, path="", error_message=MISSING_PATH)

        path = normalize_path(parts.path)
        query_params = parse_query(parts.query)
    except (LinkParseError, ValueError, UnicodeError) as exc:
        logger.debug("Failed to parse deep link %r: %s", url, exc)
        return ParsedDeepLink(scheme="", path="", error_message=PARSE_FAILED.format(reason=exc))

    matched = table.match_with_params(path)
    if matched is None:
        return ParsedDeepLink(
            scheme=parts.scheme,
            hostname=parts.hostname,
            path=path,
            query_params=query_params,
            error_message=UNSUPPORTED_ROUTE.format(path=path),
        )

    validator = matched.route.validate_params
    if validator is not None and not validator({**query_params, **matched.params}):
        return ParsedDeepLink(
            scheme=parts.scheme,
            hostname=parts.hostname,
            path=path,
            query_params=query_params,
            error_message=INVALID_PARAMS,
        )

    return ParsedDeepLink(
        scheme=parts.scheme,
        hostname=parts.hostname,
        path=path,
        query_params=query_params,
        is_valid=True,
    )
