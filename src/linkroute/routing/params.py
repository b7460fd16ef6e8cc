"""Path parameter character classes and identifier validators.

Captured segments are restricted to a character class; validators add the
length rule on top so a route can reject identifiers the pattern accepted.
"""

import re
from collections.abc import Mapping

# Character class for identifier segments like ``/sessions/{id}``
IDENTIFIER = r"[A-Za-z0-9_-]+"

MAX_IDENTIFIER_LENGTH = 100

_IDENTIFIER_RE = re.compile(rf"[A-Za-z0-9_-]{{1,{MAX_IDENTIFIER_LENGTH}}}")


def is_valid_session_id(value: str) -> bool:
    """Return True if *value* is 1-100 letters, digits, hyphens, or underscores.

    Examples::

        >>> is_valid_session_id("session-123")
        True
        >>> is_valid_session_id("session@123")
        False
        >>> is_valid_session_id("")
        False
    """
    return isinstance(value, str) and _IDENTIFIER_RE.fullmatch(value) is not None


def is_valid_notification_id(value: str) -> bool:
    """Return True if *value* is a well-formed notification identifier.

    Notification ids are UUIDs or opaque tokens, so the same rule as
    session ids applies.
    """
    return isinstance(value, str) and _IDENTIFIER_RE.fullmatch(value) is not None


def session_params_valid(params: Mapping[str, str]) -> bool:
    """Validator for session detail links: the ``id`` must be well formed."""
    session_id = params.get("id")
    return session_id is not None and is_valid_session_id(session_id)
