"""linkroute exception hierarchy and failure messages.

Shared across the parser, the route table, and the resolver so every module
raises and catches the same types. Parsing and dispatch never let these
escape: they surface as ``is_valid``/``error_message`` on a descriptor or as
a ``False`` dispatch result.
"""

# Failure messages carried on invalid descriptors and analytics events.
MISSING_PATH = "Invalid URL: missing path"
UNSUPPORTED_ROUTE = "Unsupported route: {path}"
INVALID_PARAMS = "Invalid query parameters"
PARSE_FAILED = "Failed to parse URL: {reason}"
AUTH_REQUIRED = "Authentication required"
NO_HANDLER = "No handler for path: {path}"


class LinkRouteError(Exception):
    """Base for all linkroute-specific errors."""


class ConfigurationError(LinkRouteError):
    """Raised when a route table or config is invalid.

    Typically raised at import or startup, never while resolving a link.
    """


class LinkParseError(LinkRouteError):
    """A raw link could not be decomposed into scheme, path, and query."""

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(reason)
