"""Link resolution configuration.

LinkConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass

from linkroute.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class LinkConfig:
    """Deep link configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = LinkConfig(development=True, max_events=500)
    """

    # Link formats
    scheme: str = "acp"
    universal_link_host: str = "ambient-code.redhat.com"
    web_schemes: tuple[str, ...] = ("http", "https")
    development: bool = False  # Build custom-scheme links instead of universal links

    # Navigation
    fallback_path: str = "/(tabs)"  # Safe destination for rejected links

    # Analytics
    max_events: int = 100
    debug: bool = False  # Log every tracked event

    def __post_init__(self) -> None:
        if self.max_events < 1:
            msg = f"max_events must be at least 1, got {self.max_events}"
            raise ConfigurationError(msg)
        if not self.fallback_path.startswith("/"):
            msg = f"fallback_path must be an in-app path starting with '/', got {self.fallback_path!r}"
            raise ConfigurationError(msg)
