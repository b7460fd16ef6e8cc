"""Build shareable deep links from in-app paths.

Development builds use the custom scheme so links open the local app;
everything else gets a universal link on the app domain.

Usage::

    from linkroute.builder import build_deep_link

    build_deep_link("/sessions/abc123", {"tab": "logs"})
    # 'https://ambient-code.redhat.com/sessions/abc123?tab=logs'
"""

from collections.abc import Mapping
from urllib.parse import urlencode

from linkroute.config import LinkConfig


def build_deep_link(
    path: str,
    query_params: Mapping[str, str] | None = None,
    *,
    config: LinkConfig | None = None,
) -> str:
    """Return the external link for an in-app *path*.

    ``/sessions/abc123`` becomes ``acp:///sessions/abc123`` in development
    and ``https://ambient-code.redhat.com/sessions/abc123`` otherwise.
    """
    cfg = config or LinkConfig()
    if cfg.development:
        base = f"{cfg.scheme}://"
    else:
        base = f"https://{cfg.universal_link_host}"

    url = f"{base}{path}"
    if query_params:
        url += f"?{urlencode(dict(query_params))}"
    return url
