"""Tests for linkroute.builder — shareable link construction."""

from linkroute.builder import build_deep_link
from linkroute.config import LinkConfig
from linkroute.parser import parse_deep_link

DEV = LinkConfig(development=True)


class TestBuildDeepLink:
    def test_development_link(self) -> None:
        assert build_deep_link("/sessions/abc123", config=DEV) == "acp:///sessions/abc123"

    def test_development_link_with_query(self) -> None:
        url = build_deep_link("/sessions/abc123", {"tab": "logs", "filter": "error"}, config=DEV)

        assert url.startswith("acp:///sessions/abc123?")
        assert "tab=logs" in url
        assert "filter=error" in url

    def test_production_link(self) -> None:
        assert build_deep_link("/sessions/abc123") == "https://ambient-code.redhat.com/sessions/abc123"

    def test_custom_host(self) -> None:
        cfg = LinkConfig(universal_link_host="links.example.com")
        assert build_deep_link("/chat", config=cfg) == "https://links.example.com/chat"

    def test_empty_query_is_omitted(self) -> None:
        assert build_deep_link("/chat", {}) == "https://ambient-code.redhat.com/chat"

    def test_query_values_are_encoded(self) -> None:
        url = build_deep_link("/sessions/new", {"repo": "owner/repo"})
        assert url.endswith("?repo=owner%2Frepo")

    def test_built_links_parse_back(self) -> None:
        for cfg in (DEV, LinkConfig()):
            link = parse_deep_link(build_deep_link("/sessions/new", {"repo": "owner/repo"}, config=cfg))
            assert link.is_valid is True
            assert link.path == "/sessions/new"
            assert link.query_params == {"repo": "owner/repo"}
