"""Tests for linkroute.parser — link decomposition, normalization, validation."""

import pytest

from linkroute.errors import INVALID_PARAMS, MISSING_PATH
from linkroute.parser import ParsedDeepLink, normalize_path, parse_deep_link, parse_query
from linkroute.routing.route import CapturePattern, HandlerName, LiteralPattern, RouteDefinition
from linkroute.routing.router import RouteTable


class TestValidLinks:
    def test_session_detail(self) -> None:
        link = parse_deep_link("acp://sessions/abc123")

        assert link.is_valid is True
        assert link.scheme == "acp"
        assert link.path == "/sessions/abc123"
        assert link.query_params == {}
        assert link.hostname is None
        assert link.error_message is None

    def test_session_detail_with_query(self) -> None:
        link = parse_deep_link("acp://sessions/abc123?tab=logs")

        assert link.is_valid is True
        assert link.path == "/sessions/abc123"
        assert link.query_params == {"tab": "logs"}

    def test_notifications(self) -> None:
        link = parse_deep_link("acp://notifications")
        assert link.is_valid is True
        assert link.path == "/notifications"

    def test_settings(self) -> None:
        link = parse_deep_link("acp://settings")
        assert link.is_valid is True
        assert link.path == "/settings"

    def test_settings_subsection(self) -> None:
        link = parse_deep_link("acp://settings/appearance")
        assert link.is_valid is True
        assert link.path == "/settings/appearance"

    def test_universal_link(self) -> None:
        link = parse_deep_link("https://ambient-code.redhat.com/sessions/abc123")

        assert link.is_valid is True
        assert link.scheme == "https"
        assert link.hostname == "ambient-code.redhat.com"
        assert link.path == "/sessions/abc123"

    def test_universal_link_scheme_and_host_case_insensitive(self) -> None:
        link = parse_deep_link("HTTPS://Ambient-Code.RedHat.com/chat")

        assert link.is_valid is True
        assert link.scheme == "https"
        assert link.hostname == "ambient-code.redhat.com"

    def test_triple_slash_custom_scheme(self) -> None:
        link = parse_deep_link("acp:///sessions/abc123")
        assert link.is_valid is True
        assert link.path == "/sessions/abc123"

    def test_bare_path(self) -> None:
        link = parse_deep_link("sessions/abc123")
        assert link.is_valid is True
        assert link.scheme == ""
        assert link.path == "/sessions/abc123"

    def test_session_create_is_not_a_session_id(self) -> None:
        link = parse_deep_link("acp://sessions/new")
        assert link.is_valid is True
        assert link.path == "/sessions/new"

    def test_oauth_callback(self) -> None:
        link = parse_deep_link("acp://auth/callback?code=xyz&state=abc")
        assert link.is_valid is True
        assert link.query_params == {"code": "xyz", "state": "abc"}

    def test_descriptor_is_frozen(self) -> None:
        link = parse_deep_link("acp://chat")
        with pytest.raises(AttributeError):
            link.path = "/other"  # type: ignore[misc]


class TestNormalization:
    def test_trailing_slash(self) -> None:
        link = parse_deep_link("acp://sessions/abc123/")
        assert link.is_valid is True
        assert link.path == "/sessions/abc123"

    def test_duplicate_slashes(self) -> None:
        link = parse_deep_link("acp://sessions//abc123")
        assert link.is_valid is True
        assert link.path == "/sessions/abc123"

    def test_duplicate_and_trailing_slashes(self) -> None:
        assert parse_deep_link("acp://sessions//abc123/").path == "/sessions/abc123"

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("/sessions/abc123", "/sessions/abc123"),
            ("sessions/abc123", "/sessions/abc123"),
            ("//sessions///abc123//", "/sessions/abc123"),
            ("/settings/", "/settings"),
            ("/", "/"),
            ("///", "/"),
            ("", "/"),
        ],
    )
    def test_normalize_path(self, raw: str, expected: str) -> None:
        assert normalize_path(raw) == expected

    @pytest.mark.parametrize(
        "raw",
        ["/sessions//abc/", "a//b", "/", "//x///y//z/", "/chat"],
    )
    def test_normalize_is_idempotent(self, raw: str) -> None:
        once = normalize_path(raw)
        assert normalize_path(once) == once


class TestQueryParams:
    def test_multiple_params(self) -> None:
        link = parse_deep_link("acp://sessions/abc123?tab=logs&filter=error")

        assert link.is_valid is True
        assert link.query_params == {"tab": "logs", "filter": "error"}

    def test_percent_decoding(self) -> None:
        link = parse_deep_link("acp://sessions/new?repo=owner%2Frepo")

        assert link.is_valid is True
        assert link.query_params["repo"] == "owner/repo"

    def test_last_value_wins(self) -> None:
        link = parse_deep_link("acp://sessions?filter=running&filter=failed")
        assert link.query_params == {"filter": "failed"}

    def test_blank_values_kept(self) -> None:
        assert parse_query("filter=&tab=logs") == {"filter": "", "tab": "logs"}

    def test_query_params_are_read_only(self) -> None:
        link = parse_deep_link("acp://sessions/abc123?tab=logs")

        with pytest.raises(TypeError):
            link.query_params["tab"] = "changed"  # type: ignore[index]
        assert link.query_params == {"tab": "logs"}

    def test_descriptor_copies_caller_mapping(self) -> None:
        params = {"tab": "logs"}
        link = ParsedDeepLink(scheme="acp", path="/sessions/a", query_params=params, is_valid=True)
        params["tab"] = "changed"

        assert link.query_params == {"tab": "logs"}
        with pytest.raises(TypeError):
            link.query_params["tab"] = "x"  # type: ignore[index]


class TestInvalidLinks:
    def test_empty_path(self) -> None:
        link = parse_deep_link("acp://")

        assert link.is_valid is False
        assert link.error_message == MISSING_PATH
        assert "missing path" in link.error_message

    @pytest.mark.parametrize(
        "url",
        ["acp:///", "https://ambient-code.redhat.com", "https://ambient-code.redhat.com/"],
    )
    def test_other_empty_paths(self, url: str) -> None:
        link = parse_deep_link(url)
        assert link.is_valid is False
        assert link.error_message is not None
        assert "missing path" in link.error_message

    def test_unsupported_route(self) -> None:
        link = parse_deep_link("acp://unknown/path")

        assert link.is_valid is False
        assert link.path == "/unknown/path"
        assert link.error_message == "Unsupported route: /unknown/path"

    def test_unsupported_route_keeps_query(self) -> None:
        link = parse_deep_link("acp://unknown?x=1")
        assert link.query_params == {"x": "1"}

    def test_session_id_with_spaces(self) -> None:
        link = parse_deep_link("acp://sessions/invalid session id with spaces")
        assert link.is_valid is False

    def test_unknown_settings_section(self) -> None:
        link = parse_deep_link("acp://settings/privacy")
        assert link.is_valid is False
        assert link.error_message is not None
        assert "Unsupported route" in link.error_message

    def test_malformed_url_does_not_raise(self) -> None:
        link = parse_deep_link("https://[::1/sessions")

        assert link.is_valid is False
        assert link.path == ""
        assert link.query_params == {}
        assert link.error_message is not None
        assert link.error_message.startswith("Failed to parse URL:")

    def test_non_string_does_not_raise(self) -> None:
        link = parse_deep_link(None)  # type: ignore[arg-type]
        assert link.is_valid is False
        assert link.error_message is not None
        assert link.error_message.startswith("Failed to parse URL:")


class TestParamValidation:
    @staticmethod
    def _table() -> RouteTable:
        return RouteTable([
            RouteDefinition(
                LiteralPattern("/chat"),
                HandlerName.CHAT,
                validate_params=lambda params: "session" in params,
            ),
        ])

    def test_validator_rejects(self) -> None:
        link = parse_deep_link("acp://chat", table=self._table())

        assert link.is_valid is False
        assert link.error_message == INVALID_PARAMS
        assert link.path == "/chat"

    def test_validator_accepts(self) -> None:
        link = parse_deep_link("acp://chat?session=abc", table=self._table())
        assert link.is_valid is True

    def test_validator_sees_captured_params(self) -> None:
        seen: list[dict[str, str]] = []

        def record(params):
            seen.append(dict(params))
            return True

        table = RouteTable([
            RouteDefinition(CapturePattern("/sessions", "id"), HandlerName.SESSION_DETAIL, validate_params=record),
        ])
        parse_deep_link("acp://sessions/abc?id=other&tab=logs", table=table)

        assert seen == [{"id": "abc", "tab": "logs"}]


class TestParsedDeepLinkDefaults:
    def test_defaults(self) -> None:
        link = ParsedDeepLink(scheme="acp", path="/chat")
        assert link.is_valid is False
        assert link.query_params == {}
        assert link.hostname is None
        assert link.error_message is None
