"""Behavior-focused tests for the access gate service."""

from datetime import UTC, datetime, timedelta

import pytest

from trainfresh.application.services.access_gate import (
    INVALID_CODE_MESSAGE,
    AccessGate,
    parse_cookies,
)
from trainfresh.domain.models import SESSION_COOKIE_NAME, AccessToken

TOKEN = "trainfresh2026"


def _gate(**kwargs) -> AccessGate:
    return AccessGate(AccessToken(TOKEN), **kwargs)


class TestParseCookies:
    """Tests for Cookie header parsing."""

    def test_when_value_contains_equals_then_it_is_preserved(self) -> None:
        """Given a value with '=', when parsing, then only the first '=' splits."""
        assert parse_cookies("a=1; b=2=3") == {"a": "1", "b": "2=3"}

    def test_when_header_missing_then_returns_empty(self) -> None:
        """Given no header, when parsing, then no cookies are returned."""
        assert parse_cookies(None) == {}
        assert parse_cookies("") == {}

    def test_when_pairs_have_whitespace_then_trims_names_and_values(self) -> None:
        """Given padded pairs, when parsing, then names and values are trimmed."""
        assert parse_cookies("  tf_session = abc ;x=y") == {"tf_session": "abc", "x": "y"}

    def test_when_pair_has_no_name_then_it_is_skipped(self) -> None:
        """Given malformed fragments, when parsing, then they are ignored."""
        assert parse_cookies(";;=orphan; ok=1") == {"ok": "1"}

    def test_when_pair_has_no_equals_then_value_is_empty(self) -> None:
        """Given a bare name, when parsing, then it maps to an empty value."""
        assert parse_cookies("flag; a=1") == {"flag": "", "a": "1"}


class TestIssueSession:
    """Tests for exchanging the QR token for a session."""

    def test_when_token_matches_then_grants_cookie_and_redirect(self) -> None:
        """Given the access token, when issuing, then a cookie directive and redirect result."""
        result = _gate().issue_session(TOKEN)

        assert result.granted is True
        assert result.status_code == 302
        assert result.redirect_to == "/"
        assert result.cookie is not None
        assert result.cookie.name == SESSION_COOKIE_NAME
        assert result.cookie.value == TOKEN
        assert result.cookie.max_age == 3600
        assert result.cookie.path == "/"
        assert result.cookie.http_only is True

    @pytest.mark.parametrize("candidate", ["", "wrong", TOKEN.upper(), TOKEN + "x", None])
    def test_when_token_differs_then_denies(self, candidate: str | None) -> None:
        """Given any other token, when issuing, then 403 with invalid code message."""
        result = _gate().issue_session(candidate)

        assert result.granted is False
        assert result.status_code == 403
        assert result.cookie is None
        assert result.message == INVALID_CODE_MESSAGE

    def test_when_token_reused_then_still_granted(self) -> None:
        """Given a token already used, when issuing again, then it is still accepted."""
        gate = _gate()

        assert gate.issue_session(TOKEN).granted
        assert gate.issue_session(TOKEN).granted

    def test_cookie_header_value_has_all_attributes(self) -> None:
        """Given a granted session, when rendering the cookie, then all attributes are present."""
        cookie = _gate().issue_session(TOKEN).cookie

        assert cookie is not None
        assert cookie.header_value() == f"tf_session={TOKEN}; HttpOnly; Max-Age=3600; Path=/"

    def test_when_custom_max_age_then_cookie_uses_it(self) -> None:
        """Given a configured session lifetime, when issuing, then the cookie carries it."""
        cookie = _gate(session_max_age_seconds=60).issue_session(TOKEN).cookie

        assert cookie is not None
        assert cookie.max_age == 60

    def test_when_token_expired_then_denies(self) -> None:
        """Given a token past its expiry, when issuing, then access is denied."""
        now = datetime(2026, 1, 1, tzinfo=UTC)
        token = AccessToken(TOKEN, expires_at=now - timedelta(seconds=1))
        gate = AccessGate(token, clock=lambda: now)

        assert gate.issue_session(TOKEN).granted is False


class TestAuthorize:
    """Tests for checking the session cookie."""

    def test_when_session_cookie_matches_then_allows(self) -> None:
        """Given tf_session equal to the token, when authorizing, then allowed."""
        result = _gate().authorize(f"tf_session={TOKEN}")

        assert result.allowed is True

    def test_when_other_cookies_present_then_still_allows(self) -> None:
        """Given several cookies, when authorizing, then the session cookie is found."""
        assert _gate().authorize(f"theme=dark; tf_session={TOKEN}; x=1=2").allowed

    @pytest.mark.parametrize(
        "header",
        [
            None,
            "",
            "garbage",
            ";;;",
            f"other={TOKEN}",
            "tf_session=wrong",
            f"tf_session={TOKEN}x",
            "tf_session=",
        ],
    )
    def test_when_session_cookie_missing_or_wrong_then_denies(self, header: str | None) -> None:
        """Given no valid credential, when authorizing, then denied with 403."""
        result = _gate().authorize(header)

        assert result.allowed is False
        assert result.status_code == 403

    def test_when_token_expired_then_existing_cookie_is_denied(self) -> None:
        """Given an expired token, when authorizing its cookie, then denied."""
        now = datetime(2026, 1, 1, tzinfo=UTC)
        token = AccessToken(TOKEN, expires_at=now)
        gate = AccessGate(token, clock=lambda: now)

        assert gate.authorize(f"tf_session={TOKEN}").allowed is False


def test_access_url_joins_base_url_and_token() -> None:
    """Given a base URL, when building the access URL, then the token path is appended."""
    gate = _gate()

    assert gate.access_url("http://192.168.1.5:3000") == f"http://192.168.1.5:3000/access/{TOKEN}"
    assert gate.access_url("http://host:3000/") == f"http://host:3000/access/{TOKEN}"
