"""Access gate: decides whether a request may see the passenger app."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import UTC, datetime

from trainfresh.domain.models import (
    SESSION_COOKIE_NAME,
    AccessToken,
    AuthorizationResult,
    SessionCookie,
    SessionResult,
)

logger = logging.getLogger(__name__)

DEFAULT_SESSION_MAX_AGE_SECONDS = 3600
INVALID_CODE_MESSAGE = "Invalid or expired QR code."


def parse_cookies(header: str | None) -> dict[str, str]:
    """Parse a Cookie header into a name -> value mapping.

    Pairs are separated by ``;``. The first ``=`` splits name from value, any
    further ``=`` stay part of the value. Pairs without a name are ignored.
    """
    cookies: dict[str, str] = {}
    if not header:
        return cookies
    for pair in header.split(";"):
        name, _, value = pair.strip().partition("=")
        name = name.strip()
        if not name:
            continue
        cookies[name] = value.strip()
    return cookies


class AccessGate:
    """Validates the shared access token and the session cookie it issues."""

    def __init__(
        self,
        token: AccessToken,
        session_max_age_seconds: int = DEFAULT_SESSION_MAX_AGE_SECONDS,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize the gate.

        Args:
            token: The access token for this process.
            session_max_age_seconds: Lifetime of the session cookie.
            clock: Returns the current time; defaults to ``datetime.now(UTC)``.
        """
        self.token = token
        self.session_max_age_seconds = session_max_age_seconds
        self._clock = clock or (lambda: datetime.now(UTC))

    def _token_usable(self, candidate: str | None) -> bool:
        return self.token.matches(candidate) and not self.token.is_expired(self._clock())

    def access_path(self) -> str:
        """Path of the link encoded in the QR code."""
        return f"/access/{self.token.value}"

    def access_url(self, base_url: str) -> str:
        """Full URL of the link encoded in the QR code."""
        return base_url.rstrip("/") + self.access_path()

    def issue_session(self, requested_token: str | None) -> SessionResult:
        """Exchange the token from the QR link for a session cookie."""
        if not self._token_usable(requested_token):
            logger.warning("Rejected access link with invalid or expired token")
            return SessionResult(granted=False, status_code=403, message=INVALID_CODE_MESSAGE)

        cookie = SessionCookie(
            name=SESSION_COOKIE_NAME,
            value=self.token.value,
            max_age=self.session_max_age_seconds,
        )
        logger.info("Issued passenger session cookie")
        return SessionResult(granted=True, status_code=302, cookie=cookie, redirect_to="/")

    def authorize(self, cookie_header: str | None) -> AuthorizationResult:
        """Check the session cookie of an inbound request."""
        credential = parse_cookies(cookie_header).get(SESSION_COOKIE_NAME)
        if credential is None:
            return AuthorizationResult(allowed=False, status_code=403, reason="missing session")
        if not self._token_usable(credential):
            return AuthorizationResult(allowed=False, status_code=403, reason="invalid session")
        return AuthorizationResult(allowed=True)
