"""Results produced by the access gate."""

from dataclasses import dataclass

SESSION_COOKIE_NAME = "tf_session"


@dataclass(frozen=True)
class SessionCookie:
    """Directive to set the session cookie on the response."""

    name: str
    value: str
    max_age: int
    path: str = "/"
    http_only: bool = True

    def header_value(self) -> str:
        """Render the cookie as a Set-Cookie header value."""
        parts = [f"{self.name}={self.value}"]
        if self.http_only:
            parts.append("HttpOnly")
        parts.append(f"Max-Age={self.max_age}")
        parts.append(f"Path={self.path}")
        return "; ".join(parts)


@dataclass(frozen=True)
class SessionResult:
    """Outcome of presenting a token on the access link."""

    granted: bool
    status_code: int
    cookie: SessionCookie | None = None
    redirect_to: str | None = None
    message: str | None = None


@dataclass(frozen=True)
class AuthorizationResult:
    """Outcome of checking a request's session credential."""

    allowed: bool
    status_code: int = 200
    reason: str | None = None
