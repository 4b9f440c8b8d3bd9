"""Access token domain model."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class AccessToken:
    """Shared secret carried by the QR link.

    The token is injected at startup and never changes for the lifetime of
    the process. ``expires_at`` is optional; ``None`` means the token is valid
    until the process exits.
    """

    value: str
    expires_at: datetime | None = None

    def is_expired(self, now: datetime) -> bool:
        """Return True if the token has passed its expiry."""
        return self.expires_at is not None and now >= self.expires_at

    def matches(self, candidate: str | None) -> bool:
        """Exact comparison against a presented credential."""
        return candidate is not None and candidate == self.value
