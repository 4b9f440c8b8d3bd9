"""12-factor configuration adapter using environment variables."""

import secrets
from datetime import UTC, datetime, timedelta
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from trainfresh.domain.models import AccessToken


def _generate_access_token() -> str:
    return secrets.token_urlsafe(12)


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Server configuration
    host: str = Field(default="0.0.0.0", description="Host to bind the server to")
    port: int = Field(default=3000, description="Port to bind the server to")
    public_host: str | None = Field(
        default=None,
        description="Host name or IP put into the QR link. Auto-detected LAN IPv4 if unset",
    )

    # Access gate
    access_token: str = Field(
        default_factory=_generate_access_token,
        description="Shared secret in the QR link. Generated per run if unset",
    )
    access_token_ttl_seconds: int | None = Field(
        default=None,
        description="Optional lifetime of the access token; unset means process lifetime",
    )
    session_max_age_seconds: int = Field(
        default=3600, description="Max-Age of the session cookie in seconds"
    )
    qr_admin_token: str | None = Field(
        default=None,
        description="If set, /qr requires this value in X-Admin-Token or ?token=",
    )
    qr_png_path: str | None = Field(
        default="qr.png",
        description="Where to save the printable QR code on startup (empty to skip)",
    )

    # Static files
    static_dir: str | None = Field(
        default=None,
        description="Directory served behind the gate. Auto-discovered if unset",
    )

    # Simulator
    refresh_interval_seconds: int = Field(
        default=30, description="Seconds between simulated sensor refreshes"
    )
    notification_seconds: float = Field(
        default=3.0, description="How long transient notifications stay visible"
    )
    timezone: str = Field(
        default="Asia/Kolkata",
        description="Timezone for the live clock (IANA timezone name)",
    )

    # Display configuration
    title: str = Field(default="TrainFresh", description="Page title displayed in browser tab")
    theme: str = Field(
        default="dark",
        description="UI theme: 'light', 'dark', or 'auto' (follows system preference)",
    )
    banner_color: str = Field(
        default="#3B82F6",
        description="Banner/header accent color (hex color code)",
    )

    @field_validator("access_token")
    @classmethod
    def validate_access_token(cls, v: str) -> str:
        """Reject tokens that cannot live in a URL path segment or cookie."""
        v = v.strip()
        if not v:
            raise ValueError("access_token must not be empty")
        if any(c in v for c in "/;= \t"):
            raise ValueError("access_token must not contain '/', ';', '=' or whitespace")
        return v

    @field_validator(
        "port",
        "session_max_age_seconds",
        "refresh_interval_seconds",
    )
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """Intervals and ports must be positive."""
        if v <= 0:
            raise ValueError("value must be positive")
        return v

    @field_validator("notification_seconds")
    @classmethod
    def validate_notification_seconds(cls, v: float) -> float:
        """Notification duration must be positive."""
        if v <= 0:
            raise ValueError("notification_seconds must be positive")
        return v

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Timezone must be a known IANA name."""
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"unknown timezone: {v}") from e
        return v

    @field_validator("theme")
    @classmethod
    def validate_theme(cls, v: str) -> str:
        """Validate theme is either 'light', 'dark', or 'auto'."""
        if v.lower() not in ("light", "dark", "auto"):
            raise ValueError("theme must be either 'light', 'dark', or 'auto'")
        return v.lower()

    def build_access_token(self, now: datetime | None = None) -> AccessToken:
        """Create the immutable access token for this process."""
        expires_at = None
        if self.access_token_ttl_seconds:
            issued_at = now or datetime.now(UTC)
            expires_at = issued_at + timedelta(seconds=self.access_token_ttl_seconds)
        return AccessToken(value=self.access_token, expires_at=expires_at)

    def base_url(self, detected_host: str) -> str:
        """Base URL passengers reach the server on."""
        return f"http://{self.public_host or detected_host}:{self.port}"
