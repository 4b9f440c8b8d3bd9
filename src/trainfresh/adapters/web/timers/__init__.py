"""Per-connection timers."""

from trainfresh.adapters.web.timers.session_timers import (
    CLEAR_NOTIFICATION_MESSAGE,
    CLOCK_MESSAGE,
    COUNTDOWN_MESSAGE,
    SessionTimers,
)

__all__ = [
    "CLEAR_NOTIFICATION_MESSAGE",
    "CLOCK_MESSAGE",
    "COUNTDOWN_MESSAGE",
    "SessionTimers",
]
