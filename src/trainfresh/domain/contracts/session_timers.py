"""Protocol for the repeating timers of a simulator connection."""

from typing import Protocol


class SessionTimersProtocol(Protocol):
    """Clock, countdown and notification timers for one connection."""

    def start_clock(self) -> None:
        """Start the 1-second clock timer (no-op if running)."""
        ...

    def start_countdown(self) -> None:
        """Start the 1-second countdown timer, cancelling any previous one."""
        ...

    def schedule_notification_clear(self) -> None:
        """Clear the transient notification after a delay."""
        ...

    def stop_all(self) -> None:
        """Cancel every running timer."""
        ...

    @property
    def running(self) -> bool:
        """True while any timer is active."""
        ...
