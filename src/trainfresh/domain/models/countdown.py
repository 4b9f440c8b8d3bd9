"""Countdown domain model."""

from dataclasses import dataclass

DEFAULT_REFRESH_SECONDS = 30


@dataclass
class Countdown:
    """Seconds remaining until the next simulated sensor refresh."""

    period: int = DEFAULT_REFRESH_SECONDS
    remaining: int = DEFAULT_REFRESH_SECONDS

    def reset(self) -> None:
        """Start a fresh cycle."""
        self.remaining = self.period

    def step(self) -> bool:
        """Count one second down.

        Returns:
            True if the cycle expired. The counter is reset in that case.
        """
        self.remaining -= 1
        if self.remaining <= 0:
            self.reset()
            return True
        return False
