"""Repeating timers of one simulator connection."""

from __future__ import annotations

import asyncio
import logging

from trainfresh.domain.contracts.session_broadcaster import SessionBroadcasterProtocol
from trainfresh.domain.contracts.session_timers import SessionTimersProtocol

logger = logging.getLogger(__name__)

CLOCK_MESSAGE = "clock"
COUNTDOWN_MESSAGE = "countdown"
CLEAR_NOTIFICATION_MESSAGE = "clear_notification"


class SessionTimers(SessionTimersProtocol):
    """Clock, countdown and notification timers as asyncio tasks.

    The timers never touch simulator state. Each firing is a message sent to
    the connection's own topic, and the LiveView applies it in ``handle_info``
    on the event loop.
    """

    def __init__(
        self,
        broadcaster: SessionBroadcasterProtocol,
        topic: str,
        interval_seconds: float = 1.0,
        notification_seconds: float = 3.0,
    ) -> None:
        """Initialize the timers.

        Args:
            broadcaster: Sends messages to the connection.
            topic: The connection's pub/sub topic.
            interval_seconds: Period of the clock and countdown timers.
            notification_seconds: Delay before a notification is cleared.
        """
        self.broadcaster = broadcaster
        self.topic = topic
        self.interval_seconds = interval_seconds
        self.notification_seconds = notification_seconds
        self._clock_task: asyncio.Task | None = None
        self._countdown_task: asyncio.Task | None = None
        self._notification_task: asyncio.Task | None = None

    @property
    def running(self) -> bool:
        """True while the clock or countdown is active."""
        return any(
            task is not None and not task.done()
            for task in (self._clock_task, self._countdown_task)
        )

    async def _repeat(self, message: str) -> None:
        try:
            while True:
                await asyncio.sleep(self.interval_seconds)
                await self.broadcaster.broadcast(self.topic, message)
        except asyncio.CancelledError:
            logger.debug(f"Timer '{message}' cancelled for {self.topic}")
            raise

    async def _once(self, message: str, delay: float) -> None:
        await asyncio.sleep(delay)
        await self.broadcaster.broadcast(self.topic, message)

    @staticmethod
    def _cancel(task: asyncio.Task | None) -> None:
        if task is not None and not task.done():
            task.cancel()

    def start_clock(self) -> None:
        """Start the clock timer unless it is already running."""
        if self._clock_task is not None and not self._clock_task.done():
            return
        self._clock_task = asyncio.create_task(self._repeat(CLOCK_MESSAGE))

    def start_countdown(self) -> None:
        """Start the countdown timer; a previous countdown is cancelled first."""
        self._cancel(self._countdown_task)
        self._countdown_task = asyncio.create_task(self._repeat(COUNTDOWN_MESSAGE))

    def schedule_notification_clear(self) -> None:
        """Clear the notification after the configured delay."""
        self._cancel(self._notification_task)
        self._notification_task = asyncio.create_task(
            self._once(CLEAR_NOTIFICATION_MESSAGE, self.notification_seconds)
        )

    def stop_all(self) -> None:
        """Cancel every timer of this connection."""
        for task in (self._clock_task, self._countdown_task, self._notification_task):
            self._cancel(task)
        self._clock_task = None
        self._countdown_task = None
        self._notification_task = None
