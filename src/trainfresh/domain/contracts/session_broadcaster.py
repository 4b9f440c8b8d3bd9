"""Protocol for pushing messages to a single LiveView connection."""

from typing import Protocol


class SessionBroadcasterProtocol(Protocol):
    """Sends a message to all subscribers of a connection topic."""

    async def broadcast(self, topic: str, message: str) -> None:
        """Send ``message`` on ``topic``.

        Args:
            topic: The pub/sub topic of the connection.
            message: Message name, e.g. ``"clock"`` or ``"countdown"``.
        """
        ...
