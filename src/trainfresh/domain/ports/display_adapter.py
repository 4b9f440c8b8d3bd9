"""Display adapter port."""

from abc import ABC, abstractmethod


class DisplayAdapter(ABC):
    """Port for serving the gated passenger app."""

    @abstractmethod
    async def start(self) -> None:
        """Start the display adapter."""
        ...

    @abstractmethod
    async def stop(self) -> None:
        """Stop the display adapter."""
        ...
