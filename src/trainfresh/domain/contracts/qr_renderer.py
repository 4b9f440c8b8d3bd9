"""Protocol for rendering QR codes."""

from pathlib import Path
from typing import Protocol


class QrRendererProtocol(Protocol):
    """Turns text (usually a URL) into a QR image."""

    def to_data_url(self, text: str) -> str:
        """Render a PNG and return it as a ``data:image/png;base64,...`` URL."""
        ...

    def to_terminal(self, text: str) -> str:
        """Render the QR code as terminal art."""
        ...

    def save_png(self, text: str, path: Path) -> Path:
        """Render a printable PNG to ``path`` and return the path."""
        ...
