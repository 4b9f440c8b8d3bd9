"""QR code rendering with the ``qrcode`` library."""

from __future__ import annotations

import base64
import io
import logging
from pathlib import Path

import qrcode
from qrcode.constants import ERROR_CORRECT_M

from trainfresh.domain.contracts.qr_renderer import QrRendererProtocol
from trainfresh.domain.errors import QrRenderingError

logger = logging.getLogger(__name__)


class QrCodeRenderer(QrRendererProtocol):
    """Renders QR codes as data URLs, terminal art and printable PNG files."""

    def __init__(
        self,
        box_size: int = 10,
        border: int = 2,
        dark_color: str = "#ffffff",
        light_color: str = "#07091a",
    ) -> None:
        """Initialize the renderer.

        Args:
            box_size: Pixels per QR module in the screen rendering.
            border: Quiet zone width in modules.
            dark_color: Module color for the on-screen image.
            light_color: Background color for the on-screen image.
        """
        self.box_size = box_size
        self.border = border
        self.dark_color = dark_color
        self.light_color = light_color

    def _build(self, text: str, border: int) -> qrcode.QRCode:
        qr = qrcode.QRCode(
            error_correction=ERROR_CORRECT_M,
            box_size=self.box_size,
            border=border,
        )
        qr.add_data(text)
        qr.make(fit=True)
        return qr

    def to_data_url(self, text: str) -> str:
        """Render a PNG for the admin screen and encode it as a data URL."""
        try:
            qr = self._build(text, self.border)
            image = qr.make_image(fill_color=self.dark_color, back_color=self.light_color)
            buffer = io.BytesIO()
            image.save(buffer, format="PNG")
        except Exception as e:
            raise QrRenderingError(str(e)) from e
        encoded = base64.b64encode(buffer.getvalue()).decode("ascii")
        return f"data:image/png;base64,{encoded}"

    def to_terminal(self, text: str) -> str:
        """Render the QR code as half-block terminal art."""
        try:
            qr = self._build(text, 1)
            out = io.StringIO()
            qr.print_ascii(out=out, invert=True)
        except Exception as e:
            raise QrRenderingError(str(e)) from e
        return out.getvalue()

    def save_png(self, text: str, path: Path) -> Path:
        """Save a black-on-white PNG suitable for printing."""
        try:
            qr = self._build(text, 3)
            image = qr.make_image(fill_color="black", back_color="white")
            image.save(str(path))
        except Exception as e:
            raise QrRenderingError(str(e)) from e
        logger.info(f"Saved QR code to {path}")
        return path
