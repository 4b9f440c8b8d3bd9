"""QR code adapters."""

from trainfresh.adapters.qr.qrcode_renderer import QrCodeRenderer

__all__ = ["QrCodeRenderer"]
