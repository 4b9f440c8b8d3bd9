"""Adapters layer - external system integrations."""

from trainfresh.adapters.config import AppConfig
from trainfresh.adapters.qr import QrCodeRenderer

__all__ = ["AppConfig", "QrCodeRenderer"]
