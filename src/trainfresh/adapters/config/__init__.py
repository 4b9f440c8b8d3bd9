"""Configuration adapters."""

from trainfresh.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]
