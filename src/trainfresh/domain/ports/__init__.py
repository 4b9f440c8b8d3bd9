"""Ports (interfaces) for the ports-and-adapters architecture."""

from trainfresh.domain.ports.display_adapter import DisplayAdapter

__all__ = ["DisplayAdapter"]
