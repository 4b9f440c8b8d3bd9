"""Broadcasters for pub/sub messages."""

from trainfresh.adapters.web.broadcasters.session_broadcaster import SessionBroadcaster

__all__ = ["SessionBroadcaster"]
