"""Domain contracts (protocols) for adapter implementations."""

from trainfresh.domain.contracts.qr_renderer import QrRendererProtocol
from trainfresh.domain.contracts.session_broadcaster import SessionBroadcasterProtocol
from trainfresh.domain.contracts.session_timers import SessionTimersProtocol

__all__ = [
    "QrRendererProtocol",
    "SessionBroadcasterProtocol",
    "SessionTimersProtocol",
]
