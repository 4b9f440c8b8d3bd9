"""Passenger app LiveView."""

from trainfresh.adapters.web.views.status.status import StatusLiveView, create_status_live_view

__all__ = ["StatusLiveView", "create_status_live_view"]
