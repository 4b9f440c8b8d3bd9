"""LiveView for the passenger app: train entry and live toilet status board."""

from __future__ import annotations

import logging
import os
import uuid
from collections.abc import Callable
from datetime import datetime
from typing import Any
from zoneinfo import ZoneInfo

from pyview import LiveView, LiveViewSocket, is_connected
from pyview.events import InfoEvent
from pyview.template.live_template import LiveRender, LiveTemplate
from pyview.vendor import ibis

from trainfresh.adapters.config import AppConfig
from trainfresh.adapters.web.broadcasters import SessionBroadcaster
from trainfresh.adapters.web.builders import BoardViewBuilder
from trainfresh.adapters.web.timers import (
    CLEAR_NOTIFICATION_MESSAGE,
    CLOCK_MESSAGE,
    COUNTDOWN_MESSAGE,
    SessionTimers,
)
from trainfresh.application.services.status_simulator import StatusSimulator
from trainfresh.domain.contracts import SessionBroadcasterProtocol, SessionTimersProtocol
from trainfresh.domain.models import Screen, SimulatorState

logger = logging.getLogger(__name__)

TEMPLATE_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), "status.html")


def payload_value(payload: Any, key: str) -> str:
    """Read a form or phx-value field from an event payload.

    Form payloads arrive as ``{name: [value, ...]}``, phx-value payloads as
    ``{name: value}``.
    """
    if not isinstance(payload, dict):
        return ""
    value = payload.get(key, "")
    if isinstance(value, list):
        return str(value[0]) if value else ""
    return str(value)


class StatusLiveView(LiveView[SimulatorState]):
    """Passenger app: train number entry and the live toilet status board."""

    def __init__(
        self,
        simulator: StatusSimulator,
        config: AppConfig,
        broadcaster: SessionBroadcasterProtocol | None = None,
        view_builder: BoardViewBuilder | None = None,
        now: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize the LiveView.

        Args:
            simulator: State transitions of the app.
            config: Application configuration.
            broadcaster: Delivers timer messages to the connection.
            view_builder: Maps state to template data.
            now: Current time source for the live clock.
        """
        super().__init__()
        if not isinstance(config, AppConfig):
            raise TypeError("config must be an AppConfig instance")
        self.simulator = simulator
        self.config = config
        self.broadcaster = broadcaster or SessionBroadcaster()
        self.view_builder = view_builder or BoardViewBuilder()
        self._timezone = ZoneInfo(config.timezone)
        self._now = now or (lambda: datetime.now(self._timezone))
        self._timers: dict[str, SessionTimersProtocol] = {}

    def _topic(self, socket: LiveViewSocket[SimulatorState]) -> str:
        topic = getattr(socket, "_simulator_topic", None)
        if not topic:
            topic = f"simulator:{uuid.uuid4()}"
            socket._simulator_topic = topic
        return topic

    def timers_for(self, socket: LiveViewSocket[SimulatorState]) -> SessionTimersProtocol:
        """Timers of the given connection, created on first use."""
        topic = self._topic(socket)
        timers = self._timers.get(topic)
        if timers is None:
            timers = SessionTimers(
                self.broadcaster,
                topic,
                notification_seconds=self.config.notification_seconds,
            )
            self._timers[topic] = timers
        return timers

    def _release(self, socket: LiveViewSocket[SimulatorState]) -> None:
        topic = getattr(socket, "_simulator_topic", None)
        timers = self._timers.pop(topic, None) if topic else None
        if timers is not None:
            timers.stop_all()
            logger.info(f"Stopped timers for {topic}")

    def update_clock(self, state: SimulatorState) -> None:
        """Refresh the displayed time."""
        state.clock_text = self._now().strftime("%H:%M:%S")

    def _on_entered_status(self, socket: LiveViewSocket[SimulatorState]) -> None:
        timers = self.timers_for(socket)
        self.update_clock(socket.context)
        timers.start_clock()
        timers.start_countdown()
        timers.schedule_notification_clear()

    async def mount(self, socket: LiveViewSocket[SimulatorState], _session: dict) -> None:
        """Start every connection on the entry screen."""
        socket.context = self.simulator.new_state()
        if is_connected(socket):
            topic = self._topic(socket)
            try:
                await socket.subscribe(topic)
                logger.debug(f"Subscribed socket to {topic}")
            except Exception as e:
                logger.error(f"Failed to subscribe to topic {topic}: {e}", exc_info=True)

    async def unmount(self, socket: LiveViewSocket[SimulatorState]) -> None:
        """Cancel the connection's timers."""
        self._release(socket)

    async def disconnect(self, socket: LiveViewSocket[SimulatorState]) -> None:
        """Cancel the connection's timers."""
        self._release(socket)

    async def handle_event(
        self, event: str, payload: Any, socket: LiveViewSocket[SimulatorState]
    ) -> None:
        """Handle clicks and form events from the browser."""
        state = socket.context

        if event == "search":
            if self.simulator.submit(state, payload_value(payload, "train_number")):
                self._on_entered_status(socket)
            return

        if event == "typing":
            state.input_value = payload_value(payload, "train_number")
            self.simulator.clear_hint(state)
            return

        if event == "preset":
            if self.simulator.select_preset(state, payload_value(payload, "train")):
                self._on_entered_status(socket)
            return

        if event == "back":
            self.timers_for(socket).stop_all()
            self.simulator.exit_status(state)
            if state.notification:
                self.timers_for(socket).schedule_notification_clear()
            return

        if event == "report":
            self.simulator.report_issue(state)
            self.timers_for(socket).schedule_notification_clear()
            return

        logger.warning(f"Unknown event from client: {event}")

    async def handle_info(
        self, event: str | InfoEvent, socket: LiveViewSocket[SimulatorState]
    ) -> None:
        """Apply timer messages sent to this connection's topic."""
        message = event.payload if isinstance(event, InfoEvent) else event
        state = socket.context

        if message == CLEAR_NOTIFICATION_MESSAGE:
            self.simulator.clear_notification(state)
            return

        if state.screen is not Screen.STATUS:
            return

        if message == CLOCK_MESSAGE:
            self.update_clock(state)
        elif message == COUNTDOWN_MESSAGE:
            if self.simulator.advance_countdown(state):
                self.timers_for(socket).schedule_notification_clear()
        else:
            logger.debug(f"Ignoring message: {message}")

    def build_assigns(self, state: SimulatorState) -> dict[str, Any]:
        """Template variables for the given state."""
        return {
            **self.view_builder.build(state),
            "title": self.config.title,
            "theme": self.config.theme,
            "banner_color": self.config.banner_color,
        }

    async def render(self, assigns: SimulatorState | dict, meta: Any) -> Any:
        """Render the HTML template."""
        state = assigns if isinstance(assigns, SimulatorState) else self.simulator.new_state()
        with open(TEMPLATE_PATH, encoding="utf-8") as f:
            template = ibis.Template(f.read())
        return LiveRender(LiveTemplate(template), self.build_assigns(state), meta)


def create_status_live_view(
    simulator_factory: Callable[[], StatusSimulator],
    config: AppConfig,
) -> type[StatusLiveView]:
    """Create a configured StatusLiveView class.

    PyView's add_live_view expects a class, not an instance, so the
    collaborators are captured in a subclass.

    Args:
        simulator_factory: Builds the simulator (and its random source).
        config: Application configuration.

    Returns:
        A StatusLiveView class that can be registered with PyView.
    """
    captured_factory = simulator_factory
    captured_config = config

    class ConfiguredStatusLiveView(StatusLiveView):
        """Configured LiveView for the passenger app."""

        def __init__(self) -> None:
            super().__init__(captured_factory(), captured_config)

    return ConfiguredStatusLiveView
