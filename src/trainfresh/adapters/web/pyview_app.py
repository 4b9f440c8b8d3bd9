"""PyView web adapter serving the gate and the passenger app."""

from __future__ import annotations

import logging
import random
from collections.abc import Callable
from typing import Any

from trainfresh.adapters.config import AppConfig
from trainfresh.application.services.access_gate import AccessGate
from trainfresh.application.services.status_simulator import StatusSimulator
from trainfresh.domain.contracts import QrRendererProtocol
from trainfresh.domain.ports import DisplayAdapter

from .gate_middleware import AccessGateMiddleware
from .gate_routes import GateRoutes
from .servers import StaticFileServer
from .views.status import create_status_live_view

logger = logging.getLogger(__name__)

STYLESHEET_PATH = "/css/trainfresh.css"
FONTS_URL = (
    "https://fonts.googleapis.com/css2?family=Inter:wght@400;600;700"
    "&family=Space+Grotesk:wght@700&display=swap"
)


class PyViewWebAdapter(DisplayAdapter):
    """PyView-based web adapter for the QR-gated passenger app."""

    def __init__(
        self,
        gate: AccessGate,
        qr_renderer: QrRendererProtocol,
        config: AppConfig,
        base_url: str,
        rng_factory: Callable[[], random.Random] = random.Random,
    ) -> None:
        """Initialize the web adapter.

        Args:
            gate: Access gate holding the token for this run.
            qr_renderer: Renderer for the staff QR page.
            config: Application configuration.
            base_url: URL passengers reach the server on.
            rng_factory: Creates the random source of each simulator.
        """
        if not isinstance(config, AppConfig):
            raise TypeError("config must be an AppConfig instance")
        if not isinstance(gate, AccessGate):
            raise TypeError("gate must be an AccessGate instance")

        self.gate = gate
        self.qr_renderer = qr_renderer
        self.config = config
        self.base_url = base_url
        self.rng_factory = rng_factory
        self.gate_routes = GateRoutes(gate, qr_renderer, config, base_url)
        self._server: Any | None = None

    def _new_simulator(self) -> StatusSimulator:
        return StatusSimulator(
            rng=self.rng_factory(),
            refresh_seconds=self.config.refresh_interval_seconds,
        )

    def build_app(self) -> AccessGateMiddleware:
        """Assemble the PyView app and wrap it with the access gate."""
        from markupsafe import Markup
        from pyview import PyView
        from pyview.playground.favicon import generate_favicon_svg
        from pyview.template import defaultRootTemplate
        from starlette.responses import Response
        from starlette.routing import Route

        app = PyView()

        favicon_svg = generate_favicon_svg(
            self.config.title,
            bg_color=self.config.banner_color,
            text_color="#FFFFFF",
        )

        async def favicon_route(_request: Any) -> Response:
            response = Response(content=favicon_svg, media_type="image/svg+xml")
            response.headers["Cache-Control"] = "public, max-age=60, must-revalidate"
            return response

        head = Markup(
            '<link rel="icon" href="/favicon.svg" type="image/svg+xml">'
            f'<link href="{FONTS_URL}" rel="stylesheet"/>'
            f'<link rel="stylesheet" href="{STYLESHEET_PATH}"/>'
        )
        app.rootTemplate = defaultRootTemplate(
            title=self.config.title,
            title_suffix="",
            css=head,
        )

        app.add_live_view("/", create_status_live_view(self._new_simulator, self.config))
        logger.info("Registered passenger app at '/'")

        app.routes.append(Route("/favicon.svg", favicon_route, methods=["GET"]))
        app.routes.extend(self.gate_routes.routes())

        # Catch-all static mount goes last
        StaticFileServer(self.config.static_dir).register_routes(app)

        return AccessGateMiddleware(app, self.gate, app_title=self.config.title)

    async def start(self) -> None:
        """Start the web server."""
        import uvicorn

        config = uvicorn.Config(
            self.build_app(),
            host=self.config.host,
            port=self.config.port,
            log_level="info",
        )
        self._server = uvicorn.Server(config)
        await self._server.serve()

    async def stop(self) -> None:
        """Stop the web server."""
        if self._server:
            self._server.should_exit = True
