"""Helpers for testing the gate routes against a small Starlette app."""

from pathlib import Path

from starlette.applications import Starlette
from starlette.responses import PlainTextResponse
from starlette.routing import Route, WebSocketRoute
from starlette.websockets import WebSocket

from trainfresh.adapters.config import AppConfig
from trainfresh.adapters.web.gate_middleware import AccessGateMiddleware
from trainfresh.adapters.web.gate_routes import GateRoutes
from trainfresh.application.services.access_gate import AccessGate
from trainfresh.domain.errors import QrRenderingError
from trainfresh.domain.models import AccessToken

TEST_TOKEN = "trainfresh2026"
BASE_URL = "http://192.168.1.5:3000"


class FakeQrRenderer:
    """QR renderer that records requests instead of drawing."""

    def __init__(self, fail_with: str | None = None) -> None:
        self.fail_with = fail_with
        self.rendered: list[str] = []

    def to_data_url(self, text: str) -> str:
        if self.fail_with:
            raise QrRenderingError(self.fail_with)
        self.rendered.append(text)
        return "data:image/png;base64,AAAA"

    def to_terminal(self, text: str) -> str:
        if self.fail_with:
            raise QrRenderingError(self.fail_with)
        return "##\n##"

    def save_png(self, text: str, path: Path) -> Path:
        if self.fail_with:
            raise QrRenderingError(self.fail_with)
        path.write_bytes(b"png")
        return path


async def _protected_home(_request) -> PlainTextResponse:
    return PlainTextResponse("passenger app")


async def _protected_socket(websocket: WebSocket) -> None:
    await websocket.accept()
    await websocket.send_text("hello")
    await websocket.close()


def build_gated_app(
    qr_renderer: FakeQrRenderer | None = None,
    config: AppConfig | None = None,
) -> AccessGateMiddleware:
    """A small Starlette app behind the real gate middleware and routes."""
    config = config or AppConfig(_env_file=None, access_token=TEST_TOKEN)
    gate = AccessGate(AccessToken(config.access_token))
    gate_routes = GateRoutes(gate, qr_renderer or FakeQrRenderer(), config, BASE_URL)
    app = Starlette(
        routes=[
            Route("/", _protected_home),
            WebSocketRoute("/live/websocket", _protected_socket),
            *gate_routes.routes(),
        ]
    )
    return AccessGateMiddleware(app, gate, app_title=config.title)


