"""ASGI middleware that keeps everything except the public routes behind the gate."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Any

from starlette.responses import HTMLResponse
from starlette.websockets import WebSocketClose

from trainfresh.application.services.access_gate import AccessGate

from .pages import access_denied_page

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, MutableMapping

logger = logging.getLogger(__name__)

ACCESS_PATH_PATTERN = re.compile(r"/access/[^/]+")
PUBLIC_PATHS = ("/qr", "/healthz")

# RFC 6455 policy violation
WS_POLICY_VIOLATION = 1008


def is_public_path(path: str) -> bool:
    """True for routes that must be reachable without a session.

    Only exact gate routes qualify. Paths with dot segments never do.
    """
    segments = path.split("/")
    if "." in segments or ".." in segments:
        return False
    return path in PUBLIC_PATHS or ACCESS_PATH_PATTERN.fullmatch(path) is not None


def _cookie_header(scope: dict[str, Any]) -> str | None:
    values = [
        value.decode("latin-1")
        for name, value in scope.get("headers") or []
        if name.lower() == b"cookie"
    ]
    if not values:
        return None
    return "; ".join(values)


class AccessGateMiddleware:
    """Checks the session cookie on every HTTP request and websocket handshake."""

    def __init__(
        self,
        app: Callable[..., Awaitable[None]],
        gate: AccessGate,
        app_title: str = "TrainFresh",
    ) -> None:
        """Initialize the middleware.

        Args:
            app: The ASGI application to wrap.
            gate: Access gate deciding on each request.
            app_title: Title used on the denial page.
        """
        self.app = app
        self.gate = gate
        self.denied_html = access_denied_page(app_title)

    async def __call__(
        self,
        scope: dict[str, Any],
        receive: Callable[[], Awaitable[dict[str, Any]]],
        send: Callable[[MutableMapping[str, Any]], Awaitable[None]],
    ) -> None:
        """Handle an ASGI connection."""
        if scope["type"] not in ("http", "websocket") or is_public_path(scope.get("path", "")):
            await self.app(scope, receive, send)
            return

        result = self.gate.authorize(_cookie_header(scope))
        if result.allowed:
            await self.app(scope, receive, send)
            return

        logger.info(f"Denied {scope['type']} request to {scope.get('path')}: {result.reason}")
        if scope["type"] == "websocket":
            await WebSocketClose(code=WS_POLICY_VIOLATION)(scope, receive, send)
            return
        response = HTMLResponse(self.denied_html, status_code=result.status_code)
        await response(scope, receive, send)
