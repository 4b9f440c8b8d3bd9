"""Routes of the access gate: the QR link target, the staff QR page and health."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from starlette.responses import HTMLResponse, PlainTextResponse, RedirectResponse, Response
from starlette.routing import Route

from trainfresh.domain.errors import QrRenderingError

from .pages import admin_qr_page, invalid_code_page

if TYPE_CHECKING:
    from starlette.requests import Request

    from trainfresh.adapters.config import AppConfig
    from trainfresh.application.services.access_gate import AccessGate
    from trainfresh.domain.contracts import QrRendererProtocol

logger = logging.getLogger(__name__)


class GateRoutes:
    """Request handlers for the public part of the site."""

    def __init__(
        self,
        gate: AccessGate,
        qr_renderer: QrRendererProtocol,
        config: AppConfig,
        base_url: str,
    ) -> None:
        """Initialize the handlers.

        Args:
            gate: Access gate holding the token.
            qr_renderer: Renderer for the staff QR image.
            config: Application configuration.
            base_url: URL passengers reach the server on, e.g. ``http://192.168.1.5:3000``.
        """
        self.gate = gate
        self.qr_renderer = qr_renderer
        self.config = config
        self.base_url = base_url

    @property
    def access_url(self) -> str:
        """The URL encoded in the QR code."""
        return self.gate.access_url(self.base_url)

    async def access(self, request: Request) -> Response:
        """Exchange the token from the QR link for a session cookie."""
        result = self.gate.issue_session(request.path_params.get("token"))
        if not result.granted or result.cookie is None:
            return HTMLResponse(
                invalid_code_page(result.message or ""), status_code=result.status_code
            )

        response = RedirectResponse(url=result.redirect_to or "/", status_code=result.status_code)
        response.set_cookie(
            key=result.cookie.name,
            value=result.cookie.value,
            max_age=result.cookie.max_age,
            path=result.cookie.path,
            httponly=result.cookie.http_only,
        )
        return response

    def _admin_allowed(self, request: Request) -> bool:
        expected = self.config.qr_admin_token
        if not expected:
            return True
        provided = request.headers.get("X-Admin-Token") or request.query_params.get("token")
        return provided == expected

    async def admin_qr(self, request: Request) -> Response:
        """Staff QR display. Open unless ``qr_admin_token`` is configured."""
        if not self._admin_allowed(request):
            logger.warning("Unauthorized attempt to open the staff QR page")
            return PlainTextResponse("forbidden", status_code=403)

        try:
            qr_data_url = self.qr_renderer.to_data_url(self.access_url)
        except QrRenderingError as e:
            logger.error(f"Error generating QR: {e}")
            return PlainTextResponse(f"Error generating QR: {e}", status_code=500)

        server_address = self.base_url.split("://", 1)[-1]
        return HTMLResponse(
            admin_qr_page(qr_data_url, self.access_url, server_address, self.config.title)
        )

    async def healthz(self, _request: Any) -> Response:
        """Health check endpoint for monitoring."""
        return PlainTextResponse("Ok")

    def routes(self) -> list[Route]:
        """Starlette routes for the gate."""
        return [
            Route("/access/{token}", self.access, methods=["GET"]),
            Route("/qr", self.admin_qr, methods=["GET"]),
            Route("/healthz", self.healthz, methods=["GET"]),
        ]
