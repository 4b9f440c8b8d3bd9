"""Static file server for the gated site."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from starlette.responses import FileResponse, Response
from starlette.routing import Mount, Route
from starlette.staticfiles import StaticFiles

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, MutableMapping

    from pyview import PyView

logger = logging.getLogger(__name__)

CACHE_CONTROL = b"public, max-age=60, must-revalidate"


class StaticFileCacheApp:
    """ASGI app wrapper that adds cache headers to static file responses."""

    def __init__(self, static_files: StaticFiles) -> None:
        """Initialize with a StaticFiles instance."""
        self.static_files = static_files

    async def __call__(
        self,
        scope: dict[str, Any],
        receive: Callable[[], Awaitable[dict[str, Any]]],
        send: Callable[[MutableMapping[str, Any]], Awaitable[None]],
    ) -> None:
        """Handle ASGI request and add cache headers."""

        async def send_with_cache_headers(message: MutableMapping[str, Any]) -> None:
            if message["type"] == "http.response.start":
                headers = list(message.get("headers", []))
                if not any(header[0].lower() == b"cache-control" for header in headers):
                    headers.append((b"cache-control", CACHE_CONTROL))
                    message["headers"] = headers
            await send(message)

        await self.static_files(scope, receive, send_with_cache_headers)


def find_static_dir(configured: str | None) -> Path | None:
    """Resolve the directory to serve.

    An explicitly configured directory wins. Otherwise ``static/`` in the
    working directory is tried, then ``static/`` in the project root.
    """
    if configured:
        candidates = [Path(configured)]
    else:
        candidates = [
            Path.cwd() / "static",
            Path(__file__).parent.parent.parent.parent.parent.parent / "static",
        ]
    for path in candidates:
        if path.is_dir():
            return path
    logger.warning(f"Static directory not found at any of: {[str(p) for p in candidates]}")
    return None


class StaticFileServer:
    """Serves the site's static files and pyview's client script."""

    def __init__(self, static_dir: str | None = None) -> None:
        self.static_dir = find_static_dir(static_dir)

    def register_routes(self, app: PyView) -> None:
        """Register static file routes with the PyView app.

        The catch-all mount must be registered last so LiveView routes match
        first.

        Args:
            app: The PyView application instance.
        """
        app.routes.insert(0, Route("/static/assets/app.js", self._serve_app_js))

        if self.static_dir is None:
            return
        cached_static = StaticFileCacheApp(StaticFiles(directory=str(self.static_dir)))
        app.routes.append(Mount("/", app=cached_static, name="site"))
        logger.info(f"Serving static files from {self.static_dir} with 1-minute cache headers")

    async def _serve_app_js(self, _request: Any) -> Response:
        """Serve pyview's client JavaScript."""
        import pyview

        pyview_path = Path(pyview.__file__).parent
        candidates = [
            pyview_path / "static" / "assets" / "app.js",
            pyview_path / "assets" / "js" / "app.js",
        ]
        for client_js_path in candidates:
            if client_js_path.exists():
                response = FileResponse(str(client_js_path), media_type="application/javascript")
                response.headers["Cache-Control"] = CACHE_CONTROL.decode()
                return response
        logger.error(f"Could not find pyview client JS at any of: {[str(p) for p in candidates]}")
        return Response(
            content="// PyView client not found",
            media_type="application/javascript",
            status_code=404,
        )
