"""Static page and asset endpoints."""

from __future__ import annotations

from pathlib import Path

import structlog
from starlette.requests import Request
from starlette.responses import FileResponse, Response

from quote_server.errors import RouteNotFoundError
from quote_server.middleware.pipeline import RequestContext
from quote_server.router import Handler, RouteTable

logger = structlog.get_logger()

ASSETS_PREFIX = "/assets/"

# URL path -> file name under the site root
PAGES: dict[str, str] = {
    "/": "index.html",
    "/about-us.html": "about-us.html",
    "/success.html": "success.html",
}


def _page_handler(file_path: Path) -> Handler:
    async def handler(request: Request, context: RequestContext) -> Response:
        if not file_path.is_file():
            logger.warning("page_file_missing", path=str(file_path))
            raise RouteNotFoundError()
        return FileResponse(file_path)

    return handler


def _assets_handler(assets_dir: Path) -> Handler:
    root = assets_dir.resolve()

    async def handler(request: Request, context: RequestContext) -> Response:
        relative = request.url.path[len(ASSETS_PREFIX):]
        candidate = (root / relative).resolve()
        # Reject anything that escapes the assets directory
        if not candidate.is_relative_to(root) or not candidate.is_file():
            raise RouteNotFoundError()
        return FileResponse(candidate)

    return handler


def register(table: RouteTable, site_root: str | Path) -> None:
    """Register page routes and the assets mount for ``site_root``."""
    site = Path(site_root)
    for path, file_name in PAGES.items():
        table.add("GET", path, _page_handler(site / file_name))
    table.mount(ASSETS_PREFIX, _assets_handler(site / "assets"))
