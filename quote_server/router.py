"""Static route table: exact (method, path) lookups plus prefix mounts."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

import structlog
from starlette.requests import Request
from starlette.responses import Response

from quote_server.errors import RouteNotFoundError
from quote_server.middleware.pipeline import RequestContext

logger = structlog.get_logger()

Handler = Callable[[Request, RequestContext], Awaitable[Response]]


@dataclass(frozen=True)
class Route:
    method: str
    path: str
    handler: Handler


class RouteTable:
    """Map (method, path) to a handler. HEAD falls back to the GET route.

    Unmatched requests raise RouteNotFoundError, which the error stage turns
    into the fixed 404 body.
    """

    def __init__(self) -> None:
        self._routes: dict[tuple[str, str], Route] = {}
        self._mounts: list[tuple[str, Handler]] = []

    def add(self, method: str, path: str, handler: Handler) -> None:
        key = (method.upper(), path)
        if key in self._routes:
            raise ValueError(f"route already registered: {method} {path}")
        self._routes[key] = Route(method=key[0], path=path, handler=handler)

    def mount(self, prefix: str, handler: Handler) -> None:
        """Serve every GET/HEAD path under ``prefix`` with one handler."""
        self._mounts.append((prefix, handler))

    @property
    def routes(self) -> list[Route]:
        return list(self._routes.values())

    def resolve(self, method: str, path: str) -> Handler | None:
        method = method.upper()
        route = self._routes.get((method, path))
        if route is None and method == "HEAD":
            route = self._routes.get(("GET", path))
        if route is not None:
            return route.handler
        if method in ("GET", "HEAD"):
            for prefix, handler in self._mounts:
                if path.startswith(prefix):
                    return handler
        return None

    async def dispatch(self, request: Request, context: RequestContext) -> Response:
        handler = self.resolve(request.method, request.url.path)
        if handler is None:
            logger.debug("route_not_found", method=request.method, path=request.url.path)
            raise RouteNotFoundError()
        return await handler(request, context)
