"""Ordered middleware chain framework."""

from __future__ import annotations

import abc
import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any, TypeVar
from uuid import uuid4

import structlog
from starlette.requests import Request
from starlette.responses import Response

from quote_server.errors import RouteNotFoundError

logger = structlog.get_logger()

M = TypeVar("M", bound="Middleware")

Dispatcher = Callable[[Request, "RequestContext"], Awaitable[Response]]


@dataclass
class RequestContext:
    """Mutable per-request state passed through the middleware pipeline.

    ``body`` and ``query`` hold the parsed request input once the body parser
    stage has run; route handlers read them from here.
    """

    request_id: str = ""
    client_ip: str = ""
    body: Any = None
    query: dict[str, Any] = field(default_factory=dict)
    extra: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if not self.request_id:
            self.request_id = uuid4().hex[:8]


class Middleware(abc.ABC):
    """Base class for middleware in the pipeline."""

    @property
    def name(self) -> str:
        return self.__class__.__name__

    @abc.abstractmethod
    async def process_request(self, request: Request, context: RequestContext) -> Response | None:
        """Process an incoming request.

        Return None to continue the pipeline, or a Response to short-circuit.
        """
        ...

    async def process_response(self, response: Response, context: RequestContext) -> Response:
        """Process an outgoing response. Override if needed."""
        return response


async def _not_found(request: Request, context: RequestContext) -> Response:
    raise RouteNotFoundError()


class MiddlewarePipeline:
    """Ordered list of middleware around a dispatcher.

    Request handlers run forward, then the dispatcher, then response handlers
    in reverse. Errors from any stage or the dispatcher go to ``error_handler``.
    """

    def __init__(
        self,
        dispatcher: Dispatcher | None = None,
        error_handler: Callable[[Exception, RequestContext], Response] | None = None,
    ) -> None:
        self._middleware: list[Middleware] = []
        self._enabled: dict[str, bool] = {}
        self._dispatcher = dispatcher or _not_found
        self._error_handler = error_handler

    def add(self, middleware: Middleware, enabled: bool = True) -> None:
        """Add a middleware to the end of the pipeline."""
        self._middleware.append(middleware)
        self._enabled[middleware.name] = enabled
        logger.info("middleware_registered", name=middleware.name, enabled=enabled)

    def set_enabled(self, name: str, enabled: bool) -> None:
        """Enable or disable a middleware by name."""
        if name in self._enabled:
            self._enabled[name] = enabled

    def get_middleware(self, cls: type[M]) -> M | None:
        """Return the first registered middleware of the given type."""
        for mw in self._middleware:
            if isinstance(mw, cls):
                return mw
        return None

    @property
    def names(self) -> list[str]:
        return [mw.name for mw in self._middleware]

    async def process_request(self, request: Request, context: RequestContext) -> Response | None:
        """Run request through all enabled middleware in order.

        Returns a Response if any middleware short-circuits, otherwise None.
        Exceptions propagate to the caller.
        """
        for mw in self._middleware:
            if not self._enabled.get(mw.name, True):
                continue
            result = await mw.process_request(request, context)
            if isinstance(result, Response):
                logger.debug("middleware_short_circuit", middleware=mw.name, request_id=context.request_id)
                return result
        return None

    async def process_response(self, response: Response, context: RequestContext) -> Response:
        """Run response through all enabled middleware in reverse order.

        Individual middleware exceptions are caught so one broken middleware
        doesn't corrupt the response.
        """
        for mw in reversed(self._middleware):
            if not self._enabled.get(mw.name, True):
                continue
            try:
                response = await mw.process_response(response, context)
            except Exception:
                logger.exception("middleware_response_error", middleware=mw.name)
        return response

    async def handle(self, request: Request, context: RequestContext | None = None) -> Response:
        """Run the full chain for one request and return the final response.

        Short-circuit and error responses still pass through the response
        handlers so headers land on every response.
        """
        if context is None:
            context = RequestContext()
        start = time.perf_counter()
        try:
            response = await self.process_request(request, context)
            if response is None:
                response = await self._dispatcher(request, context)
        except Exception as exc:
            if self._error_handler is None:
                raise
            response = self._error_handler(exc, context)
        response = await self.process_response(response, context)

        logger.info(
            "request_completed",
            method=getattr(request, "method", None),
            path=request.url.path if request is not None else None,
            status=response.status_code,
            duration_ms=round((time.perf_counter() - start) * 1000, 2),
            request_id=context.request_id,
        )
        return response
