"""Middleware pipeline chain order tests."""

from __future__ import annotations

import pytest
from starlette.responses import JSONResponse, Response

from quote_server.errors import PayloadTooLargeError
from quote_server.middleware.error_handler import ErrorHandler
from quote_server.middleware.pipeline import Middleware, MiddlewarePipeline, RequestContext
from tests.helpers.asgi import make_request


class TrackingMiddleware(Middleware):
    """Middleware that records its execution order."""

    def __init__(self, name: str, order_log: list[str]):
        self._name = name
        self._order_log = order_log

    @property
    def name(self) -> str:
        return self._name

    async def process_request(self, request, context):
        self._order_log.append(f"req:{self._name}")
        return None

    async def process_response(self, response, context):
        self._order_log.append(f"resp:{self._name}")
        return response


class ShortCircuitMiddleware(Middleware):
    """Middleware that short-circuits the pipeline."""

    async def process_request(self, request, context):
        return Response(content="blocked", status_code=429)


class RaisingMiddleware(Middleware):
    def __init__(self, exc: Exception):
        self._exc = exc

    async def process_request(self, request, context):
        raise self._exc


def _tracking_dispatcher(order_log: list[str]):
    async def dispatch(request, context):
        order_log.append("dispatch")
        return JSONResponse({"ok": True})

    return dispatch


@pytest.mark.asyncio
async def test_middleware_executes_in_order():
    """Request middleware runs forward, response middleware runs reverse."""
    order_log: list[str] = []
    pipeline = MiddlewarePipeline()
    pipeline.add(TrackingMiddleware("first", order_log))
    pipeline.add(TrackingMiddleware("second", order_log))
    pipeline.add(TrackingMiddleware("third", order_log))

    context = RequestContext()
    await pipeline.process_request(None, context)
    assert order_log == ["req:first", "req:second", "req:third"]

    order_log.clear()
    await pipeline.process_response(Response(content="ok"), context)
    assert order_log == ["resp:third", "resp:second", "resp:first"]


@pytest.mark.asyncio
async def test_handle_runs_dispatch_between_request_and_response_phases():
    order_log: list[str] = []
    pipeline = MiddlewarePipeline(dispatcher=_tracking_dispatcher(order_log))
    pipeline.add(TrackingMiddleware("first", order_log))
    pipeline.add(TrackingMiddleware("second", order_log))

    response = await pipeline.handle(make_request())
    assert response.status_code == 200
    assert order_log == ["req:first", "req:second", "dispatch", "resp:second", "resp:first"]


@pytest.mark.asyncio
async def test_middleware_can_be_disabled():
    """Disabled middleware is skipped."""
    order_log: list[str] = []
    pipeline = MiddlewarePipeline()
    pipeline.add(TrackingMiddleware("first", order_log))
    pipeline.add(TrackingMiddleware("second", order_log), enabled=False)
    pipeline.add(TrackingMiddleware("third", order_log))

    context = RequestContext()
    await pipeline.process_request(None, context)
    assert order_log == ["req:first", "req:third"]


@pytest.mark.asyncio
async def test_middleware_can_be_toggled():
    """Middleware can be enabled/disabled by name."""
    order_log: list[str] = []
    pipeline = MiddlewarePipeline()
    pipeline.add(TrackingMiddleware("first", order_log))
    pipeline.add(TrackingMiddleware("second", order_log))

    context = RequestContext()
    await pipeline.process_request(None, context)
    assert len(order_log) == 2

    order_log.clear()
    pipeline.set_enabled("second", False)
    await pipeline.process_request(None, context)
    assert order_log == ["req:first"]


@pytest.mark.asyncio
async def test_short_circuit_skips_later_stages_and_dispatch():
    """A middleware returning a Response stops further request processing."""
    order_log: list[str] = []
    pipeline = MiddlewarePipeline(dispatcher=_tracking_dispatcher(order_log))
    pipeline.add(TrackingMiddleware("first", order_log))
    pipeline.add(ShortCircuitMiddleware())
    pipeline.add(TrackingMiddleware("third", order_log))

    response = await pipeline.handle(make_request())
    assert response.status_code == 429
    assert "req:third" not in order_log
    assert "dispatch" not in order_log


@pytest.mark.asyncio
async def test_short_circuit_response_still_gets_response_phase():
    order_log: list[str] = []
    pipeline = MiddlewarePipeline()
    pipeline.add(TrackingMiddleware("first", order_log))
    pipeline.add(ShortCircuitMiddleware())

    await pipeline.handle(make_request())
    assert order_log == ["req:first", "resp:first"]


@pytest.mark.asyncio
async def test_request_context_passed_through():
    """Context is shared across all middleware."""

    class ContextWriter(Middleware):
        async def process_request(self, request, context):
            context.body = {"name": "x"}
            return None

    class ContextReader(Middleware):
        async def process_request(self, request, context):
            assert context.body == {"name": "x"}
            return None

    pipeline = MiddlewarePipeline()
    pipeline.add(ContextWriter())
    pipeline.add(ContextReader())

    context = RequestContext()
    await pipeline.process_request(None, context)
    assert context.body == {"name": "x"}


@pytest.mark.asyncio
async def test_stage_error_goes_to_error_handler():
    order_log: list[str] = []
    pipeline = MiddlewarePipeline(
        dispatcher=_tracking_dispatcher(order_log),
        error_handler=ErrorHandler(production=True),
    )
    pipeline.add(TrackingMiddleware("first", order_log))
    pipeline.add(RaisingMiddleware(PayloadTooLargeError()))

    response = await pipeline.handle(make_request())
    assert response.status_code == 413
    assert "dispatch" not in order_log
    # Error responses still pass through the response phase
    assert order_log[-1] == "resp:first"


@pytest.mark.asyncio
async def test_dispatch_error_goes_to_error_handler():
    async def broken(request, context):
        raise RuntimeError("boom")

    pipeline = MiddlewarePipeline(dispatcher=broken, error_handler=ErrorHandler(production=True))
    response = await pipeline.handle(make_request())
    assert response.status_code == 500


@pytest.mark.asyncio
async def test_without_error_handler_exceptions_propagate():
    async def broken(request, context):
        raise RuntimeError("boom")

    pipeline = MiddlewarePipeline(dispatcher=broken)
    with pytest.raises(RuntimeError):
        await pipeline.handle(make_request())


@pytest.mark.asyncio
async def test_default_dispatcher_is_not_found():
    pipeline = MiddlewarePipeline(error_handler=ErrorHandler())
    response = await pipeline.handle(make_request(path="/anything"))
    assert response.status_code == 404


# --- Edge cases ---


@pytest.mark.asyncio
async def test_empty_pipeline():
    """Empty pipeline processes request and response without error."""
    pipeline = MiddlewarePipeline()
    context = RequestContext()

    result = await pipeline.process_request(None, context)
    assert result is None

    response = Response(content="ok")
    result = await pipeline.process_response(response, context)
    assert result is response


@pytest.mark.asyncio
async def test_set_enabled_unknown_name():
    """set_enabled with unknown name is a no-op (doesn't crash)."""
    pipeline = MiddlewarePipeline()
    pipeline.set_enabled("nonexistent", False)


@pytest.mark.asyncio
async def test_response_middleware_error_does_not_break_response():
    class BrokenResponse(Middleware):
        async def process_request(self, request, context):
            return None

        async def process_response(self, response, context):
            raise ValueError("broken")

    order_log: list[str] = []
    pipeline = MiddlewarePipeline()
    pipeline.add(TrackingMiddleware("first", order_log))
    pipeline.add(BrokenResponse())

    response = Response(content="ok")
    result = await pipeline.process_response(response, RequestContext())
    assert result is response
    assert order_log == ["resp:first"]


def test_get_middleware_by_type():
    order_log: list[str] = []
    pipeline = MiddlewarePipeline()
    tracker = TrackingMiddleware("first", order_log)
    pipeline.add(tracker)
    assert pipeline.get_middleware(TrackingMiddleware) is tracker
    assert pipeline.get_middleware(ShortCircuitMiddleware) is None
    assert pipeline.names == ["first"]


def test_request_context_default_values():
    """RequestContext has sensible defaults."""
    ctx = RequestContext()
    assert ctx.client_ip == ""
    assert ctx.body is None
    assert ctx.query == {}
    assert ctx.extra == {}
    assert len(ctx.request_id) == 8
