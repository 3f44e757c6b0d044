"""FastAPI application: quote catalogs and site pages behind the request pipeline."""

from __future__ import annotations

from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import Response
from starlette.middleware.gzip import GZipMiddleware
from starlette.routing import Route

from quote_server.api import page_routes, quote_routes
from quote_server.config.loader import QuoteSettings, load_settings
from quote_server.config.security_policy import SecurityPolicy, load_security_policy
from quote_server.logging_config import setup_logging
from quote_server.middleware.body_parser import BodyParser
from quote_server.middleware.cors import CorsPolicy
from quote_server.middleware.custom_headers import CustomHeaders
from quote_server.middleware.error_handler import ErrorHandler
from quote_server.middleware.pipeline import MiddlewarePipeline, RequestContext
from quote_server.middleware.protective_headers import ProtectiveHeaders
from quote_server.middleware.rate_limiter import RateLimiter, RateLimitStore, client_ip
from quote_server.middleware.request_sanitizer import RequestSanitizer
from quote_server.router import RouteTable
from quote_server.store import redis as redis_store
from quote_server.store.memory import MemoryRateLimitStore
from quote_server.store.redis import RedisRateLimitStore

logger = structlog.get_logger()


def build_routes(settings: QuoteSettings) -> RouteTable:
    """Catalog JSON routes, site pages and the assets mount."""
    table = RouteTable()
    quote_routes.register(table)
    page_routes.register(table, settings.site_root)
    return table


def build_rate_limit_store(settings: QuoteSettings) -> RateLimitStore:
    if settings.rate_limit_backend == "redis":
        return RedisRateLimitStore()
    return MemoryRateLimitStore()


def build_pipeline(
    settings: QuoteSettings,
    policy: SecurityPolicy,
    routes: RouteTable,
    store: RateLimitStore | None = None,
) -> MiddlewarePipeline:
    """Build the ordered request pipeline.

    Order matters: the rate limiter runs before any body is read, and the
    sanitizer sits between the body parser and dispatch. Compression wraps
    the whole app (see create_app).
    """
    pipeline = MiddlewarePipeline(
        dispatcher=routes.dispatch,
        error_handler=ErrorHandler(production=settings.is_production),
    )
    pipeline.add(ProtectiveHeaders(policy, settings), enabled=settings.protective_headers_enabled)  # 1
    pipeline.add(CustomHeaders(policy))                                                              # 2
    pipeline.add(CorsPolicy(policy.cors), enabled=settings.cors_enabled)                             # 3
    pipeline.add(
        RateLimiter(store or build_rate_limit_store(settings), settings),
        enabled=settings.rate_limit_enabled,
    )                                                                                                # 4
    pipeline.add(BodyParser(settings.max_body_bytes))                                                # 6
    pipeline.add(RequestSanitizer())                                                                 # 7
    return pipeline


def create_app(
    settings: QuoteSettings | None = None,
    routes: RouteTable | None = None,
    store: RateLimitStore | None = None,
) -> FastAPI:
    """Create the application. Settings and the security policy are built once here."""
    settings = settings or load_settings()
    policy = load_security_policy(settings.security_headers_file, origins=settings.cors_origins)
    routes = routes or build_routes(settings)
    pipeline = build_pipeline(settings, policy, routes, store)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logging(log_level=settings.log_level, json_format=settings.log_json)
        if settings.rate_limit_enabled and settings.rate_limit_backend == "redis":
            await redis_store.connect(settings.redis_url)

        logger.info(
            "quote_server_started",
            port=settings.port,
            environment=settings.environment,
            routes=len(routes.routes),
            stages=pipeline.names,
        )
        yield
        await redis_store.disconnect()
        logger.info("quote_server_stopped")

    app = FastAPI(
        title="HVAC & Appliance Repair Quote Site",
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = settings
    app.state.pipeline = pipeline

    if settings.compression_enabled:  # 5
        app.add_middleware(
            GZipMiddleware,
            minimum_size=settings.compression_threshold,
            compresslevel=settings.compression_level,
        )

    async def handle_request(request: Request) -> Response:
        """Catch-all entry into the request pipeline."""
        context = RequestContext(client_ip=client_ip(request))
        return await pipeline.handle(request, context)

    # methods=None accepts every HTTP method, TRACE and WebDAV verbs included
    app.router.routes.append(Route("/{path:path}", handle_request, methods=None, include_in_schema=False))

    return app
