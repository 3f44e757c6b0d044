"""Cross-origin policy tests."""

from __future__ import annotations

import pytest
from starlette.responses import Response

from quote_server.config.security_policy import CorsRules
from quote_server.middleware.cors import CorsPolicy
from quote_server.middleware.pipeline import RequestContext
from tests.helpers.asgi import make_request

ALLOWED = "http://localhost:3031"


@pytest.fixture
def cors() -> CorsPolicy:
    return CorsPolicy(CorsRules(origins=(ALLOWED, "http://127.0.0.1:3031")))


class TestCorsPolicy:
    @pytest.mark.asyncio
    async def test_no_origin_no_headers(self, cors):
        ctx = RequestContext()
        assert await cors.process_request(make_request(), ctx) is None
        result = await cors.process_response(Response(content="ok"), ctx)
        assert "access-control-allow-origin" not in result.headers

    @pytest.mark.asyncio
    async def test_allowed_origin_echoed(self, cors):
        ctx = RequestContext()
        req = make_request(headers={"Origin": ALLOWED})
        assert await cors.process_request(req, ctx) is None
        result = await cors.process_response(Response(content="ok"), ctx)
        assert result.headers["access-control-allow-origin"] == ALLOWED
        assert result.headers["access-control-allow-credentials"] == "true"
        assert result.headers["vary"] == "Origin"

    @pytest.mark.asyncio
    async def test_disallowed_origin_gets_no_headers(self, cors):
        ctx = RequestContext()
        req = make_request(headers={"Origin": "https://evil.example"})
        assert await cors.process_request(req, ctx) is None
        result = await cors.process_response(Response(content="ok"), ctx)
        assert "access-control-allow-origin" not in result.headers

    @pytest.mark.asyncio
    async def test_preflight_short_circuits(self, cors):
        ctx = RequestContext()
        req = make_request(
            method="OPTIONS",
            path="/api/quote/packages",
            headers={"Origin": ALLOWED, "Access-Control-Request-Method": "GET"},
        )
        result = await cors.process_request(req, ctx)
        assert result is not None
        assert result.status_code == 204
        assert result.headers["access-control-allow-methods"] == "GET,POST"
        assert result.headers["access-control-allow-headers"] == "Content-Type,Authorization"

    @pytest.mark.asyncio
    async def test_plain_options_without_request_method_continues(self, cors):
        req = make_request(method="OPTIONS", headers={"Origin": ALLOWED})
        assert await cors.process_request(req, RequestContext()) is None

    def test_wildcard_origin(self):
        cors = CorsPolicy(CorsRules(origins=("*",)))
        assert cors.is_allowed("https://anything.example")

    def test_no_credentials_header_when_disabled(self):
        cors = CorsPolicy(CorsRules(origins=(ALLOWED,), credentials=False))
        assert "Access-Control-Allow-Credentials" not in cors._cors_headers(ALLOWED)


class TestCorsEndToEnd:
    def test_allowed_origin_on_catalog(self, client):
        resp = client.get("/api/quote/packages", headers={"Origin": ALLOWED})
        assert resp.headers["access-control-allow-origin"] == ALLOWED

    def test_preflight(self, client):
        resp = client.options(
            "/api/quote/packages",
            headers={"Origin": ALLOWED, "Access-Control-Request-Method": "GET"},
        )
        assert resp.status_code == 204
        assert resp.headers["access-control-allow-origin"] == ALLOWED

    def test_origins_from_settings(self, make_client):
        client = make_client(allowed_origins="https://shop.example, https://www.shop.example")
        resp = client.get("/api/quote/packages", headers={"Origin": "https://www.shop.example"})
        assert resp.headers["access-control-allow-origin"] == "https://www.shop.example"
        resp = client.get("/api/quote/packages", headers={"Origin": ALLOWED})
        assert "access-control-allow-origin" not in resp.headers

    def test_disabled(self, make_client):
        client = make_client(cors_enabled=False)
        resp = client.get("/api/quote/packages", headers={"Origin": ALLOWED})
        assert "access-control-allow-origin" not in resp.headers
