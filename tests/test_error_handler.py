"""Error stage tests."""

from __future__ import annotations

import json

import pytest

from quote_server.errors import MalformedBodyError, PayloadTooLargeError, RouteNotFoundError
from quote_server.middleware.error_handler import GENERIC_ERROR_BODY, ErrorHandler
from quote_server.middleware.pipeline import RequestContext
from quote_server.router import RouteTable


def _body(response) -> dict:
    return json.loads(response.body)


def _raise(exc: Exception) -> Exception:
    try:
        raise exc
    except Exception as caught:
        return caught


class TestErrorHandler:
    @pytest.mark.parametrize(
        "exc, status",
        [(MalformedBodyError(), 400), (PayloadTooLargeError(), 413), (RouteNotFoundError(), 404)],
    )
    def test_known_errors_keep_status(self, exc, status):
        response = ErrorHandler(production=True)(exc, RequestContext())
        assert response.status_code == status
        assert _body(response) == exc.to_body()

    def test_not_found_body(self):
        response = ErrorHandler()(RouteNotFoundError(), RequestContext())
        assert _body(response) == {"error": "Not Found", "message": "The requested resource was not found."}

    def test_custom_message(self):
        response = ErrorHandler()(MalformedBodyError("Invalid Content-Length"), RequestContext())
        assert _body(response)["message"] == "Invalid Content-Length"

    def test_production_hides_details(self):
        response = ErrorHandler(production=True)(_raise(KeyError("db_password")), RequestContext())
        assert response.status_code == 500
        assert _body(response) == GENERIC_ERROR_BODY
        assert b"db_password" not in response.body

    def test_development_includes_error_and_stack(self):
        response = ErrorHandler(production=False)(_raise(ValueError("bad total")), RequestContext())
        assert response.status_code == 500
        body = _body(response)
        assert body["error"] == "bad total"
        assert "Traceback" in body["stack"]
        assert "ValueError" in body["stack"]


def _broken_routes() -> RouteTable:
    async def broken(request, context):
        raise RuntimeError("catalog exploded")

    routes = RouteTable()
    routes.add("GET", "/api/broken", broken)
    return routes


class TestErrorsEndToEnd:
    def test_development_500(self, make_client):
        client = make_client(routes=_broken_routes(), environment="development")
        resp = client.get("/api/broken")
        assert resp.status_code == 500
        assert resp.json()["error"] == "catalog exploded"
        assert "stack" in resp.json()

    def test_production_500(self, make_client):
        client = make_client(routes=_broken_routes(), environment="production")
        resp = client.get("/api/broken")
        assert resp.status_code == 500
        assert resp.json() == GENERIC_ERROR_BODY
        # Headers still applied to error responses
        assert resp.headers["x-content-type-options"] == "nosniff"
