"""Read-only quote catalog endpoints."""

from __future__ import annotations

from typing import Any

from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from quote_server import catalogs
from quote_server.middleware.pipeline import RequestContext
from quote_server.router import Handler, RouteTable

# Payloads are rendered once; handlers only look them up.
CATALOG_PAYLOADS: dict[str, Any] = {
    "/api/quote/packages": [p.to_json() for p in catalogs.PACKAGES],
    "/api/quote/additional-features": [f.to_json() for f in catalogs.ADDITIONAL_FEATURES],
    "/api/quote/components": catalogs.COMPONENTS.to_json(),
    "/api/quote/addon-services": [a.to_json() for a in catalogs.ADDON_SERVICES],
    "/api/quote/emergency-services": [e.to_json() for e in catalogs.EMERGENCY_SERVICES],
    "/api/quote/service-areas": [z.to_json() for z in catalogs.SERVICE_AREAS],
    "/api/quote/hvac-features": [f.to_json() for f in catalogs.HVAC_FEATURES],
    "/api/quote/appliance-features": [f.to_json() for f in catalogs.APPLIANCE_FEATURES],
    "/api/quote/contact-features": [f.to_json() for f in catalogs.CONTACT_FEATURES],
}


def _catalog_handler(payload: Any) -> Handler:
    async def handler(request: Request, context: RequestContext) -> Response:
        return JSONResponse(content=payload)

    return handler


def register(table: RouteTable) -> None:
    """Register a GET route for every catalog."""
    for path, payload in CATALOG_PAYLOADS.items():
        table.add("GET", path, _catalog_handler(payload))
