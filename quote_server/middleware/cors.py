"""Cross-origin policy middleware."""

from __future__ import annotations

import structlog
from starlette.requests import Request
from starlette.responses import Response

from quote_server.config.security_policy import CorsRules
from quote_server.middleware.pipeline import Middleware, RequestContext

logger = structlog.get_logger()


class CorsPolicy(Middleware):
    """Apply static allow rules for cross-origin requests.

    - Allowed origins are echoed back in Access-Control-Allow-Origin
    - OPTIONS preflight requests short-circuit with 204
    - Origins outside the allow list get no CORS headers (the browser blocks them)
    """

    def __init__(self, rules: CorsRules) -> None:
        self._rules = rules
        self._origins = frozenset(rules.origins)

    def is_allowed(self, origin: str) -> bool:
        return "*" in self._origins or origin in self._origins

    def _cors_headers(self, origin: str) -> dict[str, str]:
        headers = {"Access-Control-Allow-Origin": origin, "Vary": "Origin"}
        if self._rules.credentials:
            headers["Access-Control-Allow-Credentials"] = "true"
        return headers

    async def process_request(self, request: Request, context: RequestContext) -> Response | None:
        origin = request.headers.get("origin")
        if not origin:
            return None
        if not self.is_allowed(origin):
            logger.debug("cors_origin_rejected", origin=origin, request_id=context.request_id)
            return None

        context.extra["cors_origin"] = origin

        if request.method == "OPTIONS" and "access-control-request-method" in request.headers:
            headers = self._cors_headers(origin)
            headers["Access-Control-Allow-Methods"] = ",".join(self._rules.methods)
            headers["Access-Control-Allow-Headers"] = ",".join(self._rules.allowed_headers)
            return Response(status_code=204, headers=headers)
        return None

    async def process_response(self, response: Response, context: RequestContext) -> Response:
        origin = context.extra.get("cors_origin")
        if origin:
            for header_name, header_value in self._cors_headers(origin).items():
                response.headers[header_name] = header_value
        return response
