"""Static custom headers middleware."""

from __future__ import annotations

from starlette.requests import Request
from starlette.responses import Response

from quote_server.config.security_policy import SecurityPolicy
from quote_server.middleware.pipeline import Middleware, RequestContext


class CustomHeaders(Middleware):
    """Set the policy's static header mapping on every response, in order."""

    def __init__(self, policy: SecurityPolicy) -> None:
        self._headers = policy.custom_headers

    async def process_request(self, request: Request, context: RequestContext) -> Response | None:
        return None

    async def process_response(self, response: Response, context: RequestContext) -> Response:
        for header_name, header_value in self._headers:
            response.headers[header_name] = header_value
        return response
