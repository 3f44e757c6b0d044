"""Protective headers middleware: Content-Security-Policy and HSTS."""

from __future__ import annotations

from starlette.requests import Request
from starlette.responses import Response

from quote_server.config.loader import QuoteSettings
from quote_server.config.security_policy import SecurityPolicy
from quote_server.middleware.csp_builder import build_csp, build_hsts
from quote_server.middleware.pipeline import Middleware, RequestContext

# Headers that reveal the server stack
_STRIP_HEADERS = frozenset({
    "server",
    "x-powered-by",
})


class ProtectiveHeaders(Middleware):
    """Inject CSP and Strict-Transport-Security into every response.

    Header values are built once from the policy and settings. The pipeline
    registers this stage disabled when protective headers are turned off.
    """

    def __init__(self, policy: SecurityPolicy, settings: QuoteSettings) -> None:
        self._headers: dict[str, str] = {}
        if policy.csp_directives:
            self._headers["content-security-policy"] = build_csp(policy.csp_directives)
        self._headers["strict-transport-security"] = build_hsts(
            settings.hsts_max_age,
            include_subdomains=settings.hsts_include_subdomains,
            preload=settings.hsts_preload,
        )

    @property
    def headers(self) -> dict[str, str]:
        return dict(self._headers)

    async def process_request(self, request: Request, context: RequestContext) -> Response | None:
        return None

    async def process_response(self, response: Response, context: RequestContext) -> Response:
        for header in _STRIP_HEADERS:
            if header in response.headers:
                del response.headers[header]
        for header_name, header_value in self._headers.items():
            response.headers[header_name] = header_value
        return response
