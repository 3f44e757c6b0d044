"""Request sanitizer middleware."""

from __future__ import annotations

from starlette.requests import Request
from starlette.responses import Response

from quote_server.middleware.pipeline import Middleware, RequestContext
from quote_server.utils.sanitize import sanitize_fields, sanitize_items


class RequestSanitizer(Middleware):
    """Strip denylisted characters from parsed body and query values.

    Runs after BodyParser and before dispatch. Only top-level strings are
    cleaned: the values of an object body or the elements of an array body.
    Nested objects and arrays pass through unchanged.
    """

    async def process_request(self, request: Request, context: RequestContext) -> Response | None:
        if isinstance(context.body, dict):
            sanitize_fields(context.body)
        elif isinstance(context.body, list):
            sanitize_items(context.body)
        sanitize_fields(context.query)
        return None
