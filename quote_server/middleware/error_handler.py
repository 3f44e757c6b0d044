"""Terminal error stage: turns exceptions into JSON error responses."""

from __future__ import annotations

import traceback

import structlog
from starlette.responses import JSONResponse, Response

from quote_server.errors import QuoteServerError
from quote_server.middleware.pipeline import RequestContext

logger = structlog.get_logger()

GENERIC_ERROR_BODY = {
    "error": "Internal Server Error",
    "message": "Something went wrong. Please try again later.",
}


class ErrorHandler:
    """Map request errors to responses.

    - QuoteServerError subclasses keep their status and generic body
    - anything else is a 500; error text and stack trace are only included
      when ``production`` is False
    """

    def __init__(self, production: bool = False) -> None:
        self._production = production

    def __call__(self, exc: Exception, context: RequestContext) -> Response:
        if isinstance(exc, QuoteServerError):
            logger.warning(
                "request_rejected",
                status=exc.status_code,
                error=exc.error,
                request_id=context.request_id,
            )
            return JSONResponse(status_code=exc.status_code, content=exc.to_body())

        logger.error(
            "request_error",
            error=str(exc),
            error_type=type(exc).__name__,
            request_id=context.request_id,
            exc_info=exc,
        )
        if self._production:
            return JSONResponse(status_code=500, content=GENERIC_ERROR_BODY)
        return JSONResponse(
            status_code=500,
            content={
                "error": str(exc),
                "stack": "".join(traceback.format_exception(type(exc), exc, exc.__traceback__)),
            },
        )
