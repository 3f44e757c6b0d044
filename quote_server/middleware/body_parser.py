"""Body and query parsing middleware with a hard size cap."""

from __future__ import annotations

import json
from typing import Any
from urllib.parse import parse_qsl

import structlog
from starlette.requests import Request
from starlette.responses import Response

from quote_server.errors import MalformedBodyError, PayloadTooLargeError
from quote_server.middleware.pipeline import Middleware, RequestContext

logger = structlog.get_logger()

JSON_TYPE = "application/json"
FORM_TYPE = "application/x-www-form-urlencoded"


def _collapse(pairs: list[tuple[str, str]]) -> dict[str, Any]:
    """Turn key/value pairs into a dict; repeated keys become lists."""
    result: dict[str, Any] = {}
    for key, value in pairs:
        if key in result:
            existing = result[key]
            if isinstance(existing, list):
                existing.append(value)
            else:
                result[key] = [existing, value]
        else:
            result[key] = value
    return result


def _media_type(request: Request) -> str:
    return request.headers.get("content-type", "").split(";")[0].strip().lower()


class BodyParser(Middleware):
    """Parse query string and JSON / urlencoded bodies into the context.

    Bodies over ``max_body_bytes`` raise PayloadTooLargeError: up front when
    Content-Length says so, otherwise as soon as the streamed body crosses it.
    """

    def __init__(self, max_body_bytes: int) -> None:
        self._max_body_bytes = max_body_bytes

    async def process_request(self, request: Request, context: RequestContext) -> Response | None:
        context.query = _collapse(list(request.query_params.multi_items()))
        context.body = {}

        content_length = request.headers.get("content-length")
        if content_length:
            try:
                declared = int(content_length)
            except (ValueError, OverflowError):
                raise MalformedBodyError("Invalid Content-Length") from None
            if declared > self._max_body_bytes:
                logger.warning(
                    "request_body_too_large",
                    content_length=declared,
                    max=self._max_body_bytes,
                    request_id=context.request_id,
                )
                raise PayloadTooLargeError()

        media_type = _media_type(request)
        if media_type not in (JSON_TYPE, FORM_TYPE):
            return None

        raw = await self._read_body(request, context)
        if not raw:
            return None

        if media_type == JSON_TYPE:
            context.body = self._parse_json(raw)
        else:
            context.body = self._parse_form(raw)
        return None

    async def _read_body(self, request: Request, context: RequestContext) -> bytes:
        chunks: list[bytes] = []
        size = 0
        async for chunk in request.stream():
            size += len(chunk)
            if size > self._max_body_bytes:
                logger.warning(
                    "request_body_too_large",
                    received=size,
                    max=self._max_body_bytes,
                    request_id=context.request_id,
                )
                raise PayloadTooLargeError()
            chunks.append(chunk)
        return b"".join(chunks)

    @staticmethod
    def _parse_json(raw: bytes) -> Any:
        try:
            parsed = json.loads(raw)
        except (ValueError, UnicodeDecodeError):
            raise MalformedBodyError() from None
        # Only objects and arrays are accepted as JSON bodies
        if not isinstance(parsed, (dict, list)):
            raise MalformedBodyError()
        return parsed

    @staticmethod
    def _parse_form(raw: bytes) -> dict[str, Any]:
        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError:
            raise MalformedBodyError() from None
        return _collapse(parse_qsl(text, keep_blank_values=True))
