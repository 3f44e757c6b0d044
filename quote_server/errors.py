"""Request error taxonomy.

Errors raised by pipeline stages or route handlers. The terminal error stage
maps each one to its status code and a generic JSON body; anything not listed
here becomes a 500.
"""

from __future__ import annotations


class QuoteServerError(Exception):
    """Base for errors that map to a client-facing 4xx response."""

    status_code: int = 400
    error: str = "Bad Request"
    message: str = "The request could not be processed."

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)

    def to_body(self) -> dict[str, str]:
        return {"error": self.error, "message": self.message}


class MalformedBodyError(QuoteServerError):
    """Body declared as JSON or form data but could not be decoded."""

    status_code = 400
    error = "Bad Request"
    message = "Request body could not be parsed."


class PayloadTooLargeError(QuoteServerError):
    """Body exceeds the configured maximum size."""

    status_code = 413
    error = "Payload Too Large"
    message = "Request body exceeds the maximum allowed size."


class RouteNotFoundError(QuoteServerError):
    """No route matches the request method and path."""

    status_code = 404
    error = "Not Found"
    message = "The requested resource was not found."
