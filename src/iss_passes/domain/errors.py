"""Errors raised while looking up ISS passes.

Transport failures are not wrapped: ``aiohttp.ClientError`` and timeouts reach
the caller unchanged.
"""

from typing import Any


class PassLookupError(Exception):
    """Base class for failures reported by the pass lookup pipeline."""


class InputError(PassLookupError):
    """A required upstream input was missing; no request was sent."""


class StatusError(PassLookupError):
    """An upstream service answered with a non-200 status."""

    def __init__(self, subject: str, status: int, body: str) -> None:
        """Initialize with what was being fetched and the raw response.

        Args:
            subject: What the request was fetching (e.g., "IP", "coordinates").
            status: HTTP status code returned by the service.
            body: Raw response body.
        """
        super().__init__(f"Status Code {status} when fetching {subject}. Response: {body}")
        self.subject = subject
        self.status = status
        self.body = body


class SemanticError(PassLookupError):
    """An upstream service answered 200 but reported failure in its payload."""

    def __init__(self, success: Any, message: str | None, ip: str) -> None:
        super().__init__(
            f"Success status was {success}. Server message says: {message} "
            f"when fetching for IP {ip}"
        )
        self.success = success
        self.message = message
        self.ip = ip


class ResponseFormatError(PassLookupError):
    """A 200 response carried a field of the wrong type."""
