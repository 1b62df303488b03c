"""Shared HTTP client for the upstream JSON services."""

import json
import logging
from typing import TYPE_CHECKING, Any

from iss_passes.adapters.api_request_logger import log_api_request, log_api_response
from iss_passes.adapters.constants import DEFAULT_HEADERS, LOGGED_BODY_LIMIT
from iss_passes.domain.errors import StatusError

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession


class JsonHttpClient:
    """Issues a single GET request and decodes the JSON body.

    Transport errors raised by the session are not caught here.
    """

    def __init__(self, session: "ClientSession | None" = None, log_requests: bool = False) -> None:
        """Initialize with optional aiohttp session.

        Args:
            session: aiohttp ClientSession used for requests.
            log_requests: Log each request and response at INFO level.
        """
        self._session = session
        self._log_requests = log_requests

    async def get_json(
        self, url: str, subject: str, params: dict[str, str | int | float] | None = None
    ) -> Any:
        """Fetch a URL and return its decoded JSON body.

        Args:
            url: Request URL.
            subject: What is being fetched, used in error messages (e.g., "IP").
            params: Optional query parameters.

        Returns:
            Decoded JSON body.

        Raises:
            StatusError: If the service answers with anything but 200.
            json.JSONDecodeError: If the body is not valid JSON.
        """
        if self._session is None:
            raise RuntimeError("JsonHttpClient requires an aiohttp session")

        if self._log_requests:
            log_api_request("GET", url, params=params, headers=DEFAULT_HEADERS)

        async with self._session.get(url, params=params, headers=DEFAULT_HEADERS) as response:
            body = await response.text()
            status = response.status

        if self._log_requests:
            log_api_response(url, status, len(body))

        if status != 200:
            logger.warning(
                f"Upstream returned status {status} when fetching {subject} from {url}: "
                f"{body[:LOGGED_BODY_LIMIT]}"
            )
            raise StatusError(subject, status, body)

        return json.loads(body)
