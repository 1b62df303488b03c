"""Utility for logging upstream API traffic when ISS_LOG_REQUESTS is enabled."""

import logging
from typing import Any
from urllib.parse import urlencode

logger = logging.getLogger(__name__)


def build_url_with_params(url: str, params: dict[str, Any] | None) -> str:
    """Build full URL with query parameters, in a stable order."""
    if not params:
        return url
    param_str = urlencode(sorted(params.items()))
    return f"{url}?{param_str}" if "?" not in url else f"{url}&{param_str}"


def log_api_request(
    method: str,
    url: str,
    params: dict[str, Any] | None = None,
    headers: dict[str, str] | None = None,
) -> None:
    """Log an outbound API request.

    Args:
        method: HTTP method (GET, POST, etc.).
        url: Request URL.
        params: Query parameters (optional).
        headers: Request headers (optional).
    """
    log_parts = [f"{method} {build_url_with_params(url, params)}"]
    if headers:
        header_str = ", ".join(f"{k}: {v}" for k, v in sorted(headers.items()))
        log_parts.append(f"Headers: {header_str}")

    logger.info("API Request:\n" + "\n".join(log_parts))


def log_api_response(url: str, status: int, body_length: int) -> None:
    """Log the status and body size of an API response."""
    logger.info(f"API Response: {url} -> {status} ({body_length} bytes)")
