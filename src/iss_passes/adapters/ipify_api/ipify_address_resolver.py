"""Address resolver adapter using the ipify public API."""

import logging
from typing import TYPE_CHECKING

from iss_passes.adapters.constants import DEFAULT_IP_LOOKUP_URL
from iss_passes.adapters.http_client import JsonHttpClient
from iss_passes.domain.ports.address_resolver import AddressResolver

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession


class IpifyAddressResolver(AddressResolver):
    """Finds the caller's public IP address via ipify."""

    def __init__(
        self,
        session: "ClientSession | None" = None,
        url: str = DEFAULT_IP_LOOKUP_URL,
        log_requests: bool = False,
    ) -> None:
        """Initialize with optional aiohttp session and service URL."""
        self._http_client = JsonHttpClient(session=session, log_requests=log_requests)
        self._url = url

    async def resolve(self) -> str | None:
        """Fetch the public IP address.

        Returns:
            The ``ip`` field of the response; it is not otherwise validated.
        """
        data = await self._http_client.get_json(self._url, "IP", params={"format": "json"})
        ip = data.get("ip") if isinstance(data, dict) else None
        logger.debug(f"Resolved public IP {ip}")
        return ip
