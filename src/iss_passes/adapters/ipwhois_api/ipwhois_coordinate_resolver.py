"""Coordinate resolver adapter using the ipwho.is geolocation API."""

import logging
from typing import TYPE_CHECKING, Any

from iss_passes.adapters.constants import DEFAULT_GEOLOCATION_URL
from iss_passes.adapters.field_parser import parse_float
from iss_passes.adapters.http_client import JsonHttpClient
from iss_passes.domain.errors import InputError, SemanticError
from iss_passes.domain.models.coordinates import Coordinates
from iss_passes.domain.ports.coordinate_resolver import CoordinateResolver

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession


class IpWhoisCoordinateResolver(CoordinateResolver):
    """Geolocates an IP address via ipwho.is."""

    def __init__(
        self,
        session: "ClientSession | None" = None,
        url: str = DEFAULT_GEOLOCATION_URL,
        log_requests: bool = False,
        validate: bool = True,
    ) -> None:
        """Initialize with optional aiohttp session.

        Args:
            session: aiohttp ClientSession for HTTP requests.
            url: Base URL of the geolocation service; the IP is appended as a path segment.
            log_requests: Log outbound requests.
            validate: Reject non-numeric latitude/longitude.
        """
        self._http_client = JsonHttpClient(session=session, log_requests=log_requests)
        self._base_url = url.rstrip("/")
        self._validate = validate

    async def resolve(self, ip: str | None) -> Coordinates:
        """Fetch the coordinates of an IP address.

        Args:
            ip: Public IP address to geolocate.

        Returns:
            Coordinates reported by the service.

        Raises:
            InputError: If ip is empty; no request is sent.
            StatusError: If the service answers with anything but 200.
            SemanticError: If the service reports success as false.
        """
        if not ip:
            raise InputError("IP is not defined")

        data = await self._http_client.get_json(f"{self._base_url}/{ip}", "coordinates")
        return self._build_coordinates(data, ip)

    def _build_coordinates(self, data: Any, ip: str) -> Coordinates:
        """Build Coordinates from a decoded geolocation response."""
        fields = data if isinstance(data, dict) else {}
        success = fields.get("success")
        if not success:
            raise SemanticError(success, fields.get("message"), ip)

        latitude = fields.get("latitude")
        longitude = fields.get("longitude")
        if self._validate:
            latitude = parse_float(latitude, "latitude")
            longitude = parse_float(longitude, "longitude")

        logger.debug(f"Resolved {ip} to ({latitude}, {longitude})")
        return Coordinates(latitude=latitude, longitude=longitude)
