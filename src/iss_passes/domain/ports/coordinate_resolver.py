"""Coordinate resolver port."""

from typing import Protocol

from iss_passes.domain.models.coordinates import Coordinates


class CoordinateResolver(Protocol):
    """Port for geolocating an IP address."""

    async def resolve(self, ip: str | None) -> Coordinates:
        """Return the coordinates for an IP address."""
        ...
