"""ipwho.is adapter for IP geolocation."""

from iss_passes.adapters.ipwhois_api.ipwhois_coordinate_resolver import (
    IpWhoisCoordinateResolver,
)

__all__ = ["IpWhoisCoordinateResolver"]
