"""Adapters layer - external system integrations."""

from iss_passes.adapters.config import AppConfig
from iss_passes.adapters.flyover_api import FlyoverPassPredictor
from iss_passes.adapters.ipify_api import IpifyAddressResolver
from iss_passes.adapters.ipwhois_api import IpWhoisCoordinateResolver

__all__ = [
    "AppConfig",
    "FlyoverPassPredictor",
    "IpWhoisCoordinateResolver",
    "IpifyAddressResolver",
]
