"""ipify adapter for public IP lookup."""

from iss_passes.adapters.ipify_api.ipify_address_resolver import IpifyAddressResolver

__all__ = ["IpifyAddressResolver"]
