"""Ports (interfaces) for the ports-and-adapters architecture."""

from iss_passes.domain.ports.address_resolver import AddressResolver
from iss_passes.domain.ports.coordinate_resolver import CoordinateResolver
from iss_passes.domain.ports.pass_predictor import PassPredictor

__all__ = [
    "AddressResolver",
    "CoordinateResolver",
    "PassPredictor",
]
