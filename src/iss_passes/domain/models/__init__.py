"""Domain models for ISS pass lookups."""

from iss_passes.domain.models.coordinates import Coordinates
from iss_passes.domain.models.pass_event import PassEvent

__all__ = [
    "Coordinates",
    "PassEvent",
]
