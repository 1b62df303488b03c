"""Pass predictor port."""

from typing import Protocol

from iss_passes.domain.models.coordinates import Coordinates
from iss_passes.domain.models.pass_event import PassEvent


class PassPredictor(Protocol):
    """Port for predicting ISS passes over a location."""

    async def resolve(self, coords: Coordinates | None) -> list[PassEvent]:
        """Return upcoming passes over the given coordinates, in upstream order."""
        ...
