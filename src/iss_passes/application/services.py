"""Application services (use cases) for ISS pass prediction."""

import logging
from typing import TYPE_CHECKING

from iss_passes.domain.models import PassEvent

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from iss_passes.domain.ports import AddressResolver, CoordinateResolver, PassPredictor


class PassPredictionService:
    """Chains the address, coordinate and pass lookups for the current location."""

    def __init__(
        self,
        address_resolver: "AddressResolver",
        coordinate_resolver: "CoordinateResolver",
        pass_predictor: "PassPredictor",
    ) -> None:
        """Initialize with the three resolvers."""
        self._address_resolver = address_resolver
        self._coordinate_resolver = coordinate_resolver
        self._pass_predictor = pass_predictor

    async def next_passes_for_current_location(self) -> list[PassEvent]:
        """Get upcoming ISS passes over the caller's current location.

        Each stage runs only after the previous one succeeded. The first
        exception raised by any stage propagates unchanged and the remaining
        stages are skipped.
        """
        logger.debug("Resolving public IP address")
        ip = await self._address_resolver.resolve()

        logger.debug(f"Resolving coordinates for {ip}")
        coords = await self._coordinate_resolver.resolve(ip)

        logger.debug(f"Predicting passes for {coords}")
        passes = await self._pass_predictor.resolve(coords)

        logger.debug(f"Found {len(passes)} upcoming pass(es)")
        return passes
