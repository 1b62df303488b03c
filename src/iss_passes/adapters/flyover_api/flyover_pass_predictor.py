"""Pass predictor adapter using the ISS fly-over JSON API."""

import logging
from typing import TYPE_CHECKING, Any

from iss_passes.adapters.constants import DEFAULT_FLYOVER_URL
from iss_passes.adapters.field_parser import parse_int
from iss_passes.adapters.http_client import JsonHttpClient
from iss_passes.domain.errors import InputError, ResponseFormatError
from iss_passes.domain.models.coordinates import Coordinates
from iss_passes.domain.models.pass_event import PassEvent
from iss_passes.domain.ports.pass_predictor import PassPredictor

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession


class FlyoverPassPredictor(PassPredictor):
    """Predicts ISS passes via the fly-over service."""

    def __init__(
        self,
        session: "ClientSession | None" = None,
        url: str = DEFAULT_FLYOVER_URL,
        log_requests: bool = False,
        validate: bool = True,
    ) -> None:
        """Initialize with optional aiohttp session.

        Args:
            session: aiohttp ClientSession for HTTP requests.
            url: Fly-over service URL.
            log_requests: Log outbound requests.
            validate: Reject non-numeric risetime/duration values.
        """
        self._http_client = JsonHttpClient(session=session, log_requests=log_requests)
        self._url = url
        self._validate = validate

    async def resolve(self, coords: Coordinates | None) -> list[PassEvent]:
        """Fetch upcoming passes over a location.

        Args:
            coords: Observer coordinates.

        Returns:
            Pass events in the order the service returned them.

        Raises:
            InputError: If coords is None; no request is sent.
            StatusError: If the service answers with anything but 200.
        """
        if coords is None:
            raise InputError("coords is not defined")

        # query values must be strings; unvalidated coordinates may be None
        params = {"lat": str(coords.latitude), "lon": str(coords.longitude)}
        data = await self._http_client.get_json(self._url, "fly over time", params=params)
        events = data.get("response") if isinstance(data, dict) else None
        passes = self._parse_passes(events)
        logger.debug(f"Received {len(passes)} pass(es) for {coords}")
        return passes

    def _parse_passes(self, events: Any) -> list[PassEvent]:
        """Parse the ``response`` list into PassEvent objects."""
        if events is None and not self._validate:
            return []
        if not isinstance(events, list):
            raise ResponseFormatError(f"Field 'response' must be a list, got {events!r}")
        return [self._parse_pass(event) for event in events]

    def _parse_pass(self, event: Any) -> PassEvent:
        if not isinstance(event, dict):
            raise ResponseFormatError(f"Pass entry must be an object, got {event!r}")
        risetime = event.get("risetime")
        duration = event.get("duration")
        if self._validate:
            risetime = parse_int(risetime, "risetime")
            duration = parse_int(duration, "duration")
        return PassEvent(risetime=risetime, duration=duration)
