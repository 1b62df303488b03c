"""Pass event domain model."""

from dataclasses import dataclass
from datetime import UTC, datetime


@dataclass(frozen=True)
class PassEvent:
    """A predicted overhead pass of the ISS."""

    risetime: int  # epoch seconds
    duration: int  # seconds

    @property
    def rise_datetime(self) -> datetime:
        """Rise time as an aware UTC datetime."""
        return datetime.fromtimestamp(self.risetime, tz=UTC)
