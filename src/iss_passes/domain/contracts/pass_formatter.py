"""Protocol for formatting pass events."""

from typing import Protocol

from iss_passes.domain.models.pass_event import PassEvent


class PassFormatterProtocol(Protocol):
    """Protocol for turning pass events into display text."""

    def format_rise_time(self, pass_event: PassEvent) -> str:
        """Format the rise time of a pass as an absolute timestamp.

        Args:
            pass_event: The pass to format.

        Returns:
            Timestamp string in the configured timezone.
        """
        ...

    def format_pass(self, pass_event: PassEvent) -> str:
        """Format a pass as a single display line.

        Args:
            pass_event: The pass to format.

        Returns:
            Line like "Next pass at ... for 600 seconds!".
        """
        ...
