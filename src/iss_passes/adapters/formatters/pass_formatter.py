"""Formatter for ISS pass events."""

from zoneinfo import ZoneInfo

from iss_passes.adapters.config.app_config import AppConfig
from iss_passes.domain.contracts.pass_formatter import PassFormatterProtocol
from iss_passes.domain.models.pass_event import PassEvent

RISE_TIME_FORMAT = "%a %b %d %Y %H:%M:%S %Z"


class PassFormatter(PassFormatterProtocol):
    """Formatter for pass events based on configuration."""

    def __init__(self, config: AppConfig) -> None:
        """Initialize the formatter.

        Args:
            config: Application configuration with timezone setting.
        """
        self.config = config

    def format_rise_time(self, pass_event: PassEvent) -> str:
        """Format the rise time in the configured timezone (e.g., 'Tue Apr 20 2021 23:06:40 UTC')."""
        display_timezone = ZoneInfo(self.config.timezone)
        return pass_event.rise_datetime.astimezone(display_timezone).strftime(RISE_TIME_FORMAT)

    def format_pass(self, pass_event: PassEvent) -> str:
        """Format a pass as a single display line."""
        return (
            f"Next pass at {self.format_rise_time(pass_event)} "
            f"for {pass_event.duration} seconds!"
        )
