"""12-factor configuration adapter using environment variables."""

import logging
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from iss_passes.adapters.constants import (
    DEFAULT_FLYOVER_URL,
    DEFAULT_GEOLOCATION_URL,
    DEFAULT_IP_LOOKUP_URL,
)


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_prefix="ISS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Upstream services
    ip_lookup_url: str = Field(
        default=DEFAULT_IP_LOOKUP_URL, description="Service returning the caller's public IP"
    )
    geolocation_url: str = Field(
        default=DEFAULT_GEOLOCATION_URL,
        description="Geolocation service; the IP is appended as a path segment",
    )
    flyover_url: str = Field(
        default=DEFAULT_FLYOVER_URL, description="ISS fly-over prediction service"
    )
    request_timeout_seconds: int = Field(
        default=10, description="Total timeout for each upstream request in seconds"
    )

    # Parsing
    validate_responses: bool = Field(
        default=True,
        description="Reject non-numeric coordinates and pass times instead of passing them through",
    )

    # Display configuration
    timezone: str = Field(
        default="UTC",
        description="Timezone for displaying rise times (IANA timezone name, e.g., 'Europe/Berlin')",
    )

    # Logging
    log_level: str = Field(default="WARNING", description="Root log level")
    log_requests: bool = Field(
        default=False, description="Log every outbound API request at INFO level"
    )

    @field_validator("request_timeout_seconds")
    @classmethod
    def validate_request_timeout(cls, v: int) -> int:
        """Validate the timeout is positive."""
        if v <= 0:
            raise ValueError("request_timeout_seconds must be greater than 0")
        return v

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Validate timezone is a known IANA name."""
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"timezone must be a valid IANA timezone name, got '{v}'") from e
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is one of the standard logging levels."""
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"log_level must be a standard logging level, got '{v}'")
        return level

    @field_validator("ip_lookup_url", "geolocation_url", "flyover_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Validate upstream URLs are http(s)."""
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"service URLs must start with http:// or https://, got '{v}'")
        return v
