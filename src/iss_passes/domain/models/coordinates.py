"""Coordinates domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Coordinates:
    """Geographic position resolved for an IP address."""

    latitude: float
    longitude: float
