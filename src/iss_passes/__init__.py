"""Upcoming ISS passes for the caller's current location."""

__version__ = "0.1.0"
