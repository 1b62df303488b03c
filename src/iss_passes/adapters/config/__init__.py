"""Configuration adapters."""

from iss_passes.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]
