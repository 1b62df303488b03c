"""Presentation formatters."""

from iss_passes.adapters.formatters.pass_formatter import PassFormatter

__all__ = ["PassFormatter"]
