"""Contracts (protocols) for presentation helpers."""

from iss_passes.domain.contracts.pass_formatter import PassFormatterProtocol

__all__ = ["PassFormatterProtocol"]
