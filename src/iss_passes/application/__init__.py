"""Application layer - use cases."""

from iss_passes.application.services import PassPredictionService

__all__ = ["PassPredictionService"]
