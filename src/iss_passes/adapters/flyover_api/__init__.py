"""ISS fly-over prediction adapter."""

from iss_passes.adapters.flyover_api.flyover_pass_predictor import FlyoverPassPredictor

__all__ = ["FlyoverPassPredictor"]
