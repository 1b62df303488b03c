"""Domain layer - core models, errors and ports."""

from iss_passes.domain.errors import (
    InputError,
    PassLookupError,
    ResponseFormatError,
    SemanticError,
    StatusError,
)
from iss_passes.domain.models import Coordinates, PassEvent
from iss_passes.domain.ports import (
    AddressResolver,
    CoordinateResolver,
    PassPredictor,
)

__all__ = [
    "AddressResolver",
    "CoordinateResolver",
    "Coordinates",
    "InputError",
    "PassEvent",
    "PassLookupError",
    "PassPredictor",
    "ResponseFormatError",
    "SemanticError",
    "StatusError",
]
