"""Type checks applied to numeric fields of upstream responses."""

import math
from numbers import Real
from typing import Any

from iss_passes.domain.errors import ResponseFormatError


def _require_real(value: Any, field: str) -> Real:
    # bool is an int subclass but never a valid coordinate or timestamp
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ResponseFormatError(f"Field '{field}' must be numeric, got {value!r}")
    try:
        finite = math.isfinite(value)
    except OverflowError:
        # JSON integers too large for a float
        finite = False
    if not finite:
        raise ResponseFormatError(f"Field '{field}' must be numeric and finite, got {value!r}")
    return value


def parse_float(value: Any, field: str) -> float:
    """Return value as float, raising ResponseFormatError if it is not a number."""
    return float(_require_real(value, field))


def parse_int(value: Any, field: str) -> int:
    """Return value as int, raising ResponseFormatError unless it is an integral number."""
    number = _require_real(value, field)
    if number != int(number):
        raise ResponseFormatError(f"Field '{field}' must be a whole number, got {value!r}")
    return int(number)
