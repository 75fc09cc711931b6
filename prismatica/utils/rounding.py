from __future__ import annotations
import math
from typing import Optional, Tuple


def round_half_up(value: float, digits: int = 0) -> float | int:
    """
    Round half away from zero, unlike the builtin ``round`` which rounds to even.

    Args:
        value: Number to round
        digits: Decimal digits to keep

    Returns:
        An int when ``digits`` is 0, otherwise a float.
    """
    factor = 10 ** digits
    magnitude = math.floor(abs(value) * factor + 0.5) / factor
    if digits == 0:
        return int(math.copysign(magnitude, value))
    return math.copysign(magnitude, value)


def maybe_round(value: float, digits: Optional[int]) -> float | int:
    """Round with :func:`round_half_up` unless ``digits`` is None."""
    if digits is None:
        return float(value)
    return round_half_up(value, digits)


def round_all(values, digits: Optional[int]) -> Tuple:
    return tuple(maybe_round(v, digits) for v in values)
