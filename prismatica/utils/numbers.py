import math
from numbers import Real
from typing import Any


def is_real(value: Any) -> bool:
    """True for real numbers, excluding booleans and NaN."""
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    return not math.isnan(value)


def is_unit(value: Any) -> bool:
    return is_real(value) and 0.0 <= value <= 1.0
