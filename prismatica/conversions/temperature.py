"""
Black-body temperature approximations.

The forward mapping is Tanner Helland's regression with Neil Bartlett's
refitted coefficients. The inverse has no closed form, so it bisects on
the blue/red ratio of the forward mapping.
"""
from __future__ import annotations
import math
from typing import Optional, Tuple

from boundednumbers.functions import clamp

from .constants import BYTE_MAX
from ..errors import InvalidColorError
from ..utils.numbers import is_real
from ..utils.rounding import maybe_round, round_half_up

MIN_KELVIN = 0
MAX_KELVIN = 30000

SEARCH_MIN_KELVIN = 1000
SEARCH_MAX_KELVIN = 40000
SEARCH_EPSILON = 0.4


def _byte(value: float) -> int:
    return round_half_up(clamp(value, 0, BYTE_MAX))


def _red(t: float) -> int:
    if t < 66:
        return BYTE_MAX
    return _byte(
        351.97690566805693 + 0.114206453784165 * (t - 55) - 40.25366309332127 * math.log(t - 55)
    )


def _green(t: float) -> int:
    if t < 6:
        return 0
    if t < 66:
        return _byte(
            -155.25485562709179 - 0.44596950469579133 * (t - 2) + 104.49216199393888 * math.log(t - 2)
        )
    return _byte(
        325.4494125711974 + 0.07943456536662342 * (t - 50) - 28.0852963507957 * math.log(t - 50)
    )


def _blue(t: float) -> int:
    if t < 20:
        return 0
    if t < 66:
        return _byte(
            -254.76935184120902 + 0.8274096064007395 * (t - 10) + 115.67994401066147 * math.log(t - 10)
        )
    return BYTE_MAX


def kelvin_to_rgb(kelvin: float) -> Tuple[int, int, int]:
    """
    Approximate the sRGB color of a black body at the given temperature.

    Args:
        kelvin: Temperature in [0, 30000]

    Returns:
        Tuple[int, int, int]: (r, g, b) bytes

    Raises:
        InvalidColorError: If kelvin is not a number in range
    """
    if not is_real(kelvin) or not MIN_KELVIN <= kelvin <= MAX_KELVIN:
        raise InvalidColorError(
            f"temperature must be between {MIN_KELVIN} and {MAX_KELVIN}, got: {kelvin!r}"
        )
    t = kelvin / 100
    return _red(t), _green(t), _blue(t)


def _ratio(r: float, b: float) -> float:
    return math.inf if r == 0 else b / r


def rgb_to_kelvin(r: float, g: float, b: float, round: Optional[int] = 0) -> float | int:
    """
    Estimate the temperature of a color by bisection on the blue/red ratio.

    Only the red and blue channels matter. Colors whose ratio is not reached
    within [1000, 40000] K return the nearest search bound. The result is
    rounded half-up to ``round`` digits, whole kelvin by default.
    """
    target = _ratio(r, b)
    low, high = SEARCH_MIN_KELVIN, SEARCH_MAX_KELVIN
    temp = (low + high) / 2
    while high - low > SEARCH_EPSILON:
        temp = (low + high) / 2
        tr, _, tb = _search_rgb(temp)
        if _ratio(tr, tb) >= target:
            high = temp
        else:
            low = temp
    return maybe_round(temp, round)


def _search_rgb(kelvin: float) -> Tuple[int, int, int]:
    # the search range runs past the public maximum
    t = kelvin / 100
    return _red(t), _green(t), _blue(t)
