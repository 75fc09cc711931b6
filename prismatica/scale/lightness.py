"""
Lightness correction: re-time a scale so that Lab lightness changes
linearly with t.
"""
from __future__ import annotations
import warnings
from typing import Callable

from ..colors.rgb import ColorRGB
from ..conversions.lab import rgb_to_lab

MAX_ITERATIONS = 20
LIGHTNESS_TOLERANCE = 0.01


def lightness(color: ColorRGB) -> float:
    return rgb_to_lab(*color.value, round=None)[0]


def correct_lightness(t: float, sample: Callable[[float], ColorRGB]) -> float:
    """
    Bisect for the position whose lightness matches the linear ramp.

    Args:
        t: Uncorrected position in [0, 1]
        sample: Raw interpolation of the scale

    Returns:
        Corrected position. If the search does not converge within
        MAX_ITERATIONS a RuntimeWarning is emitted and the last position is
        returned.
    """
    l0 = lightness(sample(0.0))
    l1 = lightness(sample(1.0))
    descending = l0 > l1
    target = l0 + (l1 - l0) * t

    diff = lightness(sample(t)) - target
    t0, t1 = 0.0, 1.0
    remaining = MAX_ITERATIONS
    while abs(diff) > LIGHTNESS_TOLERANCE and remaining > 0:
        remaining -= 1
        if descending:
            diff = -diff
        if diff < 0:
            t0 = t
            t += (t1 - t) * 0.5
        else:
            t1 = t
            t += (t0 - t) * 0.5
        diff = lightness(sample(t)) - target

    if abs(diff) > LIGHTNESS_TOLERANCE:
        warnings.warn(
            f"lightness correction did not converge after {MAX_ITERATIONS} iterations "
            f"(off by {abs(diff):.4f})",
            RuntimeWarning,
            stacklevel=3,
        )
    return t
