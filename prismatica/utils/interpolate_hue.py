"""
Hue interpolation utilities.

Hues are angles in degrees. Interpolation follows the shortest arc, so
blending 350 and 10 passes through 0 instead of sweeping across 180.
"""
from __future__ import annotations
import math
from typing import Iterable, Optional, Sequence

from boundednumbers.functions import cyclic_wrap_float


def normalize_hue(h: float) -> float:
    """Normalize hue to [0, 360) range."""
    return h % 360


def shortest_hue_delta(h0: float, h1: float) -> float:
    """Signed angular distance from h0 to h1 along the shorter arc."""
    if h1 > h0 and h1 - h0 > 180:
        return h1 - (h0 + 360)
    if h1 < h0 and h0 - h1 > 180:
        return h1 + 360 - h0
    return h1 - h0


def interpolate_hue(
    h0: float,
    h1: float,
    u: float,
    *,
    h0_defined: bool = True,
    h1_defined: bool = True,
) -> float:
    """
    Interpolate between two hues along the shortest arc.

    A hue flagged as undefined (achromatic color) takes the other side's
    value, so mixing with a gray does not sweep through unrelated hues.

    Args:
        h0: Start hue in degrees
        h1: End hue in degrees
        u: Interpolation coefficient in [0, 1]
        h0_defined: Whether h0 carries information
        h1_defined: Whether h1 carries information

    Returns:
        Interpolated hue in [0, 360)
    """
    if h0_defined and not h1_defined:
        h1 = h0
    elif h1_defined and not h0_defined:
        h0 = h1
    hue = h0 + u * shortest_hue_delta(h0, h1)
    return normalize_hue(cyclic_wrap_float(hue, 0.0, 360.0))


def mean_hue(hues: Sequence[float], weights: Optional[Iterable[float]] = None) -> float:
    """Weighted circular mean of hues via their unit vectors."""
    if weights is None:
        weights = [1.0] * len(hues)
    dx = dy = total = 0.0
    for hue, weight in zip(hues, weights):
        angle = math.radians(hue)
        dx += math.cos(angle) * weight
        dy += math.sin(angle) * weight
        total += weight
    if total == 0:
        return 0.0
    return normalize_hue(math.degrees(math.atan2(dy / total, dx / total)))
