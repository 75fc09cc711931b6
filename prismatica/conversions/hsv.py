"""
HSV conversions.

HSV is reached through HSL rather than straight from RGB: both share the
same lightness, so v = l + s_l * min(l, 1 - l) and back.
"""
from __future__ import annotations
from typing import Optional, Tuple

from .hsl import rgb_to_hsl, hsl_to_rgb
from ..utils.rounding import round_all


def hsl_to_hsv(h: float, s: float, l: float) -> Tuple[float, float, float]:
    v = l + s * min(l, 1 - l)
    if v == 0:
        return h, 0.0, 0.0
    return h, 2 * (1 - l / v), v


def hsv_to_hsl(h: float, s: float, v: float) -> Tuple[float, float, float]:
    l = v * (1 - s / 2)
    if l == 0 or l == 1:
        return h, 0.0, l
    return h, (v - l) / min(l, 1 - l), l


def rgb_to_hsv(
    r: float, g: float, b: float, round: Optional[int] = None
) -> Tuple[float, float, float]:
    return round_all(hsl_to_hsv(*rgb_to_hsl(r, g, b)), round)


def hsv_to_rgb(
    h: float, s: float, v: float, round: Optional[int] = 0
) -> Tuple[float, float, float]:
    return hsl_to_rgb(*hsv_to_hsl(h, s, v), round=round)
