from __future__ import annotations
import math
from typing import Optional, Tuple

from .lab import rgb_to_lab, lab_to_rgb, DEFAULT_LAB_DIGITS
from .whitepoints import DEFAULT_ILLUMINANT
from .xyz import Reference
from ..utils.rounding import round_all, round_half_up

# chroma below this (after rounding) leaves the hue undefined
ACHROMATIC_DIGITS = 4


def cartesian_to_polar(l: float, a: float, b: float) -> Tuple[float, float, float]:
    """
    Express an opponent-axes triple (Lab or OKLab) as lightness, chroma, hue.

    Grays get a hue of exactly 0 rather than atan2 noise.
    """
    c = math.sqrt(a * a + b * b)
    if round_half_up(c, ACHROMATIC_DIGITS) == 0:
        h = 0.0
    else:
        h = math.degrees(math.atan2(b, a)) % 360
    return l, c, h


def polar_to_cartesian(l: float, c: float, h: float) -> Tuple[float, float, float]:
    angle = math.radians(h)
    return l, math.cos(angle) * c, math.sin(angle) * c


def lab_to_lch(l: float, a: float, b: float) -> Tuple[float, float, float]:
    return cartesian_to_polar(l, a, b)


def lch_to_lab(l: float, c: float, h: float) -> Tuple[float, float, float]:
    return polar_to_cartesian(l, c, h)


def rgb_to_lch(
    r: float,
    g: float,
    b: float,
    reference: Reference = DEFAULT_ILLUMINANT,
    round: Optional[int] = DEFAULT_LAB_DIGITS,
) -> Tuple[float, float, float]:
    """Lab is computed unrounded, then the polar triple is rounded."""
    lab = rgb_to_lab(r, g, b, reference, round=None)
    return round_all(lab_to_lch(*lab), round)


def lch_to_rgb(
    l: float,
    c: float,
    h: float,
    reference: Reference = DEFAULT_ILLUMINANT,
    round: Optional[int] = 0,
) -> Tuple[float, float, float]:
    return lab_to_rgb(*lch_to_lab(l, c, h), reference, round=round)
