from __future__ import annotations
from typing import Optional, Tuple

import numpy as np

from .constants import XYZ_TO_LMS, LMS_TO_OKLAB, OKLAB_TO_LMS, LMS_TO_XYZ
from .lch import cartesian_to_polar, polar_to_cartesian
from .whitepoints import Illuminant
from .xyz import rgb_to_xyz, xyz_to_rgb
from ..utils.rounding import round_all

DEFAULT_OKLAB_DIGITS = 2


def xyz_to_oklab(x: float, y: float, z: float) -> Tuple[float, float, float]:
    lms = XYZ_TO_LMS @ np.array([x, y, z], dtype=np.float64)
    l, a, b = (LMS_TO_OKLAB @ np.cbrt(lms)).tolist()
    return l, a, b


def oklab_to_xyz(l: float, a: float, b: float) -> Tuple[float, float, float]:
    lms = OKLAB_TO_LMS @ np.array([l, a, b], dtype=np.float64)
    x, y, z = (LMS_TO_XYZ @ lms ** 3).tolist()
    return x, y, z


def rgb_to_oklab(
    r: float, g: float, b: float, round: Optional[int] = DEFAULT_OKLAB_DIGITS
) -> Tuple[float, float, float]:
    """
    Convert sRGB bytes to OKLab (always relative to D65).

    Args:
        r, g, b: Channels in [0, 255]
        round: Decimal digits (half-up), None to skip rounding

    Returns:
        Tuple[float, float, float]: (l, a, b)
    """
    oklab = xyz_to_oklab(*rgb_to_xyz(r, g, b, Illuminant.D65))
    return round_all(oklab, round)


def oklab_to_rgb(
    l: float, a: float, b: float, round: Optional[int] = 0
) -> Tuple[float, float, float]:
    return xyz_to_rgb(*oklab_to_xyz(l, a, b), Illuminant.D65, round=round)


def rgb_to_oklch(
    r: float, g: float, b: float, round: Optional[int] = DEFAULT_OKLAB_DIGITS
) -> Tuple[float, float, float]:
    oklab = rgb_to_oklab(r, g, b, round=None)
    return round_all(cartesian_to_polar(*oklab), round)


def oklch_to_rgb(
    l: float, c: float, h: float, round: Optional[int] = 0
) -> Tuple[float, float, float]:
    return oklab_to_rgb(*polar_to_cartesian(l, c, h), round=round)
