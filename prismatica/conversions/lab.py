from __future__ import annotations
from typing import Optional, Tuple

from .constants import LAB_EPSILON, LAB_KAPPA
from .whitepoints import whitepoint, DEFAULT_ILLUMINANT
from .xyz import rgb_to_xyz, xyz_to_rgb, Reference
from ..utils.rounding import round_all

DEFAULT_LAB_DIGITS = 2


def _f(t: float) -> float:
    if t > LAB_EPSILON:
        return t ** (1 / 3)
    return (LAB_KAPPA * t + 16) / 116


def xyz_to_lab(
    x: float, y: float, z: float, reference: Reference = DEFAULT_ILLUMINANT
) -> Tuple[float, float, float]:
    """CIE 1976 L*a*b* from XYZ; x and z are divided by the reference white."""
    white = whitepoint(reference)
    fx = _f(x / white.x)
    fy = _f(y)
    fz = _f(z / white.z)
    return 116 * fy - 16, 500 * (fx - fy), 200 * (fy - fz)


def lab_to_xyz(
    l: float, a: float, b: float, reference: Reference = DEFAULT_ILLUMINANT
) -> Tuple[float, float, float]:
    white = whitepoint(reference)
    fy = (l + 16) / 116
    fx = 0.002 * a + fy
    fz = fy - 0.005 * b

    fx3 = fx ** 3
    fz3 = fz ** 3
    xr = fx3 if fx3 > LAB_EPSILON else (116 * fx - 16) / LAB_KAPPA
    yr = fy ** 3 if l > LAB_EPSILON * LAB_KAPPA else l / LAB_KAPPA
    zr = fz3 if fz3 > LAB_EPSILON else (116 * fz - 16) / LAB_KAPPA
    return xr * white.x, yr, zr * white.z


def rgb_to_lab(
    r: float,
    g: float,
    b: float,
    reference: Reference = DEFAULT_ILLUMINANT,
    round: Optional[int] = DEFAULT_LAB_DIGITS,
) -> Tuple[float, float, float]:
    """
    Convert sRGB bytes to Lab.

    Args:
        r, g, b: Channels in [0, 255]
        reference: Reference illuminant id (default "d65")
        round: Decimal digits (half-up), None to skip rounding

    Returns:
        Tuple[float, float, float]: (l, a, b)
    """
    lab = xyz_to_lab(*rgb_to_xyz(r, g, b, reference), reference)
    return round_all(lab, round)


def lab_to_rgb(
    l: float,
    a: float,
    b: float,
    reference: Reference = DEFAULT_ILLUMINANT,
    round: Optional[int] = 0,
) -> Tuple[float, float, float]:
    """Convert Lab to sRGB bytes, clamping out-of-gamut channels."""
    return xyz_to_rgb(*lab_to_xyz(l, a, b, reference), reference, round=round)
