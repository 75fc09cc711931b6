from __future__ import annotations
from typing import Optional, Tuple

from boundednumbers.functions import clamp

from .constants import BYTE_MAX
from ..utils.rounding import round_all


def rgb_to_hsl(
    r: float, g: float, b: float, round: Optional[int] = None
) -> Tuple[float, float, float]:
    """
    Convert sRGB bytes to HSL.

    Args:
        r, g, b: Channels in [0, 255]
        round: Decimal digits (half-up), None to keep full precision

    Returns:
        Tuple[float, float, float]: (h, s, l) with h in [0, 360), s and l in [0, 1].
        Achromatic colors report h = 0 and s = 0.
    """
    r, g, b = r / BYTE_MAX, g / BYTE_MAX, b / BYTE_MAX
    v = max(r, g, b)
    d = v - min(r, g, b)
    l = (2 * v - d) / 2
    f = 1 - abs(2 * v - d - 1)
    s = 0.0 if f == 0 else d / f

    if d == 0:
        hue = 0.0
    elif v == r:
        hue = (g - b) / d
    elif v == g:
        hue = 2 + (b - r) / d
    else:
        hue = 4 + (r - g) / d
    if hue < 0:
        hue += 6

    return round_all((60 * hue, s, l), round)


def _hue_to_channel(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(
    h: float, s: float, l: float, round: Optional[int] = 0
) -> Tuple[float, float, float]:
    """Convert HSL to sRGB bytes; s == 0 yields a gray of lightness l."""
    if s == 0:
        channels = (l, l, l)
    else:
        q = l * (1 + s) if l < 0.5 else l + s - l * s
        p = 2 * l - q
        hk = (h % 360) / 360
        channels = (
            _hue_to_channel(p, q, hk + 1 / 3),
            _hue_to_channel(p, q, hk),
            _hue_to_channel(p, q, hk - 1 / 3),
        )
    return round_all((clamp(c * BYTE_MAX, 0, BYTE_MAX) for c in channels), round)
