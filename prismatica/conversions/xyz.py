from __future__ import annotations
import math
from typing import Optional, Tuple, Union

import numpy as np
from boundednumbers.functions import clamp

from .constants import (
    RGB_TO_XYZ,
    XYZ_TO_RGB,
    BRADFORD,
    BRADFORD_INV,
    SRGB_LINEAR_THRESHOLD,
    SRGB_COMPAND_THRESHOLD,
    SRGB_GAMMA,
    BYTE_MAX,
)
from .whitepoints import Whitepoint, Illuminant, whitepoint, DEFAULT_ILLUMINANT
from ..utils.rounding import round_all

Reference = Union[str, Illuminant, Whitepoint]

# sRGB primaries are defined against D65
_SOURCE_CONE = BRADFORD @ whitepoint(Illuminant.D65).as_array()
_SOURCE_CONE.setflags(write=False)


def srgb_to_linear(c: float) -> float:
    """Inverse sRGB companding of a unit channel, sign preserving."""
    magnitude = abs(c)
    if magnitude > SRGB_LINEAR_THRESHOLD:
        linear = ((magnitude + 0.055) / 1.055) ** SRGB_GAMMA
    else:
        linear = magnitude / 12.92
    return math.copysign(linear, c)


def linear_to_srgb(c: float) -> float:
    """sRGB companding of a linear unit channel, sign preserving."""
    magnitude = abs(c)
    if magnitude > SRGB_COMPAND_THRESHOLD:
        encoded = 1.055 * magnitude ** (1 / SRGB_GAMMA) - 0.055
    else:
        encoded = 12.92 * magnitude
    return math.copysign(encoded, c)


def _adaptation_ratio(reference: Reference) -> np.ndarray:
    """Per-channel cone response ratio from D65 to the reference."""
    target_cone = BRADFORD @ whitepoint(reference).as_array()
    return target_cone / _SOURCE_CONE


def rgb_to_xyz(
    r: float, g: float, b: float, reference: Reference = DEFAULT_ILLUMINANT
) -> Tuple[float, float, float]:
    """
    Convert sRGB bytes to XYZ relative to a reference illuminant.

    Args:
        r, g, b: Channels in [0, 255]
        reference: Target illuminant; Bradford adaptation is applied from D65

    Returns:
        Tuple[float, float, float]: (x, y, z) with the reference white at y = 1
    """
    ratio = _adaptation_ratio(reference)
    linear = np.array(
        [srgb_to_linear(c / BYTE_MAX) for c in (r, g, b)], dtype=np.float64
    )
    xyz = RGB_TO_XYZ @ linear
    adapted = BRADFORD_INV @ ((BRADFORD @ xyz) * ratio)
    x, y, z = adapted.tolist()
    return x, y, z


def xyz_to_rgb(
    x: float,
    y: float,
    z: float,
    reference: Reference = DEFAULT_ILLUMINANT,
    round: Optional[int] = 0,
) -> Tuple[float, float, float]:
    """
    Convert XYZ relative to a reference illuminant back to sRGB bytes.

    Channels falling outside the gamut are clamped to [0, 255].

    Args:
        x, y, z: Tristimulus values
        reference: Illuminant the values are relative to
        round: Decimal digits for the output (half-up), None to keep floats

    Returns:
        Tuple: (r, g, b)
    """
    ratio = _adaptation_ratio(reference)
    xyz = np.array([x, y, z], dtype=np.float64)
    adapted = BRADFORD_INV @ ((BRADFORD @ xyz) / ratio)
    linear = XYZ_TO_RGB @ adapted
    channels = (
        clamp(linear_to_srgb(c) * BYTE_MAX, 0, BYTE_MAX) for c in linear.tolist()
    )
    return round_all(channels, round)
