from __future__ import annotations
from enum import Enum
from typing import NamedTuple, Union

import numpy as np

from ..errors import UnknownWhitepointError


class Whitepoint(NamedTuple):
    x: float
    y: float
    z: float

    def as_array(self) -> np.ndarray:
        return np.array(self, dtype=np.float64)


class Illuminant(str, Enum):
    A = "a"
    B = "b"
    C = "c"
    D50 = "d50"
    D55 = "d55"
    D65 = "d65"
    E = "e"
    F2 = "f2"
    F7 = "f7"
    F11 = "f11"
    ICC = "icc"


WHITEPOINTS = {
    Illuminant.A: Whitepoint(1.0985, 1.0, 0.35585),
    Illuminant.B: Whitepoint(0.99072, 1.0, 0.85223),
    Illuminant.C: Whitepoint(0.98074, 1.0, 1.18232),
    Illuminant.D50: Whitepoint(0.96422, 1.0, 0.82521),
    Illuminant.D55: Whitepoint(0.95682, 1.0, 0.92419),
    Illuminant.D65: Whitepoint(0.95047, 1.0, 1.08883),
    Illuminant.E: Whitepoint(1.0, 1.0, 1.0),
    Illuminant.F2: Whitepoint(0.99186, 1.0, 0.67393),
    Illuminant.F7: Whitepoint(0.95041, 1.0, 1.08747),
    Illuminant.F11: Whitepoint(1.00962, 1.0, 0.6435),
    Illuminant.ICC: Whitepoint(0.96422, 1.0, 0.82521),
}

DEFAULT_ILLUMINANT = Illuminant.D65


def whitepoint(reference: Union[str, Illuminant, Whitepoint] = DEFAULT_ILLUMINANT) -> Whitepoint:
    """
    Look up the XYZ whitepoint of a reference illuminant.

    Args:
        reference: Illuminant id such as "d65", an Illuminant, or a Whitepoint

    Returns:
        The whitepoint, with y normalized to 1

    Raises:
        UnknownWhitepointError: If the id is not a known illuminant
    """
    if isinstance(reference, Whitepoint):
        return reference
    try:
        return WHITEPOINTS[Illuminant(reference.lower() if isinstance(reference, str) else reference)]
    except (ValueError, KeyError, AttributeError):
        raise UnknownWhitepointError(f"undefined reference point: {reference!r}") from None
