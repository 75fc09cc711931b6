from __future__ import annotations
from enum import Enum
from typing import Tuple, Union

from ..errors import UnknownColorSpaceError

Scalar = int | float
ScalarVector = Tuple[Scalar, ...]
ChannelValues = Tuple[float, float, float]


class ColorSpace(str, Enum):
    RGB = "rgb"
    LRGB = "lrgb"
    HSL = "hsl"
    HSV = "hsv"
    LAB = "lab"
    LCH = "lch"
    HCL = "hcl"
    OKLAB = "oklab"
    OKLCH = "oklch"

    @classmethod
    def parse(cls, value: Union[str, ColorSpace]) -> ColorSpace:
        """Resolve a space name (case-insensitive) or member into a ColorSpace."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise UnknownColorSpaceError(f"unknown color space: {value!r}")


# Index of the hue channel, in channel order of each space's color class
HUE_CHANNELS = {
    ColorSpace.HSL: 0,
    ColorSpace.HSV: 0,
    ColorSpace.LCH: 2,
    ColorSpace.HCL: 2,
    ColorSpace.OKLCH: 2,
}

# Index of the channel that is zero when the hue carries no information
CHROMA_CHANNELS = {
    ColorSpace.HSL: 1,
    ColorSpace.HSV: 1,
    ColorSpace.LCH: 1,
    ColorSpace.HCL: 1,
    ColorSpace.OKLCH: 1,
}

HUE_SPACES = set(HUE_CHANNELS)
LAB_LIKE_SPACES = {ColorSpace.LAB, ColorSpace.OKLAB}


def is_hue_space(color_space: Union[str, ColorSpace]) -> bool:
    """
    Check if the given color space carries a hue channel.

    Args:
        color_space: Color space name or member
    Returns:
        True for hsl, hsv, lch, hcl and oklch
    """
    return ColorSpace.parse(color_space) in HUE_SPACES
