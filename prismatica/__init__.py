"""Prismatica: color conversion, mixing and scales."""
from __future__ import annotations
from typing import Optional, Union

from .colors.color_base import ColorBase
from .colors.rgb import ColorRGB, Color
from .colors.hsl import ColorHSL
from .colors.hsv import ColorHSV
from .colors.lab import ColorLab, ColorLCH
from .colors.oklab import ColorOKLab, ColorOKLCH
from .colors.color import convert, new_color, ColorLike
from .colors.mixing import mix, average
from .colors.blend import blend, BlendMode
from .conversions import Illuminant, kelvin_to_rgb, rgb_to_kelvin
from .palettes import load_palette, palette_sizes
from .scale import Scale, Interpolation
from .types.color_types import ColorSpace
from .errors import (
    ColorError,
    InvalidColorError,
    UnknownColorSpaceError,
    UnknownWhitepointError,
    InvalidRatioError,
    PaletteNotFoundError,
    ScaleError,
    UnknownBlendModeError,
)

DEFAULT_SCALE_COLORS = "white,black"


def rgb(r: float, g: float, b: float, alpha: Optional[float] = None) -> ColorRGB:
    return new_color((r, g, b), ColorSpace.RGB, alpha)


def hsl(h: float, s: float, l: float, alpha: Optional[float] = None) -> ColorRGB:
    """
    >>> hsl(330, 1, 0.6).rgb
    (255, 51, 153)
    """
    return new_color((h, s, l), ColorSpace.HSL, alpha)


def hsv(h: float, s: float, v: float, alpha: Optional[float] = None) -> ColorRGB:
    return new_color((h, s, v), ColorSpace.HSV, alpha)


def lab(l: float, a: float, b: float, alpha: Optional[float] = None, **options) -> ColorRGB:
    """
    >>> lab(40, -20, 50).rgb
    (83, 102, 0)
    """
    return new_color((l, a, b), ColorSpace.LAB, alpha, **options)


def lch(l: float, c: float, h: float, alpha: Optional[float] = None, **options) -> ColorRGB:
    return new_color((l, c, h), ColorSpace.LCH, alpha, **options)


def hcl(h: float, c: float, l: float, alpha: Optional[float] = None, **options) -> ColorRGB:
    """LCH with its arguments in (hue, chroma, lightness) order."""
    return new_color((h, c, l), ColorSpace.HCL, alpha, **options)


def oklab(l: float, a: float, b: float, alpha: Optional[float] = None) -> ColorRGB:
    return new_color((l, a, b), ColorSpace.OKLAB, alpha)


def oklch(l: float, c: float, h: float, alpha: Optional[float] = None) -> ColorRGB:
    return new_color((l, c, h), ColorSpace.OKLCH, alpha)


def temperature(kelvin: float, alpha: Optional[float] = None) -> ColorRGB:
    """
    Color of a black body at ``kelvin`` (0 to 30000).

    >>> temperature(4000).rgb
    (255, 208, 164)
    """
    return ColorRGB(kelvin_to_rgb(kelvin), alpha)


def scale(colors: Union[str, list, tuple, None] = DEFAULT_SCALE_COLORS, **options) -> Scale:
    """
    Build a color Scale; see :class:`prismatica.scale.Scale` for the options.

    >>> scale(["yellow", "darkgreen"]).get(0.5).hex()
    '#80b200'
    """
    return Scale(colors, **options)


__all__ = [
    # color classes
    "ColorBase",
    "ColorRGB",
    "Color",
    "ColorHSL",
    "ColorHSV",
    "ColorLab",
    "ColorLCH",
    "ColorOKLab",
    "ColorOKLCH",
    "ColorLike",
    "ColorSpace",
    "Illuminant",
    # construction
    "new_color",
    "rgb",
    "hsl",
    "hsv",
    "lab",
    "lch",
    "hcl",
    "oklab",
    "oklch",
    "temperature",
    "kelvin_to_rgb",
    "rgb_to_kelvin",
    # operations
    "convert",
    "mix",
    "average",
    "blend",
    "BlendMode",
    "scale",
    "Scale",
    "Interpolation",
    "load_palette",
    "palette_sizes",
    # errors
    "ColorError",
    "InvalidColorError",
    "UnknownColorSpaceError",
    "UnknownWhitepointError",
    "InvalidRatioError",
    "PaletteNotFoundError",
    "ScaleError",
    "UnknownBlendModeError",
]
