"""
Prismatica Color Classes
========================

Immutable color classes for sRGB, HSL, HSV, CIE Lab, LCH, OKLab and
OKLCH, plus the mixing, averaging and blending operations built on them.

Features
--------
- Immutable color instances (frozen after initialization)
- Channel validation on construction, alpha in [0, 1]
- Conversion between every pair of spaces through sRGB
- Hex and CSS serialization of sRGB colors

Usage
-----
>>> from prismatica.colors import ColorRGB, new_color
>>>
>>> red = ColorRGB((255, 0, 0))
>>> red.convert("lab").value
(53.24, 80.09, 67.2)
>>> new_color("hotpink").hex()
'#ff69b4'
>>> new_color((330, 1, 0.6), space="hsl").rgb
(255, 51, 153)

Color Classes
-------------
    - ColorRGB (alias Color): r, g, b in [0, 255]
    - ColorHSL: h in [0, 360], s and l in [0, 1]
    - ColorHSV: h in [0, 360], s and v in [0, 1]
    - ColorLab: l in [0, 100], a* and b* unbounded
    - ColorLCH: l in [0, 100], c >= 0, h in [0, 360]
    - ColorOKLab: l in [0, 1], a* and b* in [-1, 1]
    - ColorOKLCH: l and c in [0, 1], h in [0, 360]

Every class carries an alpha channel in [0, 1], defaulting to 1.
"""

from .color_base import ColorBase
from .rgb import ColorRGB, Color
from .hsl import ColorHSL
from .hsv import ColorHSV
from .lab import ColorLab, ColorLCH
from .oklab import ColorOKLab, ColorOKLCH
from .color import (
    color_convert,
    convert,
    get_color_class,
    new_color,
    unified_space_to_class,
    ColorLike,
)
from .mixing import mix, average, interpolate_channels, mix_values, space_values
from .blend import blend, BlendMode

__all__ = [
    "ColorBase",
    "ColorRGB",
    "Color",
    "ColorHSL",
    "ColorHSV",
    "ColorLab",
    "ColorLCH",
    "ColorOKLab",
    "ColorOKLCH",
    "color_convert",
    "convert",
    "get_color_class",
    "new_color",
    "unified_space_to_class",
    "ColorLike",
    "mix",
    "average",
    "interpolate_channels",
    "mix_values",
    "space_values",
    "blend",
    "BlendMode",
]
