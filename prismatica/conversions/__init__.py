"""
Prismatica Color Space Conversions
==================================

Scalar conversion functions between sRGB and the other supported spaces.
Every space is reached from sRGB bytes, and XYZ is the hub for the
CIE and OK families.

Conversion Functions
--------------------

sRGB <-> XYZ:
    rgb_to_xyz(r, g, b, reference="d65")
    xyz_to_rgb(x, y, z, reference="d65", round=0)
        Companding plus Bradford adaptation to the reference illuminant

sRGB <-> Lab / LCH:
    rgb_to_lab, lab_to_rgb, rgb_to_lch, lch_to_rgb
        Relative to a reference illuminant (default D65)

sRGB <-> OKLab / OKLCH:
    rgb_to_oklab, oklab_to_rgb, rgb_to_oklch, oklch_to_rgb
        Fixed to D65

sRGB <-> HSL / HSV:
    rgb_to_hsl, hsl_to_rgb, rgb_to_hsv, hsv_to_rgb, hsl_to_hsv, hsv_to_hsl

Temperature:
    kelvin_to_rgb(kelvin), rgb_to_kelvin(r, g, b)

Rounding
--------
Functions that return RGB take ``round=0`` (whole bytes) and the others
have their own default digits. Rounding is half-up; ``round=None``
keeps full precision.
"""

from .whitepoints import Illuminant, Whitepoint, WHITEPOINTS, whitepoint, DEFAULT_ILLUMINANT
from .xyz import rgb_to_xyz, xyz_to_rgb, srgb_to_linear, linear_to_srgb
from .lab import rgb_to_lab, lab_to_rgb, xyz_to_lab, lab_to_xyz
from .lch import rgb_to_lch, lch_to_rgb, lab_to_lch, lch_to_lab
from .oklab import (
    rgb_to_oklab,
    oklab_to_rgb,
    rgb_to_oklch,
    oklch_to_rgb,
    xyz_to_oklab,
    oklab_to_xyz,
)
from .hsl import rgb_to_hsl, hsl_to_rgb
from .hsv import rgb_to_hsv, hsv_to_rgb, hsl_to_hsv, hsv_to_hsl
from .temperature import kelvin_to_rgb, rgb_to_kelvin
from .wrapper import convert, from_rgb, to_rgb, channels_to_rgb

__all__ = [
    "Illuminant",
    "Whitepoint",
    "WHITEPOINTS",
    "whitepoint",
    "DEFAULT_ILLUMINANT",
    "rgb_to_xyz",
    "xyz_to_rgb",
    "srgb_to_linear",
    "linear_to_srgb",
    "rgb_to_lab",
    "lab_to_rgb",
    "xyz_to_lab",
    "lab_to_xyz",
    "rgb_to_lch",
    "lch_to_rgb",
    "lab_to_lch",
    "lch_to_lab",
    "rgb_to_oklab",
    "oklab_to_rgb",
    "rgb_to_oklch",
    "oklch_to_rgb",
    "xyz_to_oklab",
    "oklab_to_xyz",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "rgb_to_hsv",
    "hsv_to_rgb",
    "hsl_to_hsv",
    "hsv_to_hsl",
    "kelvin_to_rgb",
    "rgb_to_kelvin",
    "convert",
    "from_rgb",
    "to_rgb",
    "channels_to_rgb",
]
