"""
Prismatica Scales
=================

Continuous and classified color scales over a numeric domain.

Usage
-----
>>> from prismatica.scale import Scale
>>>
>>> scale = Scale(["white", "black"], space="lab")
>>> scale.get(0.5).hex()
'#777777'
>>> [c.hex() for c in Scale("RdYlGn", count=11, domain=[0, 100], classes=5).take(5)]
['#a50026', '#f98e52', '#ffffbf', '#86cb67', '#006837']

Pipeline
--------
fetch(x) classifies or normalizes x onto [0, 1], redistributes it over an
uneven domain, optionally corrects lightness, applies gamma and padding,
then interpolates between the color stops (linear or bezier).
"""

from .domain import DomainMap, classify, class_index, equal_limits, normalize
from .interpolator import (
    Interpolation,
    ConstantInterpolator,
    LinearInterpolator,
    BezierInterpolator,
    CustomInterpolator,
)
from .lightness import correct_lightness, lightness
from .scale import Scale

__all__ = [
    "Scale",
    "Interpolation",
    "ConstantInterpolator",
    "LinearInterpolator",
    "BezierInterpolator",
    "CustomInterpolator",
    "DomainMap",
    "classify",
    "class_index",
    "equal_limits",
    "normalize",
    "correct_lightness",
    "lightness",
]
