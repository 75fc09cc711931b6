from __future__ import annotations
from typing import Callable, Dict, Sequence, Tuple, Union

from .hsl import rgb_to_hsl, hsl_to_rgb
from .hsv import rgb_to_hsv, hsv_to_rgb
from .lab import rgb_to_lab, lab_to_rgb
from .lch import rgb_to_lch, lch_to_rgb
from .oklab import rgb_to_oklab, oklab_to_rgb, rgb_to_oklch, oklch_to_rgb
from ..types.color_types import ColorSpace
from ..utils.rounding import round_all

Channels = Tuple[float, float, float]


def _identity(r: float, g: float, b: float, round=None, **_options) -> Channels:
    return round_all((r, g, b), round)


def _drop_reference(func: Callable[..., Channels]) -> Callable[..., Channels]:
    """Wrap a D65-only converter so it tolerates a ``reference`` option."""
    def wrapper(x: float, y: float, z: float, reference=None, **options) -> Channels:
        return func(x, y, z, **options)
    wrapper.__name__ = func.__name__
    wrapper.__doc__ = func.__doc__
    return wrapper


FROM_RGB: Dict[ColorSpace, Callable[..., Channels]] = {
    ColorSpace.RGB: _identity,
    ColorSpace.LRGB: _identity,
    ColorSpace.HSL: _drop_reference(rgb_to_hsl),
    ColorSpace.HSV: _drop_reference(rgb_to_hsv),
    ColorSpace.LAB: rgb_to_lab,
    ColorSpace.LCH: rgb_to_lch,
    ColorSpace.HCL: rgb_to_lch,
    ColorSpace.OKLAB: _drop_reference(rgb_to_oklab),
    ColorSpace.OKLCH: _drop_reference(rgb_to_oklch),
}

TO_RGB: Dict[ColorSpace, Callable[..., Channels]] = {
    ColorSpace.RGB: _identity,
    ColorSpace.LRGB: _identity,
    ColorSpace.HSL: _drop_reference(hsl_to_rgb),
    ColorSpace.HSV: _drop_reference(hsv_to_rgb),
    ColorSpace.LAB: lab_to_rgb,
    ColorSpace.LCH: lch_to_rgb,
    ColorSpace.HCL: lch_to_rgb,
    ColorSpace.OKLAB: _drop_reference(oklab_to_rgb),
    ColorSpace.OKLCH: _drop_reference(oklch_to_rgb),
}


def from_rgb(space: Union[str, ColorSpace], rgb: Sequence[float], **options) -> Channels:
    """
    Convert RGB channels into the given space.

    Args:
        space: Target color space
        rgb: (r, g, b) bytes
        **options: ``round`` digits and, for Lab/LCH, ``reference``

    Returns:
        Channel triple in the target space, in its class channel order
    """
    space = ColorSpace.parse(space)
    return FROM_RGB[space](*rgb, **options)


def to_rgb(space: Union[str, ColorSpace], values: Sequence[float], **options) -> Channels:
    """Convert a channel triple of the given space back to RGB bytes."""
    space = ColorSpace.parse(space)
    return TO_RGB[space](*values, **options)


def convert(
    values: Sequence[float],
    from_space: Union[str, ColorSpace],
    to_space: Union[str, ColorSpace],
    **options,
) -> Channels:
    """
    Convert a channel triple between any two spaces, going through RGB.

    The intermediate RGB stays unrounded; ``options`` apply to the final leg.
    """
    from_space = ColorSpace.parse(from_space)
    to_space = ColorSpace.parse(to_space)
    if from_space == to_space:
        return tuple(values)
    reference = options.get("reference")
    leg_options = {} if reference is None else {"reference": reference}
    rgb = to_rgb(from_space, values, round=None, **leg_options)
    return from_rgb(to_space, rgb, **options)


def channels_to_rgb(space: Union[str, ColorSpace], values: Sequence[float]) -> Channels:
    """Full-precision RGB of a channel triple; used by interpolation."""
    return to_rgb(space, values, round=None)


__all__ = ["FROM_RGB", "TO_RGB", "from_rgb", "to_rgb", "convert", "channels_to_rgb"]
