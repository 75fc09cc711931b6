from __future__ import annotations
from collections.abc import Mapping, Sequence
from typing import Any, Optional, Union

import numpy as np

from .color_base import ColorBase, build_registry
from .rgb import ColorRGB
from .hsl import ColorHSL
from .hsv import ColorHSV
from .lab import ColorLab, ColorLCH
from .oklab import ColorOKLab, ColorOKLCH
from ..conversions import wrapper
from ..errors import InvalidColorError, UnknownColorSpaceError
from ..parsing import parse_color_token, parse_hex_number
from ..types.color_types import ColorSpace
from ..utils.default import value_or_default
from ..utils.rounding import round_all

unified_space_to_class: dict[ColorSpace, type[ColorBase]] = {
    **build_registry(ColorRGB, ColorHSL, ColorHSV, ColorLab, ColorLCH, ColorOKLab, ColorOKLCH),
    ColorSpace.HCL: ColorLCH,
}

ColorLike = Union[ColorBase, str, int, Sequence, Mapping]


def get_color_class(color_space: Union[str, ColorSpace]) -> type[ColorBase]:
    space = ColorSpace.parse(color_space)
    color_class = unified_space_to_class.get(space)
    if color_class is None:
        raise UnknownColorSpaceError(f"{space.value} has no color representation")
    return color_class


def _leg_options(options: dict) -> dict:
    """Options that apply to both legs of a conversion through RGB."""
    return {"reference": options["reference"]} if options.get("reference") is not None else {}


def color_to_rgb(self: ColorBase, **options) -> ColorRGB:
    """
    Convert this color to sRGB.

    Args:
        **options: ``round`` digits (default 0) and, for Lab/LCH, ``reference``

    Returns:
        ColorRGB keeping this color's alpha
    """
    values = wrapper.to_rgb(self.mode, self.value, **options)
    return ColorRGB(values, self.alpha)


def rgb_to_rgb(self: ColorRGB, round: Optional[int] = None, **_options) -> ColorRGB:
    if round is None:
        return self
    return ColorRGB(round_all(self.value, round), self.alpha)


def color_from_rgb(cls: type[ColorBase], rgb: ColorRGB, **options) -> ColorBase:
    """Build an instance of ``cls`` from an sRGB color, keeping alpha."""
    if cls is ColorRGB:
        return rgb_to_rgb(rgb, **options)
    values = wrapper.from_rgb(cls.mode, rgb.value, **options)
    return cls(values, rgb.alpha)


def color_convert(self: ColorBase, to_space: Union[str, ColorSpace, None] = None, **options) -> ColorBase:
    """
    Convert this color to a different color space.

    The trip goes through unrounded sRGB. ``reference`` applies to both legs,
    ``round`` only to the result.

    Args:
        to_space: Target color space (e.g. "hsl", "lab", "oklch")
        **options: ``round`` and ``reference``

    Returns:
        New ColorBase instance in the target space
    """
    cls = get_color_class(value_or_default(to_space, self.mode))
    if cls is type(self) and not options:
        return self
    rgb = self if isinstance(self, ColorRGB) else self.to_rgb(round=None, **_leg_options(options))
    return cls.from_rgb(rgb, **options)


ColorBase.convert = color_convert
ColorBase.to_rgb = color_to_rgb
ColorBase.from_rgb = classmethod(color_from_rgb)
ColorRGB.to_rgb = rgb_to_rgb


def _channels_from_mapping(value: Mapping, cls: type[ColorBase], space: ColorSpace) -> tuple:
    names = cls.channels
    try:
        channels = [value[name] for name in names]
    except KeyError as exc:
        raise InvalidColorError(
            f"{space.value} color mapping needs keys {', '.join(names)}, missing: {exc.args[0]}"
        ) from None
    alpha = value.get("alpha", value.get("a"))
    return (*channels, 1.0 if alpha is None else alpha)


def new_color(
    value: ColorLike,
    space: Union[str, ColorSpace] = ColorSpace.RGB,
    alpha: Optional[float] = None,
    **options,
) -> ColorRGB:
    """
    Build a validated sRGB color from any supported input.

    Accepted inputs:
        - an existing color instance (converted to sRGB when needed)
        - a CSS color name or a 3/4/6/8-digit hex string
        - an integer 0xRRGGBB
        - a 3 or 4 item sequence of channels in ``space`` (alpha last)
        - a mapping of channel names in ``space``

    For ``space="hcl"`` sequences are read in (h, c, l) order.

    Args:
        value: Color input
        space: Space the channels are expressed in (default "rgb")
        alpha: Overrides the input alpha when given
        **options: Passed on to the conversion to sRGB (``reference``, ``round``)

    Returns:
        ColorRGB

    Raises:
        InvalidColorError: On malformed or out-of-range input
        UnknownColorSpaceError: On an unknown ``space``
        UnknownWhitepointError: On an unknown ``reference``
    """
    if isinstance(value, ColorBase):
        color = value.to_rgb(**options)
    elif isinstance(value, str):
        r, g, b, a = parse_color_token(value)
        color = ColorRGB((r, g, b), a)
    elif isinstance(value, (int, np.integer)) and not isinstance(value, bool):
        color = ColorRGB(parse_hex_number(int(value)))
    else:
        space = ColorSpace.parse(space)
        cls = get_color_class(space)
        if isinstance(value, Mapping):
            channels = _channels_from_mapping(value, cls, space)
        elif isinstance(value, (Sequence, np.ndarray)):
            channels = tuple(value)
            if space == ColorSpace.HCL and len(channels) in (3, 4):
                channels = (channels[2], channels[1], channels[0], *channels[3:])
        else:
            raise InvalidColorError(f"cannot build a color from {value!r}")
        color = cls(channels).to_rgb(**options)

    if alpha is not None:
        color = color.with_alpha(alpha)
    return color


def convert(color: ColorLike, to_space: Union[str, ColorSpace], **options) -> ColorBase:
    """Convert any color input to ``to_space``; see :meth:`ColorBase.convert`."""
    if not isinstance(color, ColorBase):
        color = new_color(color)
    return color.convert(to_space, **options)
