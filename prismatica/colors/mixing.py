"""
Channel-wise mixing and averaging of colors in any supported space.

Hue channels interpolate along the shortest arc and average as unit
vectors. ``lrgb`` works on squared channels, approximating linear light.
"""
from __future__ import annotations
import math
from typing import Iterable, Optional, Sequence, Tuple, Union

from .color import ColorLike, new_color
from .rgb import ColorRGB
from ..conversions import wrapper
from ..errors import InvalidColorError, InvalidRatioError
from ..types.color_types import ColorSpace, HUE_CHANNELS, CHROMA_CHANNELS
from ..utils.interpolate_hue import interpolate_hue, mean_hue
from ..utils.numbers import is_real, is_unit
from ..utils.rounding import round_half_up

DEFAULT_MIX_SPACE = ColorSpace.LRGB
# alpha within this distance of 1 after averaging is snapped to opaque
ALPHA_SNAP = 0.99999


def space_values(color: ColorRGB, space: Union[str, ColorSpace]) -> Tuple[float, ...]:
    """Unrounded channels of an sRGB color expressed in ``space``."""
    return wrapper.from_rgb(space, color.value, round=None)


def _has_hue(values: Sequence[float], space: ColorSpace) -> bool:
    chroma = values[CHROMA_CHANNELS[space]]
    return round_half_up(chroma, 4) != 0


def interpolate_channels(
    space: Union[str, ColorSpace],
    start: Sequence[float],
    end: Sequence[float],
    f: float,
) -> Tuple[float, ...]:
    """
    Interpolate two channel triples of ``space`` at fraction ``f``.

    Args:
        space: Color space the triples are expressed in
        start: Channels at f = 0
        end: Channels at f = 1
        f: Fraction in [0, 1]

    Returns:
        Interpolated channel triple
    """
    space = ColorSpace.parse(space)
    if space == ColorSpace.LRGB:
        return tuple(math.sqrt(x0 ** 2 * (1 - f) + x1 ** 2 * f) for x0, x1 in zip(start, end))

    hue_index = HUE_CHANNELS.get(space)
    result = []
    for i, (x0, x1) in enumerate(zip(start, end)):
        if i == hue_index:
            result.append(interpolate_hue(
                x0, x1, f,
                h0_defined=_has_hue(start, space),
                h1_defined=_has_hue(end, space),
            ))
        else:
            result.append(x0 + f * (x1 - x0))
    return tuple(result)


def mix_values(
    space: Union[str, ColorSpace],
    start: Sequence[float],
    start_alpha: float,
    end: Sequence[float],
    end_alpha: float,
    f: float,
) -> ColorRGB:
    """Mix two pre-converted channel triples and return the sRGB result."""
    values = interpolate_channels(space, start, end, f)
    rgb = wrapper.channels_to_rgb(space, values)
    return ColorRGB(rgb, start_alpha + f * (end_alpha - start_alpha))


def mix(
    color1: ColorLike,
    color2: ColorLike,
    ratio: float = 0.5,
    space: Union[str, ColorSpace] = DEFAULT_MIX_SPACE,
) -> ColorRGB:
    """
    Mix two colors.

    Args:
        color1: Color at ratio 0
        color2: Color at ratio 1
        ratio: Weight of ``color2`` in [0, 1]
        space: Space to interpolate in (default "lrgb")

    Returns:
        ColorRGB, unrounded

    Raises:
        InvalidRatioError: If ratio is outside [0, 1]
    """
    if not is_unit(ratio):
        raise InvalidRatioError(f"expected a ratio between 0 and 1, got: {ratio}")
    space = ColorSpace.parse(space)
    start, end = new_color(color1), new_color(color2)
    return mix_values(
        space,
        space_values(start, space), start.alpha,
        space_values(end, space), end.alpha,
        ratio,
    )


def _normalized_weights(weights: Optional[Iterable[float]], count: int) -> list[float]:
    if weights is None:
        return [1.0] * count
    weights = list(weights)
    if len(weights) != count:
        raise InvalidColorError(f"expected {count} weights, got {len(weights)}")
    if any(not is_real(w) or w < 0 for w in weights) or sum(weights) <= 0:
        raise InvalidColorError(f"weights must be non-negative numbers with a positive sum, got: {weights}")
    k = count / sum(weights)
    return [w * k for w in weights]


def average(
    colors: Sequence[ColorLike],
    space: Union[str, ColorSpace] = DEFAULT_MIX_SPACE,
    weights: Optional[Iterable[float]] = None,
) -> ColorRGB:
    """
    Weighted average of several colors.

    Args:
        colors: Colors to average
        space: Space to average in (default "lrgb")
        weights: One weight per color; equal weights when omitted

    Returns:
        ColorRGB

    Raises:
        InvalidColorError: On an empty list, a bad color or mismatched weights
        UnknownColorSpaceError: On an unknown space
    """
    space = ColorSpace.parse(space)
    rgbs = [new_color(c) for c in colors]
    count = len(rgbs)
    if count == 0:
        raise InvalidColorError("cannot average an empty list of colors")
    weights = _normalized_weights(weights, count)

    alpha = sum(c.alpha * w for c, w in zip(rgbs, weights)) / count
    alpha = 1.0 if alpha > ALPHA_SNAP else alpha

    if space == ColorSpace.LRGB:
        rgb = tuple(
            math.sqrt(sum(c.value[i] ** 2 * w for c, w in zip(rgbs, weights)) / count)
            for i in range(3)
        )
        return ColorRGB(rgb, alpha)

    values = [space_values(c, space) for c in rgbs]
    hue_index = HUE_CHANNELS.get(space)
    channels = []
    for i in range(3):
        if i == hue_index:
            hued = [(v[i], w) for v, w in zip(values, weights) if _has_hue(v, space)]
            channels.append(mean_hue([h for h, _ in hued], [w for _, w in hued]) if hued else 0.0)
        else:
            channels.append(sum(v[i] * w for v, w in zip(values, weights)) / count)
    return ColorRGB(wrapper.channels_to_rgb(space, channels), alpha)
