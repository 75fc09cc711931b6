from __future__ import annotations
from enum import Enum
from typing import Callable, Dict, Union

from boundednumbers.functions import clamp

from .color import ColorLike, new_color
from .rgb import ColorRGB
from ..errors import UnknownBlendModeError

CHANNEL_MAX = 255


class BlendMode(str, Enum):
    NORMAL = "normal"
    MULTIPLY = "multiply"
    DARKEN = "darken"
    LIGHTEN = "lighten"
    SCREEN = "screen"
    OVERLAY = "overlay"
    BURN = "burn"
    DODGE = "dodge"

    @classmethod
    def parse(cls, value: Union[str, BlendMode]) -> BlendMode:
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise UnknownBlendModeError(f"unknown blend mode: {value!r}")


# a is the bottom channel, b the top one, both in [0, 255]

def _normal(a: float, b: float) -> float:
    return b


def _multiply(a: float, b: float) -> float:
    return a * b / CHANNEL_MAX


def _darken(a: float, b: float) -> float:
    return min(a, b)


def _lighten(a: float, b: float) -> float:
    return max(a, b)


def _screen(a: float, b: float) -> float:
    return CHANNEL_MAX * (1 - (1 - a / CHANNEL_MAX) * (1 - b / CHANNEL_MAX))


def _overlay(a: float, b: float) -> float:
    if b < 128:
        return 2 * a * b / CHANNEL_MAX
    return CHANNEL_MAX * (1 - 2 * (1 - a / CHANNEL_MAX) * (1 - b / CHANNEL_MAX))


def _burn(a: float, b: float) -> float:
    if a == 0:
        return 0
    return CHANNEL_MAX * (1 - (1 - b / CHANNEL_MAX) / (a / CHANNEL_MAX))


def _dodge(a: float, b: float) -> float:
    if a == CHANNEL_MAX:
        return CHANNEL_MAX
    return min(CHANNEL_MAX, CHANNEL_MAX * (b / CHANNEL_MAX) / (1 - a / CHANNEL_MAX))


BLEND_FUNCTIONS: Dict[BlendMode, Callable[[float, float], float]] = {
    BlendMode.NORMAL: _normal,
    BlendMode.MULTIPLY: _multiply,
    BlendMode.DARKEN: _darken,
    BlendMode.LIGHTEN: _lighten,
    BlendMode.SCREEN: _screen,
    BlendMode.OVERLAY: _overlay,
    BlendMode.BURN: _burn,
    BlendMode.DODGE: _dodge,
}


def blend(bottom: ColorLike, top: ColorLike, mode: Union[str, BlendMode]) -> ColorRGB:
    """
    Blend two colors channel by channel in sRGB.

    Args:
        bottom: Base layer; its alpha is kept
        top: Blend layer
        mode: One of the BlendMode names

    Returns:
        ColorRGB with every channel clamped to [0, 255]
    """
    func = BLEND_FUNCTIONS[BlendMode.parse(mode)]
    base, layer = new_color(bottom), new_color(top)
    channels = tuple(
        clamp(func(a, b), 0, CHANNEL_MAX) for a, b in zip(base.value, layer.value)
    )
    return ColorRGB(channels, base.alpha)
