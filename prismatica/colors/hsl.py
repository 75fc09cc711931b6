from typing import ClassVar, Tuple

from ..types.color_types import ColorSpace
from .color_base import ColorBase, Bounds, channel_property


class ColorHSL(ColorBase):
    __slots__ = ()

    mode: ClassVar[ColorSpace] = ColorSpace.HSL
    channels: ClassVar[Tuple[str, ...]] = ("h", "s", "l")
    bounds: ClassVar[Tuple[Bounds, ...]] = ((0, 360), (0, 1), (0, 1))

    h = channel_property(0)
    s = channel_property(1)
    l = channel_property(2)
