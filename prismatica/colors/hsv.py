from typing import ClassVar, Tuple

from ..types.color_types import ColorSpace
from .color_base import ColorBase, Bounds, channel_property


class ColorHSV(ColorBase):
    __slots__ = ()

    mode: ClassVar[ColorSpace] = ColorSpace.HSV
    channels: ClassVar[Tuple[str, ...]] = ("h", "s", "v")
    bounds: ClassVar[Tuple[Bounds, ...]] = ((0, 360), (0, 1), (0, 1))

    h = channel_property(0)
    s = channel_property(1)
    v = channel_property(2)
