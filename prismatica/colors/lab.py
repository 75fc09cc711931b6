from typing import ClassVar, Tuple

from ..types.color_types import ColorSpace
from .color_base import ColorBase, Bounds, channel_property


class ColorLab(ColorBase):
    """
    CIE L*a*b*. The values carry no illuminant; pass ``reference`` when
    converting if they were computed against something other than D65.
    """
    __slots__ = ()

    mode: ClassVar[ColorSpace] = ColorSpace.LAB
    channels: ClassVar[Tuple[str, ...]] = ("l", "a_star", "b_star")
    bounds: ClassVar[Tuple[Bounds, ...]] = ((0, 100), None, None)

    l = channel_property(0)
    a_star = channel_property(1)
    b_star = channel_property(2)


class ColorLCH(ColorBase):
    __slots__ = ()

    mode: ClassVar[ColorSpace] = ColorSpace.LCH
    channels: ClassVar[Tuple[str, ...]] = ("l", "c", "h")
    bounds: ClassVar[Tuple[Bounds, ...]] = ((0, 100), (0, float("inf")), (0, 360))

    l = channel_property(0)
    c = channel_property(1)
    h = channel_property(2)
