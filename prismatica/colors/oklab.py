from typing import ClassVar, Tuple

from ..types.color_types import ColorSpace
from .color_base import ColorBase, Bounds, channel_property

# OKLab channels may overshoot [-1, 1] by float noise from the matrix chain
OKLAB_SLACK = 1e-5


class ColorOKLab(ColorBase):
    """OKLab, always relative to D65."""
    __slots__ = ()

    mode: ClassVar[ColorSpace] = ColorSpace.OKLAB
    channels: ClassVar[Tuple[str, ...]] = ("l", "a_star", "b_star")
    bounds: ClassVar[Tuple[Bounds, ...]] = (
        (-OKLAB_SLACK, 1 + OKLAB_SLACK),
        (-1 - OKLAB_SLACK, 1 + OKLAB_SLACK),
        (-1 - OKLAB_SLACK, 1 + OKLAB_SLACK),
    )

    l = channel_property(0)
    a_star = channel_property(1)
    b_star = channel_property(2)


class ColorOKLCH(ColorBase):
    __slots__ = ()

    mode: ClassVar[ColorSpace] = ColorSpace.OKLCH
    channels: ClassVar[Tuple[str, ...]] = ("l", "c", "h")
    bounds: ClassVar[Tuple[Bounds, ...]] = ((0, 1), (0, 1), (0, 360))

    l = channel_property(0)
    c = channel_property(1)
    h = channel_property(2)
