from __future__ import annotations
from typing import ClassVar, Optional, Tuple

from ..conversions.temperature import rgb_to_kelvin
from ..types.color_types import ColorSpace
from ..utils.rounding import round_half_up
from .color_base import ColorBase, Bounds, channel_property


def _format_number(value: float) -> str:
    """Shortest text form of a number: 0.5 stays 0.5, 1.0 becomes 1."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


class ColorRGB(ColorBase):
    """
    sRGB color, the canonical representation every other space converts through.

    Channels are in [0, 255]; they may be fractional for interpolated colors
    and are rounded half-up on serialization.
    """
    __slots__ = ()

    mode: ClassVar[ColorSpace] = ColorSpace.RGB
    channels: ClassVar[Tuple[str, ...]] = ("r", "g", "b")
    bounds: ClassVar[Tuple[Bounds, ...]] = ((0, 255), (0, 255), (0, 255))

    r = channel_property(0)
    g = channel_property(1)
    b = channel_property(2)

    @property
    def rgb(self) -> Tuple[int, int, int]:
        """Channels rounded to whole bytes."""
        r, g, b = (round_half_up(c) for c in self._value)
        return r, g, b

    def hex(self) -> str:
        """
        Lowercase hex string: "#rrggbb", or "#rrggbbaa" when alpha is not 1.

        Returns:
            str: The hex representation
        """
        channels = list(self.rgb)
        if self._alpha != 1.0:
            channels.append(round_half_up(self._alpha * 255))
        return "#" + "".join(f"{c:02x}" for c in channels)

    def css(self) -> str:
        """CSS Color 4 form: "rgb(r g b)" or "rgb(r g b / a)"."""
        r, g, b = self.rgb
        if self._alpha == 1.0:
            return f"rgb({r} {g} {b})"
        return f"rgb({r} {g} {b} / {_format_number(self._alpha)})"

    def temperature(self, round: Optional[int] = 0) -> float | int:
        """Estimated black-body temperature in kelvin, from the blue/red ratio."""
        return rgb_to_kelvin(*self._value, round=round)

    def __str__(self) -> str:
        return self.hex()


Color = ColorRGB
