from __future__ import annotations
from enum import Enum
from math import comb
from typing import Callable, List, Sequence, Tuple, Union

from ..colors.color_base import ColorBase
from ..colors.mixing import mix_values, space_values
from ..colors.rgb import ColorRGB
from ..conversions import wrapper
from ..errors import ScaleError
from ..types.color_types import ColorSpace


class Interpolation(str, Enum):
    LINEAR = "linear"
    BEZIER = "bezier"

    @classmethod
    def parse(cls, value: Union[str, Interpolation]) -> Interpolation:
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise ScaleError(f"unknown interpolation: {value!r}")


class _ScaleInterpolator:
    """Maps a position t in [0, 1] to an sRGB color."""
    __slots__ = ()

    def __call__(self, t: float) -> ColorRGB:
        raise NotImplementedError


class ConstantInterpolator(_ScaleInterpolator):
    __slots__ = ('_color',)

    def __init__(self, color: ColorRGB) -> None:
        self._color = color

    def __call__(self, t: float) -> ColorRGB:
        return self._color


class LinearInterpolator(_ScaleInterpolator):
    """
    Piecewise mixing between neighbouring colors.

    ``positions`` are the non-decreasing stops of each color in [0, 1]; t at
    or below a stop returns that stop's color unchanged.
    """
    __slots__ = ('_space', '_colors', '_positions', '_values')

    def __init__(self, space: ColorSpace, colors: Sequence[ColorRGB], positions: Sequence[float]) -> None:
        self._space = space
        self._colors: Tuple[ColorRGB, ...] = tuple(colors)
        self._positions: Tuple[float, ...] = tuple(positions)
        self._values: List[Tuple[float, ...]] = [space_values(c, space) for c in self._colors]

    def __call__(self, t: float) -> ColorRGB:
        positions = self._positions
        last = len(positions) - 1
        for i, p in enumerate(positions):
            if t <= p:
                return self._colors[i]
            if i == last:
                return self._colors[i]
            nxt = positions[i + 1]
            if p < t < nxt:
                f = (t - p) / (nxt - p)
                return mix_values(
                    self._space,
                    self._values[i], self._colors[i].alpha,
                    self._values[i + 1], self._colors[i + 1].alpha,
                    f,
                )
        return self._colors[-1]


class BezierInterpolator(_ScaleInterpolator):
    """
    Bezier curve through Lab (or OKLab) channels, with the colors as
    control points. Only the first and last colors lie on the curve.
    """
    __slots__ = ('_space', '_values')

    def __init__(self, space: ColorSpace, colors: Sequence[ColorRGB]) -> None:
        self._space = space
        self._values: List[Tuple[float, ...]] = [space_values(c, space) for c in colors]

    def __call__(self, t: float) -> ColorRGB:
        n = len(self._values) - 1
        weights = [comb(n, i) * (1 - t) ** (n - i) * t ** i for i in range(n + 1)]
        channels = tuple(
            sum(w * v[k] for w, v in zip(weights, self._values))
            for k in range(3)
        )
        return ColorRGB(wrapper.channels_to_rgb(self._space, channels))


class CustomInterpolator(_ScaleInterpolator):
    __slots__ = ('_func',)

    def __init__(self, func: Callable[[float], ColorBase]) -> None:
        self._func = func

    def __call__(self, t: float) -> ColorRGB:
        color = self._func(t)
        if not isinstance(color, ColorBase):
            raise ScaleError(f"interpolator must return a color, got: {color!r}")
        if isinstance(color, ColorRGB):
            return color
        return color.to_rgb(round=None)


__all__ = [
    "Interpolation",
    "ConstantInterpolator",
    "LinearInterpolator",
    "BezierInterpolator",
    "CustomInterpolator",
]
