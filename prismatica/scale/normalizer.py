from __future__ import annotations
from collections.abc import Sequence
from typing import Any, Callable, List, Optional, Tuple, Union

from ..colors.color import new_color
from ..colors.rgb import ColorRGB
from ..errors import ScaleError
from ..palettes import DEFAULT_COUNT, load_palette
from ..types.color_types import ColorSpace, LAB_LIKE_SPACES
from ..utils.default import value_or_default
from ..utils.numbers import is_real
from .domain import equal_limits
from .interpolator import Interpolation

DEFAULT_COLORS = ("white", "black")
DEFAULT_DOMAIN = (0.0, 1.0)
DEFAULT_SPACE = ColorSpace.RGB
DEFAULT_BEZIER_SPACE = ColorSpace.LAB

ColorsInput = Union[str, Sequence, None]
InterpolationInput = Union[str, Interpolation, Callable[[float], Any]]


def _is_sorted(values: Sequence[float]) -> bool:
    return all(a <= b for a, b in zip(values, values[1:]))


def _numbers(values: Any, name: str) -> Tuple[float, ...]:
    if isinstance(values, (str, bytes)) or not isinstance(values, Sequence):
        raise ScaleError(f"{name} must be a sequence of numbers, got: {values!r}")
    if not all(is_real(v) for v in values):
        raise ScaleError(f"{name} must only contain numbers, got: {list(values)!r}")
    return tuple(values)


class _ScaleNormalizer:
    """Validation and defaults for the Scale constructor options."""
    __slots__ = ()

    @staticmethod
    def _normalize_colors(colors: ColorsInput, count: int = DEFAULT_COUNT) -> Tuple[ColorRGB, ...]:
        """
        Resolve the color stops of a scale to full-precision sRGB.

        A string is either a comma separated list of colors or a palette
        name. None gives white to black.
        """
        colors = value_or_default(colors, DEFAULT_COLORS)
        if isinstance(colors, str):
            if "," not in colors:
                return tuple(load_palette(colors.strip(), count))
            colors = [token.strip() for token in colors.split(",")]
        elif not isinstance(colors, Sequence):
            colors = [colors]

        if len(colors) == 0:
            raise ScaleError("a scale needs at least one color")
        return tuple(new_color(c, round=None) for c in colors)

    @staticmethod
    def _normalize_domain(domain: Optional[Sequence[float]]) -> Tuple[float, ...]:
        if domain is None:
            return DEFAULT_DOMAIN
        values = _numbers(domain, "domain")
        if len(values) < 2:
            return DEFAULT_DOMAIN
        if not _is_sorted(values):
            raise ScaleError(f"domain must be non-decreasing, got: {list(values)!r}")
        return tuple(float(v) for v in values)

    @staticmethod
    def _normalize_padding(padding: Union[float, Sequence[float], None]) -> Tuple[float, float]:
        padding = value_or_default(padding, 0.0)
        if is_real(padding):
            return float(padding), float(padding)
        values = _numbers(padding, "padding")
        if len(values) != 2:
            raise ScaleError(f"padding must be a number or a (left, right) pair, got: {list(values)!r}")
        return float(values[0]), float(values[1])

    @staticmethod
    def _normalize_gamma(gamma: Optional[float]) -> float:
        gamma = value_or_default(gamma, 1.0)
        if not is_real(gamma) or gamma <= 0:
            raise ScaleError(f"gamma must be a positive number, got: {gamma!r}")
        return float(gamma)

    @staticmethod
    def _normalize_classes(
        classes: Union[int, Sequence[float], None],
        domain: Tuple[float, ...],
    ) -> Tuple[Optional[Tuple[float, ...]], Tuple[float, ...]]:
        """
        Breakpoints of a classified scale and the domain it ends up with.

        Breakpoints are only kept when there are more than two of them;
        explicit breakpoints also replace the domain with their extremes.
        """
        classes = value_or_default(classes, 0)
        if isinstance(classes, int) and not isinstance(classes, bool):
            if classes < 0:
                raise ScaleError(f"classes must be a non-negative integer, got: {classes}")
            if classes == 0:
                return None, domain
            limits = equal_limits(domain[0], domain[-1], classes)
            return (limits if len(limits) > 2 else None), domain

        limits = _numbers(classes, "classes")
        if not _is_sorted(limits):
            raise ScaleError(f"classes must be non-decreasing, got: {list(limits)!r}")
        if len(limits) <= 2:
            return None, domain
        limits = tuple(float(v) for v in limits)
        return limits, (limits[0], limits[-1])

    @staticmethod
    def _normalize_interpolation(
        interpolation: InterpolationInput,
        space: Union[str, ColorSpace, None],
    ) -> Tuple[Union[Interpolation, Callable], ColorSpace]:
        interpolation = value_or_default(interpolation, Interpolation.LINEAR)
        if callable(interpolation) and not isinstance(interpolation, (str, Interpolation)):
            return interpolation, ColorSpace.parse(value_or_default(space, DEFAULT_SPACE))

        kind = Interpolation.parse(interpolation)
        if kind == Interpolation.BEZIER:
            space = ColorSpace.parse(value_or_default(space, DEFAULT_BEZIER_SPACE))
            if space not in LAB_LIKE_SPACES:
                raise ScaleError(f"bezier interpolation needs a lab or oklab space, got: {space.value}")
            return kind, space
        return kind, ColorSpace.parse(value_or_default(space, DEFAULT_SPACE))

    @staticmethod
    def _positions(colors: Sequence[ColorRGB], domain: Tuple[float, ...]) -> List[float]:
        """Stops of each color in [0, 1]."""
        count = len(colors)
        low, high = domain[0], domain[-1]
        if len(domain) == count and high != low:
            return [(d - low) / (high - low) for d in domain]
        if count == 1:
            return [0.0]
        return [i / (count - 1) for i in range(count)]
