from __future__ import annotations
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, Tuple, Union

from boundednumbers.functions import clamp

from ..colors.rgb import ColorRGB
from ..errors import ColorError, ScaleError
from ..palettes import DEFAULT_COUNT
from ..types.color_types import ColorSpace
from ..utils.numbers import is_real
from .domain import DomainMap, classify, normalize
from .interpolator import (
    BezierInterpolator,
    ConstantInterpolator,
    CustomInterpolator,
    Interpolation,
    LinearInterpolator,
)
from .lightness import correct_lightness
from .normalizer import ColorsInput, InterpolationInput, _ScaleNormalizer

BLACK = ColorRGB((0, 0, 0))


class Scale(_ScaleNormalizer):
    """
    Immutable map from a numeric domain to colors.

    Examples:
        >>> scale = Scale(["yellow", "darkgreen"])
        >>> scale.get(0.5).hex()
        '#80b200'
        >>> [c.hex() for c in Scale("RdYlGn", count=11).take(3)]
        ['#a50026', '#ffffbf', '#006837']
    """
    __slots__ = (
        '_colors', '_space', '_domain', '_padding', '_gamma', '_correct_lightness',
        '_classes', '_interpolation', '_positions_', '_domain_map', '_interpolator',
        '_is_frozen',
    )

    def __setattr__(self, name, value):
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(
        self,
        colors: ColorsInput = None,
        space: Union[str, ColorSpace, None] = None,
        domain: Optional[Sequence[float]] = None,
        padding: Union[float, Sequence[float], None] = None,
        gamma: Optional[float] = None,
        correct_lightness: bool = False,
        classes: Union[int, Sequence[float], None] = None,
        interpolation: InterpolationInput = Interpolation.LINEAR,
        count: int = DEFAULT_COUNT,
    ) -> None:
        """
        Args:
            colors: Color stops, a palette name or a comma separated string.
                Defaults to white and black.
            space: Interpolation space (default "rgb", "lab" for bezier)
            domain: Non-decreasing input breakpoints (default (0, 1))
            padding: Fraction cut from both ends, or a (left, right) pair
            gamma: Exponent applied to the position, > 0
            correct_lightness: Re-time the scale to a linear Lab lightness
            classes: Number of equal bins, or explicit bin breakpoints
            interpolation: "linear", "bezier" or a callable ``f(t) -> color``
            count: Number of colors when ``colors`` is a palette name

        Raises:
            ScaleError: On invalid options
            UnknownColorSpaceError: On an unknown space
            PaletteNotFoundError: On a palette name or count with no scheme
        """
        interpolation, space = self._normalize_interpolation(interpolation, space)
        self._colors: Tuple[ColorRGB, ...] = self._normalize_colors(colors, count)
        self._space: ColorSpace = space
        self._interpolation = interpolation
        self._padding: Tuple[float, float] = self._normalize_padding(padding)
        self._gamma: float = self._normalize_gamma(gamma)
        self._correct_lightness = bool(correct_lightness)
        self._classes, self._domain = self._normalize_classes(classes, self._normalize_domain(domain))
        self._positions_: List[float] = self._positions(self._colors, self._domain)

        use_map = len(self._domain) > 2 and len(self._domain) != len(self._colors)
        self._domain_map: Optional[DomainMap] = DomainMap(self._domain) if use_map else None
        self._interpolator = self._build_interpolator()

        super().__setattr__('_is_frozen', True)

    def _build_interpolator(self) -> Callable[[float], ColorRGB]:
        if not isinstance(self._interpolation, Interpolation):
            return CustomInterpolator(self._interpolation)
        if len(self._colors) == 1:
            return ConstantInterpolator(self._colors[0])
        if self._interpolation == Interpolation.BEZIER:
            return BezierInterpolator(self._space, self._colors)
        return LinearInterpolator(self._space, self._colors, self._positions_)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def colors(self) -> Tuple[ColorRGB, ...]:
        return self._colors

    @property
    def space(self) -> ColorSpace:
        return self._space

    @property
    def domain(self) -> Tuple[float, ...]:
        return self._domain

    @property
    def padding(self) -> Tuple[float, float]:
        return self._padding

    @property
    def gamma(self) -> float:
        return self._gamma

    @property
    def classes(self) -> Optional[Tuple[float, ...]]:
        """Bin breakpoints, or None for a continuous scale."""
        return self._classes

    @property
    def interpolation(self) -> Union[Interpolation, Callable[[float], Any]]:
        return self._interpolation

    @property
    def positions(self) -> Tuple[float, ...]:
        return tuple(self._positions_)

    # ------------------ QUERIES ------------------
    def _to_unit(self, x: float) -> float:
        if self._classes is not None:
            return classify(x, self._classes)
        return clamp(normalize(x, self._domain[0], self._domain[-1]), 0.0, 1.0)

    def fetch(self, x: float) -> ColorRGB:
        """
        Color at domain value ``x``. Values outside the domain give the end colors.

        Raises:
            ScaleError: If x is not a real number
        """
        if not is_real(x):
            raise ScaleError(f"scale input must be a number, got: {x!r}")
        t = self._to_unit(x)
        if self._domain_map is not None:
            t = self._domain_map(t)
        if self._correct_lightness:
            t = correct_lightness(t, self._interpolator)
        if self._gamma != 1:
            t = t ** self._gamma
        left, right = self._padding
        t = clamp(left + t * (1 - left - right), 0.0, 1.0)
        return self._interpolator(t)

    def get(self, x: Any, default: Any = BLACK) -> Any:
        """Like fetch, but returns ``default`` instead of raising."""
        try:
            return self.fetch(x)
        except ColorError:
            return default

    __call__ = get

    def take(self, n: int) -> List[ColorRGB]:
        """
        ``n`` colors at evenly spaced domain values, ends included.
        A single color is taken from the middle of the domain.
        """
        if isinstance(n, bool) or not isinstance(n, int) or n < 1:
            raise ScaleError(f"take expects a positive integer, got: {n!r}")
        low, high = self._domain[0], self._domain[-1]
        if n == 1:
            return [self.fetch((low + high) / 2)]
        return [self.fetch(low + i / (n - 1) * (high - low)) for i in range(n)]

    def take_keys(self, xs: Iterable[Any]) -> Dict[Any, ColorRGB]:
        """Map each valid domain value in ``xs`` to its color; invalid keys are skipped."""
        result = {}
        for x in xs:
            try:
                result[x] = self.fetch(x)
            except ColorError:
                continue
        return result

    def __repr__(self) -> str:
        stops = ", ".join(c.hex() for c in self._colors)
        return f"Scale([{stops}], space={self._space.value!r}, domain={self._domain!r})"
