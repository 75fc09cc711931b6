from __future__ import annotations
from typing import Any, Callable, ClassVar, Optional, Sequence, Tuple, TYPE_CHECKING

from boundednumbers.functions import clamp

from ..errors import InvalidColorError
from ..types.color_types import ColorSpace, HUE_SPACES, Scalar, ScalarVector
from ..utils.dimension import get_dimension
from ..utils.numbers import is_real

if TYPE_CHECKING:
    from .rgb import ColorRGB

Bounds = Optional[Tuple[float, float]]

# float noise allowed past a channel bound before the value is rejected
CHANNEL_TOLERANCE = 1e-9


def channel_property(index: int) -> property:
    def getter(self: ColorBase) -> Scalar:
        return self._value[index]
    return property(getter)


class ColorBase:
    __slots__ = ('_value', '_alpha', '_is_frozen')  # prevents adding new attributes → immutability

    mode:     ClassVar[ColorSpace]
    channels: ClassVar[Tuple[str, ...]]
    bounds:   ClassVar[Tuple[Bounds, ...]]

    # attached in color.py, once every class exists
    convert: Callable[..., ColorBase]
    to_rgb: Callable[..., ColorRGB]
    from_rgb: ClassVar[Callable[..., ColorBase]]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: ScalarVector | ColorBase, alpha: Optional[Scalar] = None) -> None:
        # ---- Handle ColorBase input ----
        if isinstance(value, ColorBase):
            converted = value if value.mode == self.mode else value.convert(self.mode, round=None)
            alpha = converted.alpha if alpha is None else alpha
            value = converted.value

        num_channels = len(self.channels)
        if isinstance(value, (str, bytes)) or get_dimension(value) < 2:
            raise InvalidColorError(f"{self.mode.value} expects a sequence of channels, got: {value!r}")
        values = tuple(value)  # type: ignore[arg-type]

        if len(values) == num_channels + 1:
            if alpha is None:
                alpha = values[-1]
            values = values[:-1]
        if len(values) != num_channels:
            raise InvalidColorError(
                f"{self.mode.value} expects {num_channels} channels, got {len(values)}"
            )

        checked = tuple(
            self._check_channel(name, v, bounds)
            for name, v, bounds in zip(self.channels, values, self.bounds)
        )
        alpha = self._check_channel("alpha", 1.0 if alpha is None else alpha, (0.0, 1.0))

        # safe assignment; __setattr__ still allows it during init
        self._value = checked
        self._alpha = float(alpha)

        # freeze instance
        super().__setattr__('_is_frozen', True)

    @staticmethod
    def _check_channel(name: str, v: Any, bounds: Bounds) -> Scalar:
        if not is_real(v):
            raise InvalidColorError(f"{name} value must be a number, got: {v!r}")
        v = v if isinstance(v, int) else float(v)
        if bounds is None:
            return v
        low, high = bounds
        if v < low - CHANNEL_TOLERANCE or v > high + CHANNEL_TOLERANCE:
            raise InvalidColorError(f"{name} value must be between {low} and {high}, got: {v}")
        if v < low or v > high:
            v = clamp(v, low, high)
        return v

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> Tuple[Scalar, ...]:
        return self._value

    @property
    def alpha(self) -> float:
        return self._alpha

    @property
    def has_hue(self) -> bool:
        """Check if this color space includes a hue channel."""
        return self.mode in HUE_SPACES

    def with_alpha(self, alpha: Scalar):
        """
        Return a copy with a different alpha.

        Args:
            alpha: New alpha in [0, 1]

        Returns:
            New color instance of the same class.
        """
        return self.__class__(self._value, alpha)

    # ------------------ VALUE SEMANTICS ------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorBase):
            return NotImplemented
        return (
            self.mode == other.mode
            and self._value == other._value
            and self._alpha == other._alpha
        )

    def __hash__(self) -> int:
        return hash((self.mode, self._value, self._alpha))

    def __iter__(self):
        return iter(self._value)

    def __repr__(self) -> str:
        fields = ", ".join(f"{name}={v!r}" for name, v in zip(self.channels, self._value))
        return f"{self.__class__.__name__}({fields}, alpha={self._alpha!r})"


def build_registry(*classes: type[ColorBase]) -> dict[ColorSpace, type[ColorBase]]:
    return {
        cls.mode: cls
        for cls in classes
    }
