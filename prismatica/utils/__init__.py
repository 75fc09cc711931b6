from .default import value_or_default
from .rounding import round_half_up, maybe_round, round_all
from .numbers import is_real, is_unit
from .interpolate_hue import interpolate_hue, mean_hue, normalize_hue, shortest_hue_delta

__all__ = [
    "value_or_default",
    "round_half_up",
    "maybe_round",
    "round_all",
    "is_real",
    "is_unit",
    "interpolate_hue",
    "mean_hue",
    "normalize_hue",
    "shortest_hue_delta",
]
