"""
Mapping of raw scale inputs onto the unit interval.

A scale first turns a domain value into t in [0, 1], either by plain
normalization against the domain extremes or by bucketing it into classes,
then optionally redistributes t across an uneven domain.
"""
from __future__ import annotations
from bisect import bisect_right
from typing import List, Sequence, Tuple

from boundednumbers.functions import clamp


def normalize(value: float, low: float, high: float) -> float:
    """Position of value between low and high; 1 when the range is empty."""
    if high == low:
        return 1.0
    return (value - low) / (high - low)


def equal_limits(low: float, high: float, bins: int) -> Tuple[float, ...]:
    """``bins + 1`` evenly spaced breakpoints from low to high, endpoints exact."""
    if bins < 1:
        return (low, high)
    inner = tuple(low + i / bins * (high - low) for i in range(1, bins))
    return (low, *inner, high)


def class_index(value: float, breakpoints: Sequence[float]) -> int:
    """
    Bin of ``value`` among ``len(breakpoints) - 1`` bins.

    Values at a breakpoint belong to the bin above it, except the last
    breakpoint which closes the top bin. Values below the first breakpoint
    land in bin 0.
    """
    last_bin = len(breakpoints) - 2
    index = bisect_right(breakpoints, value, hi=len(breakpoints) - 1) - 1
    return int(clamp(index, 0, last_bin))


def classify(value: float, breakpoints: Sequence[float]) -> float:
    """Discrete position in [0, 1] of the bin holding ``value``."""
    last_bin = len(breakpoints) - 2
    if last_bin <= 0:
        return 0.0
    return class_index(value, breakpoints) / last_bin


class DomainMap:
    """
    Piecewise-linear map from normalized domain breakpoints onto evenly
    spaced ones, so that ``[0, 0.25, 1]`` gives the first half of the
    colors to the first quarter of the domain.
    """
    __slots__ = ('_breaks', '_outputs')

    def __init__(self, domain: Sequence[float]) -> None:
        low, high = domain[0], domain[-1]
        count = len(domain)
        self._breaks: List[float] = [normalize(d, low, high) for d in domain]
        self._outputs: List[float] = [i / (count - 1) for i in range(count)]

    def __call__(self, t: float) -> float:
        if t <= 0:
            return 0.0
        if t >= 1:
            return 1.0
        breaks, outputs = self._breaks, self._outputs
        i = 0
        while i < len(breaks) - 2 and t >= breaks[i + 1]:
            i += 1
        span = breaks[i + 1] - breaks[i]
        if span == 0:
            return outputs[i + 1]
        f = (t - breaks[i]) / span
        return outputs[i] + f * (outputs[i + 1] - outputs[i])
