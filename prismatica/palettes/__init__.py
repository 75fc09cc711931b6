from __future__ import annotations
from typing import List

from ..colors.rgb import ColorRGB
from ..parsing import parse_hex
from .colorbrewer import SCHEMES, SchemeKind, DEFAULT_COUNT, palette_hex, palette_sizes


def load_palette(name: str, count: int = DEFAULT_COUNT) -> List[ColorRGB]:
    """
    Load a ColorBrewer scheme as sRGB colors.

    >>> [c.hex() for c in load_palette("Set1", 3)]
    ['#e41a1c', '#377eb8', '#4daf4a']
    """
    colors = []
    for code in palette_hex(name, count):
        r, g, b, a = parse_hex(code)
        colors.append(ColorRGB((r, g, b), a))
    return colors


__all__ = ["load_palette", "palette_hex", "palette_sizes", "SCHEMES", "SchemeKind", "DEFAULT_COUNT"]
