"""
Color token parsing: CSS color names, hex strings and 0xRRGGBB integers.
"""
from __future__ import annotations
from typing import Tuple

from ..errors import InvalidColorError
from .hex import parse_hex, parse_hex_number, MAX_HEX_NUMBER
from .named_colors import NAMED_COLORS, lookup_named_color


def parse_color_token(token: str) -> Tuple[int, int, int, float]:
    """
    Resolve a named color or hex string into (r, g, b, a).

    Names are tried first, so "bad" is hex while "tan" is the named color.

    Raises:
        InvalidColorError: If the token is neither a known name nor valid hex
    """
    if not isinstance(token, str):
        raise InvalidColorError(f"expected a color name or hex string, got: {token!r}")
    named = lookup_named_color(token)
    if named is not None:
        return parse_hex(named)
    return parse_hex(token.strip())


__all__ = [
    "parse_color_token",
    "parse_hex",
    "parse_hex_number",
    "lookup_named_color",
    "NAMED_COLORS",
    "MAX_HEX_NUMBER",
]
