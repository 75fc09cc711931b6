from __future__ import annotations
import re
from typing import Tuple

from ..errors import InvalidColorError

_HEX_PAIR = re.compile(r"[0-9a-fA-F]{2}")
_KEYS = ("r", "g", "b", "a")

MAX_HEX_NUMBER = 0xFFFFFF


def _parse_pair(key: str, pair: str) -> int:
    if not _HEX_PAIR.fullmatch(pair):
        raise InvalidColorError(f"{key} value must be a hex value between 0 and ff, got: {pair}")
    return int(pair, 16)


def parse_hex(token: str) -> Tuple[int, int, int, float]:
    """
    Parse a 3, 4, 6 or 8 digit hex string, with or without a leading '#'.

    Short forms double each digit. A fourth channel is alpha, scaled to [0, 1].

    Args:
        token: Hex text, case-insensitive

    Returns:
        Tuple: (r, g, b, a)

    Raises:
        InvalidColorError: On a wrong length or a non-hex digit
    """
    digits = token[1:] if token.startswith("#") else token
    if len(digits) in (3, 4):
        pairs = [d * 2 for d in digits]
    elif len(digits) in (6, 8):
        pairs = [digits[i:i + 2] for i in range(0, len(digits), 2)]
    else:
        raise InvalidColorError(f"invalid color: {token!r}")

    values = [_parse_pair(key, pair) for key, pair in zip(_KEYS, pairs)]
    alpha = values[3] / 255 if len(values) == 4 else 1.0
    return values[0], values[1], values[2], alpha


def parse_hex_number(n: int) -> Tuple[int, int, int]:
    """Decode an integer 0xRRGGBB into its channels."""
    if isinstance(n, bool) or not isinstance(n, int) or not 0 <= n <= MAX_HEX_NUMBER:
        raise InvalidColorError(f"expected an integer between 0 and 0xffffff, got: {n!r}")
    return (n >> 16) & 0xFF, (n >> 8) & 0xFF, n & 0xFF
