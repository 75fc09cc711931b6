"""Exception types raised by prismatica.

Every error is a ``ValueError`` so callers that only care about bad input
can catch that; the subclasses let them tell the failures apart.
"""


class ColorError(ValueError):
    """Base class for every error raised on invalid color input."""


class InvalidColorError(ColorError):
    """A channel, token or color argument is malformed or out of range."""


class UnknownColorSpaceError(ColorError):
    pass


class UnknownWhitepointError(ColorError):
    pass


class InvalidRatioError(ColorError):
    pass


class PaletteNotFoundError(ColorError, LookupError):
    """No palette with the requested name and color count."""


class ScaleError(ColorError):
    """Invalid scale options or an invalid scale query."""


class UnknownBlendModeError(ColorError):
    pass


__all__ = [
    "ColorError",
    "InvalidColorError",
    "UnknownColorSpaceError",
    "UnknownWhitepointError",
    "InvalidRatioError",
    "PaletteNotFoundError",
    "ScaleError",
    "UnknownBlendModeError",
]
