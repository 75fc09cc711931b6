from .color_types import (
    ColorSpace,
    HUE_CHANNELS,
    CHROMA_CHANNELS,
    HUE_SPACES,
    LAB_LIKE_SPACES,
    is_hue_space,
    Scalar,
    ScalarVector,
    ChannelValues,
)

__all__ = [
    "ColorSpace",
    "HUE_CHANNELS",
    "CHROMA_CHANNELS",
    "HUE_SPACES",
    "LAB_LIKE_SPACES",
    "is_hue_space",
    "Scalar",
    "ScalarVector",
    "ChannelValues",
]
