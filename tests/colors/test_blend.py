from prismatica import blend, BlendMode, ColorRGB
from prismatica.errors import InvalidColorError, UnknownBlendModeError
import pytest

bottom = "#4cbbfc"
top = "#eeee22"

samples_blend = {
    "normal": "#eeee22",
    "multiply": "#47af22",
    "darken": "#4cbb22",
    "lighten": "#eeeefc",
    "screen": "#f3fafc",
    "overlay": "#e7f643",
    "burn": "#c6e81f",
    "dodge": "#ffffff",
}


def test_blend_samples():
    for mode, expected in samples_blend.items():
        assert blend(bottom, top, mode).hex() == expected


def test_blend_accepts_enum_and_any_case():
    assert blend(bottom, top, BlendMode.MULTIPLY).hex() == "#47af22"
    assert blend(bottom, top, "Multiply").hex() == "#47af22"


def test_dodge_red_blue():
    assert blend("red", "blue", "dodge").hex() == "#ff00ff"


def test_burn_clamps_to_zero():
    result = blend((10, 10, 10), (20, 20, 20), "burn")
    assert result.value == (0, 0, 0)
    assert blend("black", "white", "burn").value == (0, 0, 0)


def test_blend_keeps_bottom_alpha():
    result = blend(ColorRGB((10, 20, 30), 0.4), ColorRGB((40, 50, 60), 0.9), "lighten")
    assert result.alpha == 0.4
    assert result.value == (40, 50, 60)


def test_blend_errors():
    with pytest.raises(InvalidColorError):
        blend("red", "unknown", "multiply")
    with pytest.raises(UnknownBlendModeError):
        blend("red", "blue", "soft-light")
