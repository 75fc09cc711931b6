from prismatica import (
    new_color,
    convert,
    rgb,
    hsl,
    hsv,
    lab,
    lch,
    hcl,
    oklab,
    oklch,
    temperature,
    ColorRGB,
    ColorHSL,
    ColorLab,
)
from prismatica.errors import (
    ColorError,
    InvalidColorError,
    UnknownColorSpaceError,
    UnknownWhitepointError,
)
import pytest

hotpink = (255, 51, 153)

construction_samples = {
    ("hsl", (330, 1, 0.6)): hotpink,
    ("hsl", (330, 0, 1)): (255, 255, 255),
    ("hsv", (330, 0.8, 1)): hotpink,
    ("hsv", (330, 0, 1)): (255, 255, 255),
    ("lab", (40, -20, 50)): (83, 102, 0),
    ("lab", (50, -20, 50)): (110, 127, 21),
    ("lab", (80, -20, 50)): (192, 207, 102),
    ("lch", (80, 40, 130)): (170, 210, 140),
    ("hcl", (130, 40, 80)): (170, 210, 140),
    ("oklab", (0.4, -0.2, 0.5)): (98, 68, 0),
    ("oklab", (0.5, -0.2, 0.5)): (128, 97, 0),
    ("oklab", (0.8, -0.2, 0.5)): (217, 197, 0),
    ("oklch", (0.5, 0.2, 240)): (0, 105, 199),
    ("oklch", (0.8, 0.12, 60)): (246, 171, 107),
}


def test_new_color_in_other_spaces():
    for (space, channels), expected in construction_samples.items():
        color = new_color(channels, space=space)
        assert isinstance(color, ColorRGB)
        assert color.value == expected
        assert color.alpha == 1.0


def test_shortcuts():
    assert rgb(255, 51, 153).value == hotpink
    assert hsl(330, 1, 0.6).value == hotpink
    assert hsv(330, 0.8, 1).value == hotpink
    assert lab(40, -20, 50).value == (83, 102, 0)
    assert lch(80, 40, 130).value == (170, 210, 140)
    assert hcl(130, 40, 80).value == (170, 210, 140)
    assert oklab(0.5, -0.2, 0.5).value == (128, 97, 0)
    assert oklch(0.8, 0.12, 60).value == (246, 171, 107)
    assert hsl(330, 1, 0.6, 0.5).alpha == 0.5


def test_temperature_shortcut():
    assert temperature(2000).value == (255, 139, 20)
    assert temperature(3500).value == (255, 195, 138)
    assert temperature(6500).value == (255, 250, 254)


def test_named_colors():
    assert new_color("mediumslateblue").hex() == "#7b68ee"
    assert new_color("hotpink").value == (255, 105, 180)
    assert new_color("HotPink").value == (255, 105, 180)


def test_hex_variants():
    for token in ["#ff9900", "#FF9900", "#F90", "f90", "FF9900", "FF9900FF", "F90F", "#F90F"]:
        assert new_color(token).hex() == "#ff9900"
    assert new_color("#ff990080").alpha == 128 / 255


def test_integer_and_sequence_input():
    assert new_color(0xff3399).value == hotpink
    assert new_color([255, 51, 153]).value == hotpink
    assert new_color((0, 0, 0, 0.5)).alpha == 0.5


def test_mapping_input():
    assert new_color({"r": 0, "g": 0, "b": 0}).value == (0, 0, 0)
    assert new_color({"r": 0, "g": 0, "b": 0, "a": 0.5}).alpha == 0.5
    assert new_color({"h": 330, "s": 1, "l": 0.6}, space="hsl").value == hotpink
    with pytest.raises(InvalidColorError):
        new_color({"r": 0, "g": 0})


def test_reuses_existing_color():
    color = new_color((123, 123, 123, 0.5))
    assert new_color(color) is color
    assert new_color(ColorHSL((330, 1, 0.6))).value == hotpink


def test_alpha_override():
    assert new_color("red", alpha=0.25).alpha == 0.25


def test_hcl_argument_order():
    assert new_color([300, 0, 0.5], space="hcl") == new_color([300, 0, 0.5, 1.0], space="hcl")


def test_hex_errors():
    messages = {
        "#unknow": "r value must be a hex value between 0 and ff, got: un",
        "#unk": "r value must be a hex value between 0 and ff, got: uu",
        "#unkn": "r value must be a hex value between 0 and ff, got: uu",
        "#unknown!": "r value must be a hex value between 0 and ff, got: un",
    }
    for token, message in messages.items():
        with pytest.raises(InvalidColorError) as exc_info:
            new_color(token)
        assert str(exc_info.value) == message


def test_invalid_input():
    with pytest.raises(InvalidColorError):
        new_color("fakecolor")
    with pytest.raises(InvalidColorError):
        new_color(0x1000000)
    with pytest.raises(InvalidColorError):
        new_color(None)
    with pytest.raises(InvalidColorError):
        new_color(True)


def test_alpha_outside_unit_interval():
    with pytest.raises(InvalidColorError):
        new_color((0, 0, 0, -1))
    with pytest.raises(InvalidColorError):
        new_color([0, 0, 0, 1.1])
    with pytest.raises(InvalidColorError):
        new_color([0, 0, 0, 10], space="hsl")
    with pytest.raises(InvalidColorError):
        new_color([0, 0, 0, -0.1], space="hsv")


def test_unknown_space():
    with pytest.raises(UnknownColorSpaceError):
        new_color((0, 0, 0, 1.0), space="unknown")


def test_unknown_reference():
    with pytest.raises(UnknownWhitepointError) as exc_info:
        new_color([0, 0, 0, 1.0], space="lab", reference="fake")
    assert "undefined reference point" in str(exc_info.value)


def test_errors_share_a_family():
    for error in (InvalidColorError, UnknownColorSpaceError, UnknownWhitepointError):
        assert issubclass(error, ColorError)
        assert issubclass(error, ValueError)


def test_convert_any_input():
    result = convert("#ff3399", "hsl")
    assert isinstance(result, ColorHSL)
    assert abs(result.l - 0.6) < 1e-9
    assert isinstance(convert((255, 105, 180), "lab"), ColorLab)
