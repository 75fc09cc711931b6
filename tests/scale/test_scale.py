from prismatica import Scale, ColorRGB, ColorHSL, Interpolation, mix, scale
from prismatica.errors import InvalidColorError, PaletteNotFoundError, ScaleError
from prismatica.scale import lightness
import pytest

gray = ColorRGB((128, 128, 128))

samples_bezier = {
    # colors -> {t: hex}
    ("white", "black"): {0: "#ffffff", 0.5: "#777777", 1: "#000000"},
    ("white", "red", "black"): {0: "#ffffff", 0.5: "#c45c44", 1: "#000000"},
    ("white", "yellow", "red", "black"): {
        0: "#ffffff", 0.25: "#ffe085", 0.5: "#e69735", 0.75: "#914213", 1: "#000000",
    },
    ("darkred", "orange", "snow", "lightgreen", "royalblue"): {
        0: "#8b0000", 0.25: "#dd8d49", 0.5: "#dfcb98", 0.75: "#a7c1bd", 1: "#4169e1",
    },
}


def hexes(colors):
    return [c.hex() for c in colors]


def assert_rgb_close(color, expected_hex, tol=1):
    expected = ColorRGB((int(expected_hex[1:3], 16), int(expected_hex[3:5], 16), int(expected_hex[5:7], 16)))
    for got, want in zip(color.rgb, expected.rgb):
        assert abs(got - want) <= tol, f"{color.hex()} != {expected_hex}"


# ------------------ BASICS ------------------
def test_default_scale_is_white_to_black():
    s = scale()
    assert s.get(0).hex() == "#ffffff"
    assert s.get(0.5).hex() == "#808080"
    assert s.get(1).hex() == "#000000"
    assert Scale().colors == s.colors


def test_fetch_outside_domain_gives_end_colors():
    s = scale()
    assert s.fetch(-1).hex() == "#ffffff"
    assert s.fetch(100).hex() == "#000000"


def test_fetch_rejects_non_numbers():
    s = scale()
    with pytest.raises(ScaleError):
        s.fetch("x")
    with pytest.raises(ScaleError):
        s.fetch(float("nan"))
    with pytest.raises(ScaleError):
        s.fetch(None)


def test_get_returns_default_on_invalid_input():
    s = Scale("OrRd")
    assert s.get(None).hex() == "#000000"
    assert s.get(None, gray).hex() == "#808080"
    assert s(None) == s.get(None)
    assert s(0.5) == s.get(0.5)


def test_scale_is_immutable():
    s = scale()
    with pytest.raises(AttributeError):
        s._gamma = 2


def test_comma_separated_string():
    assert hexes(Scale("red, blue").colors) == ["#ff0000", "#0000ff"]


def test_space_is_parsed():
    assert Scale(space="HSV").space.value == "hsv"


@pytest.mark.parametrize("options", [
    {"classes": []},
    {"classes": [1]},
    {"classes": [0, 1]},
    {"domain": []},
    {"domain": [1]},
])
def test_degenerate_classes_and_domain_stay_continuous(options):
    s = Scale(["black", "white"], **options)
    assert s.get(0.5).hex() == "#808080"
    assert s.classes is None


def test_domain_with_equal_ends():
    s = Scale(["white", "black"], domain=[1, 1])
    assert s.get(1).hex() == "#000000"


# ------------------ SPACES ------------------
def test_hsv_white_to_black():
    s = Scale(["white", "black"], space="hsv")
    assert s.get(0).hex() == "#ffffff"
    assert s.get(0.5).hex() == "#808080"
    assert s.get(1).hex() == "#000000"
    assert hexes(s.colors) == ["#ffffff", "#000000"]
    assert hexes(s.take(2)) == ["#ffffff", "#000000"]


def test_lab_white_to_black():
    s = Scale(["white", "black"], space="lab")
    assert s.get(0).hex() == "#ffffff"
    assert s.get(0.5).hex() == "#777777"
    assert s.get(1).hex() == "#000000"


# ------------------ CLASSES ------------------
def test_classified_hsv_scale():
    s = Scale(["white", "black"], space="hsv", classes=7)
    assert s.get(0).hex() == "#ffffff"
    assert s.get(0.5).hex() == "#808080"
    assert s.get(1).hex() == "#000000"
    assert hexes(s.take(7)) == [
        "#ffffff", "#d5d5d5", "#aaaaaa", "#808080", "#555555", "#2a2a2a", "#000000",
    ]


def test_explicit_classes_replace_domain():
    s = Scale(["white", "black"], classes=[0, 10, 50, 100])
    assert s.domain == (0.0, 100.0)
    assert s.get(5).hex() == "#ffffff"
    assert s.get(20) == s.get(49)
    assert s.get(100).hex() == "#000000"


def test_negative_classes_raise():
    with pytest.raises(ScaleError):
        Scale(classes=-1)


# ------------------ PALETTES AND DOMAINS ------------------
def test_rdylgn_scale():
    s = Scale("RdYlGn", count=11)
    assert s.get(0).hex() == "#a50026"
    assert s.get(0.5).hex() == "#ffffbf"
    assert s.get(1).hex() == "#006837"


def test_domained_rdylgn_scale():
    s = Scale("RdYlGn", count=11, domain=[0, 100])
    assert s.domain == (0.0, 100.0)
    assert s.get(0).hex() == "#a50026"
    assert s.get(10).hex() != "#ffffbf"
    assert s.get(50).hex() == "#ffffbf"
    assert s.get(100).hex() == "#006837"


def test_domained_classified_rdylgn_scale():
    s = Scale("RdYlGn", count=11, domain=[0, 100], classes=5)
    assert s.get(10).hex() == "#a50026"
    assert s.get(50).hex() == "#ffffbf"
    assert s.get(100).hex() == "#006837"
    assert hexes(s.take(5)) == ["#a50026", "#f98e52", "#ffffbf", "#86cb67", "#006837"]


def test_uneven_domain_redistributes_colors():
    plain = Scale("OrRd", count=9)
    uneven = Scale("OrRd", count=9, domain=[0, 0.25, 1])
    assert plain.get(0) == uneven.get(0)
    assert plain.get(0.25) == uneven.get(0.125)
    assert plain.get(0.5) == uneven.get(0.25)
    assert plain.get(0.75) == uneven.get(0.625)
    assert plain.get(1) == uneven.get(1)


def test_domain_matching_colors_sets_positions():
    s = Scale(["white", "red", "black"], domain=[0, 0.25, 1])
    assert s.positions == (0.0, 0.25, 1.0)
    assert s.get(0.25).hex() == "#ff0000"


def test_unsorted_domain_raises():
    with pytest.raises(ScaleError):
        Scale(domain=[1, 0])


def test_alpha_is_not_rounded_in_css():
    color = Scale("YlGnBu").fetch(0.3)
    assert color.with_alpha(0.675).css() == "rgb(170 222 183 / 0.675)"


# ------------------ TAKE ------------------
def test_take_hex_and_css():
    s = Scale(["yellow", "darkgreen"])
    assert hexes(s.take(5)) == ["#ffff00", "#bfd800", "#80b200", "#408b00", "#006400"]
    assert [c.css() for c in s.take(3)] == ["rgb(255 255 0)", "rgb(128 178 0)", "rgb(0 100 0)"]


def test_take_one_is_domain_middle():
    s = Scale(["white", "black"], domain=[0, 10])
    assert hexes(s.take(1)) == ["#808080"]


@pytest.mark.parametrize("n", [0, -2, 1.5, True])
def test_take_rejects_invalid_counts(n):
    with pytest.raises(ScaleError):
        scale().take(n)


def test_take_keys_skips_invalid_keys():
    s = Scale(["white", "black"], space="hsv")
    result = s.take_keys([None, 1, "x"])
    assert list(result) == [1]
    assert result[1].hex() == "#000000"


# ------------------ PADDING AND GAMMA ------------------
def test_symmetric_padding():
    s = Scale("RdYlBu", count=11, padding=0.15)
    assert s.padding == (0.15, 0.15)
    assert_rgb_close(s.get(0), "#e64f35")
    assert s.get(0.5).hex() == "#ffffbf"
    assert_rgb_close(s.get(1), "#5d91c3")


def test_one_sided_padding():
    s = Scale("OrRd", count=9, padding=(0.2, 0))
    assert s.get(0).hex() == "#fddcaf"
    assert s.get(0.5).hex() == "#f26d4b"
    assert s.get(1).hex() == "#7f0000"


def test_invalid_padding_raises():
    with pytest.raises(ScaleError):
        Scale(padding=(0.1, 0.2, 0.3))


def test_gamma_below_one():
    s = Scale("YlGn", count=9, gamma=0.5)
    assert s.get(0.1).hex() == "#c2e698"
    assert s.get(0.5).hex() == "#2d914c"
    assert s.get(1).hex() == "#004529"


def test_gamma_above_one():
    s = Scale("YlGn", count=9, gamma=2)
    assert s.get(0.1).hex() == "#feffe1"
    assert s.get(0.5).hex() == "#d9f0a3"
    assert s.get(1).hex() == "#004529"


@pytest.mark.parametrize("gamma", [0, -1, "2"])
def test_invalid_gamma_raises(gamma):
    with pytest.raises(ScaleError):
        Scale(gamma=gamma)


# ------------------ SINGLE COLOR ------------------
@pytest.mark.parametrize("interpolation", ["linear", "bezier"])
def test_one_color_scale(interpolation):
    s = Scale(["red"], interpolation=interpolation)
    assert s.get(0).hex() == "#ff0000"
    assert s.get(0.3).hex() == "#ff0000"
    assert s.get(1).hex() == "#ff0000"


# ------------------ BEZIER ------------------
def test_bezier_samples():
    for colors, expected in samples_bezier.items():
        s = Scale(list(colors), interpolation="bezier")
        for t, code in expected.items():
            assert s.get(t).hex() == code, f"{colors} at {t}"


@pytest.mark.parametrize("space", ["lab", "oklab"])
def test_bezier_lab_like_spaces(space):
    s = Scale(["white", "black"], interpolation=Interpolation.BEZIER, space=space)
    assert s.space.value == space
    assert s.get(0).hex() == "#ffffff"
    assert s.get(1).hex() == "#000000"


def test_bezier_defaults_to_lab():
    assert Scale(interpolation="bezier").space.value == "lab"


@pytest.mark.parametrize("space", ["rgb", "hsl", "lch"])
def test_bezier_rejects_other_spaces(space):
    with pytest.raises(ScaleError):
        Scale(["white", "black"], interpolation="bezier", space=space)


def test_unknown_interpolation_raises():
    with pytest.raises(ScaleError):
        Scale(interpolation="cubic")


# ------------------ CUSTOM INTERPOLATOR ------------------
def test_custom_interpolator():
    s = Scale(interpolation=lambda t: mix("red", "blue", t, "rgb"))
    assert s.get(0).hex() == "#ff0000"
    assert s.get(0.5).hex() == "#800080"
    assert s.get(1).hex() == "#0000ff"


def test_custom_interpolator_result_is_converted_to_rgb():
    s = Scale(interpolation=lambda t: ColorHSL((0, 1, 0.5)))
    result = s.get(0.5)
    assert isinstance(result, ColorRGB)
    assert result.hex() == "#ff0000"


def test_custom_interpolator_must_return_a_color():
    s = Scale(interpolation=lambda t: "red")
    with pytest.raises(ScaleError):
        s.fetch(0.5)
    assert s.get(0.5) == ColorRGB((0, 0, 0))


# ------------------ LIGHTNESS CORRECTION ------------------
def test_correct_lightness_makes_lightness_linear(no_warnings):
    colors = ["yellow", "red", "black"]
    s = Scale(colors, correct_lightness=True)
    l0, l1 = lightness(s.get(0)), lightness(s.get(1))
    for t in (0.25, 0.5, 0.75):
        assert abs(lightness(s.get(t)) - (l0 + (l1 - l0) * t)) < 0.5


def test_correct_lightness_keeps_ends():
    s = Scale(["white", "black"], correct_lightness=True)
    assert s.get(0).hex() == "#ffffff"
    assert s.get(1).hex() == "#000000"


# ------------------ INVALID COLORS ------------------
def test_invalid_color_raises():
    with pytest.raises(InvalidColorError):
        Scale(["red", "unknown"])


def test_unknown_palette_raises():
    with pytest.raises(PaletteNotFoundError):
        Scale("unknown")


def test_empty_colors_raise():
    with pytest.raises(ScaleError):
        Scale([])
