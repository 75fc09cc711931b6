from prismatica import mix, average, ColorRGB
from prismatica.errors import InvalidColorError, InvalidRatioError, UnknownColorSpaceError
import pytest

gray = (128, 128, 128)

samples_mix = {
    # (space, ratio) -> hex of mix("red", "blue")
    ("rgb", 0.5): "#800080",
    ("lrgb", 0.5): "#b400b4",
    ("hsl", 0.5): "#ff00ff",
    ("hsv", 0.5): "#ff00ff",
    ("rgb", 0): "#ff0000",
    ("rgb", 1): "#0000ff",
    ("lrgb", 0): "#ff0000",
}


def test_mix_samples():
    for (space, ratio), expected in samples_mix.items():
        assert mix("red", "blue", ratio, space).hex() == expected


def test_mix_defaults_to_lrgb_halfway():
    assert mix("red", "blue").hex() == "#b400b4"


def test_mix_with_gray_keeps_hue():
    assert mix("red", gray, 0.5, "hsl").hex() == "#bf4040"
    assert mix(gray, "red", 0.5, "hsl").hex() == "#bf4040"


def test_mix_hue_takes_shortest_arc():
    result = mix(ColorRGB((255, 0, 64)), ColorRGB((255, 64, 0)), 0.5, "hsl").convert("hsl")
    assert result.h < 10 or result.h > 350


def test_mix_is_unrounded():
    result = mix("red", "blue", 0.5, "rgb")
    assert result.value == (127.5, 0, 127.5)


def test_mix_interpolates_alpha():
    result = mix(ColorRGB((255, 0, 0), 0), ColorRGB((0, 0, 255), 1), 0.5, "rgb")
    assert result.alpha == 0.5


def test_mix_in_lab_like_spaces_stays_in_gamut():
    for space in ["lab", "lch", "hcl", "oklab", "oklch"]:
        result = mix("yellow", "darkblue", 0.3, space)
        for channel in result.value:
            assert 0 <= channel <= 255


def test_mix_ratio_out_of_range():
    with pytest.raises(InvalidRatioError) as exc_info:
        mix("red", "blue", 1.1)
    assert str(exc_info.value) == "expected a ratio between 0 and 1, got: 1.1"
    with pytest.raises(InvalidRatioError):
        mix("red", "blue", -0.1)


def test_mix_invalid_color():
    with pytest.raises(InvalidColorError):
        mix("red", "unknown")


def test_average_samples():
    assert average(["red", "blue"], "rgb").hex() == "#800080"
    assert average(["red", "blue"]).hex() == "#b400b4"
    assert average(["red", "blue"], "hsl").hex() == "#ff00ff"


def test_average_weights():
    assert average(["red", "blue"], "rgb", weights=[3, 1]).hex() == "#bf0040"
    assert average(["red", "blue"], "rgb", weights=[1, 1]) == average(["red", "blue"], "rgb")


def test_average_ignores_achromatic_hues():
    assert average(["red", "white"], "hsl").hex() == "#df9f9f"


def test_average_alpha():
    result = average([ColorRGB((255, 0, 0), 0), ColorRGB((0, 0, 255), 1)], "rgb")
    assert result.alpha == 0.5
    assert average(["red", "blue", "lime"], "lab").alpha == 1.0


def test_average_single_color():
    assert average(["#336699"], "lab").hex() == "#336699"


def test_average_errors():
    with pytest.raises(InvalidColorError):
        average(["red", "unknown"])
    with pytest.raises(UnknownColorSpaceError):
        average(["red", "blue"], "fake")
    with pytest.raises(InvalidColorError):
        average(["red", "blue"], "rgb", weights=[1])
    with pytest.raises(InvalidColorError):
        average([])


@pytest.mark.parametrize("space", ["rgb", "lrgb", "hsl", "hsv", "lab", "lch", "hcl", "oklab", "oklch"])
@pytest.mark.parametrize("color", ["#123456", "#808080"])
def test_mix_color_with_itself(color, space):
    assert mix(color, color, 0.7, space).hex() == color
