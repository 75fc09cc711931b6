from ..samples import samples_rgb_hsl, samples_rgb_hsv
from prismatica.conversions import (
    rgb_to_hsl,
    hsl_to_rgb,
    rgb_to_hsv,
    hsv_to_rgb,
    hsl_to_hsv,
    hsv_to_hsl,
)

hsl_tolerance = 1e-9
hsv_tolerance = 1e-9


def test_rgb_to_hsl_samples():
    for (r, g, b), (h_exp, s_exp, l_exp) in samples_rgb_hsl.items():
        h, s, l = rgb_to_hsl(r, g, b)
        assert abs(h - h_exp) < hsl_tolerance
        assert abs(s - s_exp) < hsl_tolerance
        assert abs(l - l_exp) < hsl_tolerance


def test_hsl_to_rgb_samples():
    for rgb, hsl in samples_rgb_hsl.items():
        assert hsl_to_rgb(*hsl) == rgb


def test_rgb_to_hsv_samples():
    for (r, g, b), (h_exp, s_exp, v_exp) in samples_rgb_hsv.items():
        h, s, v = rgb_to_hsv(r, g, b)
        assert abs(h - h_exp) < hsv_tolerance
        assert abs(s - s_exp) < hsv_tolerance
        assert abs(v - v_exp) < hsv_tolerance


def test_hsv_to_rgb_samples():
    for rgb, hsv in samples_rgb_hsv.items():
        assert hsv_to_rgb(*hsv) == rgb


def test_hsl_fixture_colors():
    assert hsl_to_rgb(330, 1, 0.6) == (255, 51, 153)
    assert hsl_to_rgb(0, 0, 0.5) == (128, 128, 128)


def test_round_trip_hsl_hsv():
    for (h, s, l) in [(30, 0.5, 0.25), (200, 1, 0.5), (90, 0.2, 0.8)]:
        h_out, s_out, l_out = hsv_to_hsl(*hsl_to_hsv(h, s, l))
        assert abs(h - h_out) < hsl_tolerance
        assert abs(s - s_out) < hsl_tolerance
        assert abs(l - l_out) < hsl_tolerance


def test_hsv_of_black_and_white_has_no_saturation():
    assert hsl_to_hsv(0, 0.5, 0) == (0, 0, 0)
    assert hsv_to_hsl(0, 0, 1)[1] == 0
    assert hsv_to_hsl(0, 0.5, 0)[1] == 0
