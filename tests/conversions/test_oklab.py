from ..samples import samples_rgb_oklab, samples_rgb_oklch
from prismatica.conversions import rgb_to_oklab, oklab_to_rgb, rgb_to_oklch, oklch_to_rgb
from prismatica.utils.rounding import round_half_up
import pytest

oklab_tolerance = 0.0006


def test_rgb_to_oklab_samples():
    for (r, g, b), (l_exp, a_exp, b_exp) in samples_rgb_oklab.items():
        l, a, b_star = rgb_to_oklab(r, g, b, round=None)
        assert abs(l - l_exp) < oklab_tolerance
        assert abs(a - a_exp) < oklab_tolerance
        assert abs(b_star - b_exp) < oklab_tolerance


def test_oklab_round_trip():
    for rgb in samples_rgb_oklab:
        assert oklab_to_rgb(*rgb_to_oklab(*rgb, round=None)) == rgb


def test_rgb_to_oklch_samples():
    for (r, g, b), (l_exp, c_exp, h_exp) in samples_rgb_oklch.items():
        l, c, h = rgb_to_oklch(r, g, b, round=None)
        assert abs(l - l_exp) < oklab_tolerance
        assert abs(c - c_exp) < oklab_tolerance
        if c_exp > 0:
            assert abs(h - h_exp) < oklab_tolerance


def test_oklch_round_trip():
    for rgb in samples_rgb_oklch:
        assert oklch_to_rgb(*rgb_to_oklch(*rgb, round=None)) == rgb


def test_default_rounding_is_two_digits():
    # unrounded red is (0.62796, 0.22486, 0.12585)
    assert rgb_to_oklab(255, 0, 0) == (0.63, 0.22, 0.13)
    assert rgb_to_oklch(255, 0, 0) == (0.63, 0.26, 29.23)


def test_red_to_three_digits():
    l, a, b = rgb_to_oklab(255, 0, 0, round=None)
    assert round_half_up(l, 3) == 0.628
    assert round_half_up(a, 3) == 0.225
    assert round_half_up(b, 3) == 0.126


@pytest.mark.parametrize("rgb", [(128, 128, 128), (255, 255, 255)])
def test_achromatic_oklch_has_zero_hue(rgb):
    assert rgb_to_oklch(*rgb)[2] == 0
    l, c, h = rgb_to_oklch(*rgb, round=None)
    assert h == 0
    assert c < 1e-4
