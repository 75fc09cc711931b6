from prismatica.scale import DomainMap, class_index, classify, equal_limits, normalize
import pytest

tol = 1e-12

limits = (0, 20, 40, 60, 80, 100)


def test_normalize():
    assert normalize(5, 0, 10) == 0.5
    assert normalize(-5, 0, 10) == -0.5
    assert normalize(3, 3, 3) == 1.0


def test_equal_limits():
    assert equal_limits(0, 1, 4) == (0, 0.25, 0.5, 0.75, 1)
    assert equal_limits(0, 100, 5) == pytest.approx(limits)
    assert equal_limits(2, 8, 1) == (2, 8)
    assert equal_limits(2, 8, 0) == (2, 8)


def test_equal_limits_keeps_exact_ends():
    result = equal_limits(0.1, 0.7, 3)
    assert result[0] == 0.1
    assert result[-1] == 0.7


@pytest.mark.parametrize("value, expected", [
    (-5, 0),
    (0, 0),
    (19.9, 0),
    (20, 1),
    (50, 2),
    (80, 4),
    (100, 4),
    (150, 4),
])
def test_class_index(value, expected):
    assert class_index(value, limits) == expected


def test_classify():
    assert classify(0, limits) == 0.0
    assert classify(50, limits) == 0.5
    assert classify(100, limits) == 1.0
    assert abs(classify(30, limits) - 0.25) < tol


def test_classify_single_bin():
    assert classify(0.7, (0, 1)) == 0.0


def test_domain_map():
    mapping = DomainMap([0, 0.25, 1])
    assert mapping(0) == 0.0
    assert mapping(0.125) == 0.25
    assert mapping(0.25) == 0.5
    assert abs(mapping(0.625) - 0.75) < tol
    assert mapping(1) == 1.0


def test_domain_map_clamps():
    mapping = DomainMap([0, 50, 100])
    assert mapping(-1) == 0.0
    assert mapping(2) == 1.0


def test_domain_map_unnormalized_domain():
    mapping = DomainMap([10, 20, 50])
    assert abs(mapping(0.25) - 0.5) < tol
    assert abs(mapping(0.625) - 0.75) < tol
