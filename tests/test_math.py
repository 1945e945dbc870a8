import math as pymath

import numpy as np
import pytest
from fekit.functional import math


@pytest.fixture
def seeded():
    math.seed(1234)
    yield
    math.seed()


def test_constants():
    assert math.PI == pytest.approx(pymath.pi)
    assert math.E == pytest.approx(pymath.e)


def test_random_is_in_unit_interval(seeded):
    samples = [math.random() for _ in range(1000)]
    assert all(0.0 <= s < 1.0 for s in samples)
    assert isinstance(samples[0], float)


def test_seed_makes_sequence_reproducible():
    math.seed(7)
    first = [math.random() for _ in range(5)]
    math.seed(7)
    second = [math.random() for _ in range(5)]
    math.seed()
    assert first == second


def test_random_range_excludes_upper_bound(seeded):
    samples = {math.random_range(0, 3) for _ in range(500)}
    assert samples == {0, 1, 2}
    with pytest.raises(ValueError):
        math.random_range(5, 5)


def test_random_int_includes_upper_bound(seeded):
    samples = {math.random_int(-1, 1) for _ in range(500)}
    assert samples == {-1, 0, 1}
    assert math.random_int(4, 4) == 4


@pytest.mark.parametrize(
    "value, expected",
    [
        (3.5, 4),
        (2.5, 3),
        (-3.5, -3),
        (-3.6, -4),
        (-0.5, 0),
        (0.49999999999999994, 0),
        (1.4, 1),
        (7, 7),
    ],
)
def test_round_sends_halves_up(value, expected):
    result = math.round(value)
    assert result == expected
    assert isinstance(result, int)


def test_round_non_finite():
    assert pymath.isnan(math.round(float("nan")))
    assert math.round(float("inf")) == float("inf")
    assert math.round(float("-inf")) == float("-inf")


def test_round_array():
    result = math.round([0.5, 1.5, -1.5, 2.4])
    np.testing.assert_array_equal(result, [1.0, 2.0, -1.0, 2.0])


def test_floor_ceil_trunc():
    assert math.floor(-1.5) == -2
    assert math.ceil(-1.5) == -1
    assert math.floor(2) == 2
    assert isinstance(math.ceil(1.2), int)
    assert math.trunc(-1.7) == -1.0
    assert math.trunc(1.7) == 1.0
    np.testing.assert_array_equal(math.floor([1.5, -1.5]), [1.0, -2.0])


def test_abs():
    assert math.abs(-3) == 3
    assert math.abs(-2.5) == 2.5
    np.testing.assert_array_equal(math.abs([-1, 2, -3]), [1, 2, 3])


def test_min_max():
    assert math.min(3, 1, 2) == 1
    assert math.max(3, 1, 2) == 3
    assert math.min() == float("inf")
    assert math.max() == float("-inf")
    assert pymath.isnan(math.max(1, float("nan")))


def test_pow_sqrt_log():
    assert math.pow(2, 10) == 1024
    assert math.pow(4, 0.5) == 2
    assert math.sqrt(9) == 3
    assert pymath.isnan(math.sqrt(-1))
    assert math.log(math.E) == pytest.approx(1.0)
    assert math.log(0) == float("-inf")
    assert pymath.isnan(math.log(-1))


def test_trigonometry():
    assert math.sin(0) == 0
    assert math.sin(math.PI / 2) == pytest.approx(1.0)
    assert math.cos(math.PI) == pytest.approx(-1.0)
    assert math.tan(math.PI / 4) == pytest.approx(1.0)
    np.testing.assert_allclose(math.cos([0, math.PI]), [1.0, -1.0])
