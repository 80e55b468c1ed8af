import numpy as np
import pytest

from smokesim.utils import clamp, max_array, min_array


def test_min_array_finds_smallest():
    assert min_array([3.0, -1.5, 2.0, 7.25]) == -1.5


def test_max_array_finds_largest():
    assert max_array([3.0, -1.5, 2.0, 7.25]) == 7.25


def test_single_element():
    assert min_array([4.5]) == 4.5
    assert max_array([4.5]) == 4.5


def test_accepts_numpy_arrays():
    values = np.array([0.5, 9.0, -3.0])
    assert min_array(values) == -3.0
    assert max_array(values) == 9.0


def test_accepts_generators():
    assert max_array(x for x in [1.0, 8.0, 2.0]) == 8.0


def test_min_not_greater_than_max():
    values = [0.3, 0.1, 0.9, 0.4, 0.2]
    assert min_array(values) <= max_array(values)
    assert min_array(values) in values
    assert max_array(values) in values


@pytest.mark.parametrize("func", [min_array, max_array])
def test_empty_raises(func):
    with pytest.raises(ValueError):
        func([])


@pytest.mark.parametrize(
    "value, lower, upper, expected",
    [
        (-7.0, -5.0, 5.0, -5.0),
        (7.0, -5.0, 5.0, 5.0),
        (1.25, -5.0, 5.0, 1.25),
        (-5.0, -5.0, 5.0, -5.0),
        (5.0, -5.0, 5.0, 5.0),
    ],
)
def test_clamp(value, lower, upper, expected):
    assert clamp(value, lower, upper) == expected


def test_clamp_result_inside_bounds():
    for value in np.linspace(-10.0, 10.0, 41):
        result = clamp(value, -2.0, 3.0)
        assert -2.0 <= result <= 3.0