import pytest

from cliph.utils import clamp


@pytest.mark.parametrize(
    "value, low, high, expected",
    [
        (5, 0, 10, 5),
        (-1, 0, 10, 0),
        (11, 0, 10, 10),
        (0, 0, 10, 0),
        (10, 0, 10, 10),
    ],
)
def test_clamp_integers(value, low, high, expected):
    assert clamp(value, low, high) == expected


def test_clamp_floats_stay_in_range():
    for value in (-3.5, 0.25, 7.75):
        result = clamp(value, -1.0, 1.0)
        assert -1.0 <= result <= 1.0


def test_clamp_strings():
    assert clamp("m", "b", "y") == "m"
    assert clamp("a", "b", "y") == "b"
    assert clamp("z", "b", "y") == "y"