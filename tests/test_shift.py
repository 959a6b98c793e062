"""Tests for shift normalisation."""

import pytest

from caesar.analyzers.shift import normalize_shift


@pytest.mark.parametrize(
    "shift, expected",
    [(0, 0), (-1, 25), (27, 1), (25, 25), (26, 0), (-26, 0), (-27, 25), (52, 0)],
)
def test_known_values(shift, expected):
    assert normalize_shift(shift) == expected


def test_result_in_range_and_congruent():
    for shift in list(range(-100, 101)) + [10**12 + 7, -(10**12) - 7]:
        normalized = normalize_shift(shift)
        assert 0 <= normalized < 26
        assert (normalized - shift) % 26 == 0


def test_accepts_integral_subclasses():
    class Key(int):
        pass

    assert normalize_shift(Key(-3)) == 23


@pytest.mark.parametrize("bad", [2.5, 3.0, "3", None, True])
def test_rejects_non_integers(bad):
    with pytest.raises(TypeError):
        normalize_shift(bad)
