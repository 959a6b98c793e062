"""Tests for the letter-statistics helpers."""

import numpy as np
import pytest

from shared.math_utils import l1_distance, letter_histogram


def test_letter_histogram_counts_ascii_letters_only():
    hist = letter_histogram("Hello, World! ß é 42")
    assert hist.shape == (26,)
    assert hist.sum() == 10
    assert hist[ord("l") - ord("a")] == 3
    assert hist[ord("o") - ord("a")] == 2


def test_letter_histogram_empty():
    assert not letter_histogram("").any()
    assert not letter_histogram("123 !?").any()


def test_l1_distance():
    p = np.array([0.5, 0.5, 0.0])
    q = np.array([0.0, 0.5, 0.5])
    assert l1_distance(p, q) == pytest.approx(1.0)
    assert l1_distance(p, p) == 0.0


def test_l1_distance_shape_mismatch():
    with pytest.raises(ValueError):
        l1_distance(np.zeros(26), np.zeros(25))
