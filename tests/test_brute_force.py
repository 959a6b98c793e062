"""Tests for the exhaustive key search."""

from caesar.analyzers.brute_force import brute_force
from caesar.analyzers.codec import decrypt
from caesar.core.models import CandidateResult


def test_always_26_candidates_in_shift_order():
    for text in ("Khoor, Zruog!", "", "1234!@#", "a"):
        candidates = brute_force(text)
        assert len(candidates) == 26
        assert [c.shift for c in candidates] == list(range(26))


def test_contains_hello_world_at_shift_23():
    candidates = brute_force("Khoor, Zruog!")
    assert CandidateResult(shift=23, text="Hello, World!") in candidates
    assert candidates[23].text == "Hello, World!"


def test_shift_zero_is_the_input():
    assert brute_force("Khoor")[0].text == "Khoor"


def test_candidates_cover_every_decryption_key():
    ciphertext = "Wkh txlfn eurzq ira"
    texts = {c.text for c in brute_force(ciphertext)}
    assert texts == {decrypt(ciphertext, key) for key in range(26)}


def test_letterless_input_repeats_unchanged():
    assert {c.text for c in brute_force("1234!@#")} == {"1234!@#"}
