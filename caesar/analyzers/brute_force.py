"""
Brute-Force Key Search
=======================

The Caesar key space has only 26 members, so exhaustive search is the
standard attack. Trying every encrypting shift also covers every
decrypting shift: candidate ``s`` equals ``decrypt(ciphertext, 26 - s)``.
"""

from __future__ import annotations

from caesar.analyzers.codec import encrypt
from caesar.analyzers.shift import ALPHABET_SIZE
from caesar.core.models import CandidateResult


def brute_force(ciphertext: str) -> list[CandidateResult]:
    """Rotate *ciphertext* by every shift in ``0..25``.

    No filtering and no early exit: exactly 26 candidates are returned in
    ascending shift order, even for empty or letterless input.

    Args:
        ciphertext: Text to attack.

    Returns:
        List of 26 :class:`CandidateResult`, ``result[i].shift == i``.
    """
    return [
        CandidateResult(shift=shift, text=encrypt(ciphertext, shift))
        for shift in range(ALPHABET_SIZE)
    ]
