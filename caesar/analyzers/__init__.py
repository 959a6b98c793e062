"""
Caesar Analyzers
=================

The cipher itself and the attack on it: shift normalisation, the codec,
exhaustive key search, and the English-likelihood scorer.
"""

from caesar.analyzers.shift import normalize_shift
from caesar.analyzers.codec import decrypt, encrypt, rot13
from caesar.analyzers.brute_force import brute_force
from caesar.analyzers.scorer import (
    ENGLISH_FREQUENCIES,
    EnglishScorer,
    english_score,
    rank_candidates,
    select_best,
)

__all__ = [
    "ENGLISH_FREQUENCIES",
    "EnglishScorer",
    "brute_force",
    "decrypt",
    "encrypt",
    "english_score",
    "normalize_shift",
    "rank_candidates",
    "rot13",
    "select_best",
]
