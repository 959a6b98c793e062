"""
English Likelihood Scorer
==========================

Ranks brute-force candidates by how closely their letter-frequency
profile matches English prose.

The score pipeline:
1. Lowercase the text and keep only ASCII letters
2. Observed relative frequency of each of the 26 letters
3. L1 distance ``D`` to the reference English distribution
4. Score = ``max(0, 1 - D)``

``D`` lies in [0, 2] for two probability distributions, so the score is
non-negative and practically at most 1. It is a ranking signal only, not
a calibrated probability: short texts (a dozen letters or fewer) commonly
clamp to 0 for every shift.

References:
    - Lewand, R. E. (2000). Cryptological Mathematics. Mathematical
      Association of America.
    - Sinkov, A. (1966). Elementary Cryptanalysis: A Mathematical
      Approach. Mathematical Association of America.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Mapping, Sequence

import numpy as np

from shared.math_utils import l1_distance, letter_histogram
from caesar.core.models import CandidateResult, ScoredCandidate


ENGLISH_FREQUENCIES: Mapping[str, float] = MappingProxyType({
    "a": 0.082, "b": 0.015, "c": 0.028, "d": 0.043, "e": 0.127,
    "f": 0.022, "g": 0.020, "h": 0.061, "i": 0.070, "j": 0.0015,
    "k": 0.0077, "l": 0.040, "m": 0.024, "n": 0.067, "o": 0.075,
    "p": 0.019, "q": 0.0010, "r": 0.060, "s": 0.063, "t": 0.091,
    "u": 0.028, "v": 0.0098, "w": 0.024, "x": 0.0015, "y": 0.020,
    "z": 0.0074,
})


class EnglishScorer:
    """Scores texts against a reference letter distribution.

    Instances hold only the immutable reference vector, so one scorer can
    be shared freely across threads.

    Usage::

        scorer = EnglishScorer()
        best = scorer.select_best(brute_force(ciphertext))
        print(best.shift, best.text, f"{best.score:.4f}")
    """

    def __init__(self, reference: Mapping[str, float] = ENGLISH_FREQUENCIES) -> None:
        letters = sorted(reference)
        if letters != [chr(ord("a") + i) for i in range(26)]:
            raise ValueError(
                "reference must map exactly the 26 lowercase letters a-z"
            )
        self._reference = np.array(
            [reference[letter] for letter in letters], dtype=np.float64
        )
        self._reference.setflags(write=False)

    def score(self, text: str) -> float:
        """Score *text*; 0.0 when it contains no ASCII letters."""
        if not isinstance(text, str):
            raise TypeError(f"text must be a string, got {type(text).__name__}")
        counts = letter_histogram(text)
        total = counts.sum()
        if total == 0:
            return 0.0

        deviation = l1_distance(counts / total, self._reference)
        return max(0.0, 1.0 - deviation)

    def score_candidate(self, candidate: CandidateResult) -> ScoredCandidate:
        """Attach a score to a single candidate."""
        return ScoredCandidate(
            shift=candidate.shift,
            text=candidate.text,
            score=self.score(candidate.text),
        )

    def score_all(self, candidates: Iterable[CandidateResult]) -> list[ScoredCandidate]:
        """Score each candidate independently, preserving input order."""
        return [self.score_candidate(c) for c in candidates]

    def select_best(self, candidates: Sequence[CandidateResult]) -> ScoredCandidate:
        """Return the highest-scoring candidate.

        A candidate replaces the running best only on strict improvement,
        so ties resolve to the earliest candidate in *candidates*.

        Raises:
            ValueError: If *candidates* is empty.
        """
        best: ScoredCandidate | None = None
        for scored in self.score_all(candidates):
            if best is None or scored.score > best.score:
                best = scored

        if best is None:
            raise ValueError("select_best requires at least one candidate")
        return best

    def rank(self, candidates: Iterable[CandidateResult]) -> list[ScoredCandidate]:
        """Score and sort by descending score; stable for equal scores."""
        return sorted(
            self.score_all(candidates),
            key=lambda c: c.score,
            reverse=True,
        )


_default_scorer = EnglishScorer()


def english_score(text: str) -> float:
    """Score *text* with the default English reference table."""
    return _default_scorer.score(text)


def select_best(candidates: Sequence[CandidateResult]) -> ScoredCandidate:
    """Pick the best candidate with the default scorer."""
    return _default_scorer.select_best(candidates)


def rank_candidates(candidates: Iterable[CandidateResult]) -> list[ScoredCandidate]:
    """Rank candidates with the default scorer."""
    return _default_scorer.rank(candidates)
