"""
Caesar Core Data Models
========================

Pydantic models for the Caesar cipher engine. Candidates are immutable
once produced; nothing here carries identity beyond a single call.

All models are serialisable to JSON and designed for consumption by both
the CLI output layer and the report writer.
"""

from __future__ import annotations

import enum

from pydantic import BaseModel, ConfigDict, Field


class CipherOperation(str, enum.Enum):
    """Operation performed by an engine run."""

    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"
    BRUTE_FORCE = "brute_force"
    SCORE = "score"


# ===================================================================== #
#  Candidate Models
# ===================================================================== #


class CandidateResult(BaseModel):
    """Output of one brute-force trial.

    Attributes:
        shift: Shift applied to the ciphertext, in [0, 26).
        text: Ciphertext rotated by *shift*.
    """

    model_config = ConfigDict(frozen=True)

    shift: int = Field(..., ge=0, lt=26)
    text: str


class ScoredCandidate(CandidateResult):
    """A :class:`CandidateResult` with its English-likelihood score.

    Attributes:
        score: Clamped L1 similarity to English letter frequencies.
            Never negative; only meaningful relative to other scores.
    """

    score: float = Field(..., ge=0.0)


# ===================================================================== #
#  Operation Results
# ===================================================================== #


class CodecResult(BaseModel):
    """Result of a direct encrypt/decrypt call.

    Attributes:
        operation: Either ``encrypt`` or ``decrypt``.
        shift: Shift as supplied by the caller.
        normalized_shift: The canonical shift actually applied.
        input_text: Text before the operation.
        output_text: Text after the operation.
    """

    operation: CipherOperation
    shift: int
    normalized_shift: int = Field(..., ge=0, lt=26)
    input_text: str
    output_text: str


class BruteForceResult(BaseModel):
    """Result of an exhaustive key search.

    Attributes:
        ciphertext: The text that was attacked.
        candidates: All 26 scored candidates in ascending shift order.
        ranked: The same candidates sorted by descending score; equal
            scores keep ascending shift order.
        best: The highest-scoring candidate, first-seen on ties.
        letter_count: Number of ASCII letters in the ciphertext.
    """

    ciphertext: str
    candidates: list[ScoredCandidate] = Field(default_factory=list)
    ranked: list[ScoredCandidate] = Field(default_factory=list)
    best: ScoredCandidate
    letter_count: int = 0

    @property
    def decryption_key(self) -> int:
        """Shift the sender most likely encrypted with."""
        return (26 - self.best.shift) % 26


class ScoreResult(BaseModel):
    """English-likelihood score of a single text."""

    text: str
    score: float = Field(..., ge=0.0)
    letter_count: int = 0
