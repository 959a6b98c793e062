"""
Caesar Core Module
===================

Data models for the Caesar tool. The engine lives in
:mod:`caesar.core.engine`.
"""

from caesar.core.models import (
    BruteForceResult,
    CandidateResult,
    CipherOperation,
    CodecResult,
    ScoredCandidate,
    ScoreResult,
)

__all__ = [
    "BruteForceResult",
    "CandidateResult",
    "CipherOperation",
    "CodecResult",
    "ScoredCandidate",
    "ScoreResult",
]
