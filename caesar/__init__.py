"""
CaesarKit Caesar -- Shift Cipher Toolkit
=========================================

Encryption and decryption with the classical Caesar shift cipher, an
exhaustive 26-key brute-force search, and an English letter-frequency
scorer that ranks the brute-force candidates.

Modules:
    - caesar.analyzers: Shift normalisation, codec, brute force, scorer
    - caesar.core.engine: Engine facade returning ScanResult envelopes
    - caesar.core.models: Pydantic data models
    - caesar.output: Console and report output
    - caesar.cli: Click-based command-line interface

Example::

    >>> from caesar import encrypt, brute_force, select_best
    >>> encrypt("Hello, World!", 3)
    'Khoor, Zruog!'
"""

__version__ = "1.0.0"
__tool_name__ = "caesar"

from caesar.analyzers import (
    ENGLISH_FREQUENCIES,
    EnglishScorer,
    brute_force,
    decrypt,
    encrypt,
    english_score,
    normalize_shift,
    rank_candidates,
    rot13,
    select_best,
)
from caesar.core.engine import CaesarEngine

__all__ = [
    "CaesarEngine",
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
