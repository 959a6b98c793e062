"""
Caesar Codec
=============

Per-character rotation over the Latin alphabet. Uppercase letters rotate
within ``A-Z``, lowercase within ``a-z``; every other character (digits,
punctuation, whitespace, accented or non-Latin letters) is emitted
unchanged, so output length always equals input length.

Decryption is encryption with the negated shift::

    decrypt(text, k) == encrypt(text, -k)

References:
    - Suetonius, De Vita Caesarum, Divus Iulius 56.
    - Singh, S. (1999). The Code Book. Fourth Estate.
"""

from __future__ import annotations

import string

from caesar.analyzers.shift import ALPHABET_SIZE, normalize_shift

_UPPER = string.ascii_uppercase
_LOWER = string.ascii_lowercase


def _translation_table(shift: int) -> dict[int, str]:
    """Build a ``str.translate`` table rotating ASCII letters by *shift*."""
    upper = _UPPER[shift:] + _UPPER[:shift]
    lower = _LOWER[shift:] + _LOWER[:shift]
    return str.maketrans(_UPPER + _LOWER, upper + lower)


# One table per canonical shift, built at import time.
_TABLES: tuple[dict[int, str], ...] = tuple(
    _translation_table(s) for s in range(ALPHABET_SIZE)
)


def encrypt(text: str, shift: int) -> str:
    """Encrypt *text* with a Caesar shift.

    Args:
        text: Plaintext; any characters.
        shift: Any integer; normalised into [0, 26) first.

    Returns:
        The ciphertext, same length as *text*.

    Raises:
        TypeError: If *text* is not a string or *shift* not an integer.
    """
    if not isinstance(text, str):
        raise TypeError(f"text must be a string, got {type(text).__name__}")
    return text.translate(_TABLES[normalize_shift(shift)])


def decrypt(text: str, shift: int) -> str:
    """Decrypt *text* that was encrypted with *shift*."""
    return encrypt(text, -normalize_shift(shift))


def rot13(text: str) -> str:
    """ROT13: the self-inverse Caesar shift of 13."""
    return encrypt(text, 13)
