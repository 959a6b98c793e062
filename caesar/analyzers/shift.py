"""
Shift Normalisation
====================

Reduces any integer shift to its canonical representative in [0, 26),
using floored (never negative) modulo regardless of the input's sign.
"""

from __future__ import annotations

import numbers

ALPHABET_SIZE: int = 26


def normalize_shift(shift: int) -> int:
    """Return *shift* folded into ``range(26)``.

    Args:
        shift: Any integer, negative or larger than 25.

    Returns:
        ``s`` with ``0 <= s < 26`` and ``s ≡ shift (mod 26)``.

    Raises:
        TypeError: If *shift* is not an integer (``bool`` included).
    """
    if isinstance(shift, bool) or not isinstance(shift, numbers.Integral):
        raise TypeError(
            f"shift must be an integer, got {type(shift).__name__}"
        )
    shift = int(shift)
    return ((shift % ALPHABET_SIZE) + ALPHABET_SIZE) % ALPHABET_SIZE
