"""
CaesarKit Mathematical Utilities
=================================

NumPy-backed helpers for letter-frequency statistics: a 26-bin letter
histogram over the Latin alphabet and the L1 distance between two
discrete distributions.

References:
    [1] Shannon, C. E. (1948). A Mathematical Theory of Communication.
        Bell System Technical Journal, 27(3), 379-423.
    [2] Sinkov, A. (1966). Elementary Cryptanalysis: A Mathematical
        Approach. Mathematical Association of America.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


FloatArray = NDArray[np.floating]

ALPHABET_SIZE: int = 26
_LOWER_A: int = ord("a")


def letter_histogram(text: str) -> FloatArray:
    """Count the ASCII Latin letters of *text*, case-insensitively.

    Every character outside ``A-Z``/``a-z`` is ignored, including
    accented and non-Latin letters.

    Args:
        text: Arbitrary text.

    Returns:
        1-D float64 array of length 26; index 0 is ``a``.
    """
    hist = np.zeros(ALPHABET_SIZE, dtype=np.float64)
    positions = [
        ord(ch) - _LOWER_A
        for ch in text.lower()
        if "a" <= ch <= "z"
    ]
    if not positions:
        return hist

    counts = np.bincount(np.asarray(positions, dtype=np.intp), minlength=ALPHABET_SIZE)
    hist[:] = counts.astype(np.float64)
    return hist


def l1_distance(p: FloatArray, q: FloatArray) -> float:
    """Compute the L1 (Manhattan) distance between two distributions.

    .. math::

        D(P, Q) = \\sum_i |p_i - q_i|

    For two probability distributions the result lies in ``[0, 2]``.

    Args:
        p: Distribution P (1-D NumPy array).
        q: Distribution Q (1-D NumPy array, same shape as *p*).

    Returns:
        The L1 distance (>= 0).

    Raises:
        ValueError: If array shapes differ.
    """
    p = np.asarray(p, dtype=np.float64)
    q = np.asarray(q, dtype=np.float64)

    if p.shape != q.shape:
        raise ValueError(
            f"Array shapes differ: "
            f"p={p.shape}, q={q.shape}"
        )

    return float(np.sum(np.abs(p - q)))
