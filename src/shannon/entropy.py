"""Shannon entropy of a text string, in bits per code point."""

from __future__ import annotations

import math
from typing import Dict, List, Tuple

import numpy as np

# Code points below this go to the fixed-size table, everything else to the map.
_ASCII_LIMIT = 128
_LN2 = math.log(2.0)


def _count_code_points(text: str) -> Tuple[List[int], Dict[int, int], int]:
    """Single pass: ASCII counts by slot, other code points by value, and *n*."""
    ascii_counts = [0] * _ASCII_LIMIT
    other_counts: Dict[int, int] = {}
    n = 0
    for ch in text:
        cp = ord(ch)
        if cp < _ASCII_LIMIT:
            ascii_counts[cp] += 1
        else:
            other_counts[cp] = other_counts.get(cp, 0) + 1
        n += 1
    return ascii_counts, other_counts, n


def entropy(text: str) -> np.float32:
    """Compute Shannon entropy (bits per code point) of *text*.

    H = -Σ p(c) · log₂(p(c))  over distinct code points c, with p(c) = count(c) / n
    and n the number of code points (not the encoded byte length).

    The sum is accumulated as Σ count(c) · ln(count(c) / n) and divided once by
    n · ln 2 at the end. Empty input returns 0.0.
    """
    if not text:
        return np.float32(0.0)

    ascii_counts, other_counts, n = _count_code_points(text)

    raw = 0.0
    for count in ascii_counts:
        if count:
            raw += count * math.log(count / n)
    for cp in sorted(other_counts):
        count = other_counts[cp]
        raw += count * math.log(count / n)

    return np.float32(abs(raw) / (n * _LN2))


shannon_entropy = entropy
