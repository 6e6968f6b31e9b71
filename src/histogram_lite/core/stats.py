"""Aggregate statistics over a list of frequencies.

Plain functions so they can be checked without building a histogram.
Empty input never raises: min, max and mean return NaN, total returns 0
and entropy returns 0.0.
"""
from __future__ import annotations

import math
from collections.abc import Sequence

LOG2 = math.log(2)


def total(freqs: Sequence[int]) -> int:
    return sum(freqs)


def minimum(freqs: Sequence[int]) -> float:
    """Smallest frequency, or NaN for an empty histogram."""
    if not freqs:
        return math.nan
    return min(freqs)


def maximum(freqs: Sequence[int]) -> float:
    """Largest frequency, or NaN for an empty histogram."""
    if not freqs:
        return math.nan
    return max(freqs)


def mean(freqs: Sequence[int]) -> float:
    """Average frequency per distinct key, or NaN for an empty histogram."""
    if not freqs:
        return math.nan
    return total(freqs) / len(freqs)


def shannon_entropy(freqs: Sequence[int]) -> float:
    """Shannon entropy in bits per symbol.

    Each frequency becomes a probability p = freq / total and the result
    is the sum of -p * log2(p). log2 is computed as log(p) / log(2) and
    the terms are accumulated in the order given, so results are
    reproducible to the last bit: one entry gives exactly 0, and 2**k
    equal frequencies give exactly k.
    """
    n = total(freqs)
    result = 0.0
    for freq in freqs:
        ratio = freq / n
        result -= ratio * math.log(ratio) / LOG2
    return result
