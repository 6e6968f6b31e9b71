"""Opt-in thread-safe histogram.

Public API:
    LockedHistogram: Histogram with one RLock around every operation
"""

from histogram_lite.concurrency.locked_histogram import LockedHistogram

__all__ = [
    "LockedHistogram",
]
