"""The Histogram container and its building blocks.

Public API:
    Histogram: frequency counter keyed by a derived string
    histogram: factory returning an empty Histogram
    Entry: stored (item, freq) record
"""

from histogram_lite.core.entry import Entry
from histogram_lite.core.histogram import Histogram, histogram

__all__ = [
    "Entry",
    "Histogram",
    "histogram",
]
