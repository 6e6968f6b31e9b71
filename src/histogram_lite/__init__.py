"""histogram-lite: a discrete histogram keyed by derived strings.

    from histogram_lite import Histogram
    h = Histogram().add_string_chars("1223334444")
    h.entropy()  # 1.8464393446710154
"""

from histogram_lite.concurrency.locked_histogram import LockedHistogram
from histogram_lite.core.entry import Entry
from histogram_lite.core.histogram import Histogram, histogram
from histogram_lite.keys.derivation import default_key, make_key_function
from histogram_lite.keys.type_tags import (
    DEFAULT_TYPE_TAGS,
    FALLBACK_TAG,
    TypeTagRule,
    TypeTagTable,
)

HISTOGRAM_VERSION = "0.1.0"

__all__ = [
    "DEFAULT_TYPE_TAGS",
    "Entry",
    "FALLBACK_TAG",
    "HISTOGRAM_VERSION",
    "Histogram",
    "LockedHistogram",
    "TypeTagRule",
    "TypeTagTable",
    "default_key",
    "histogram",
    "make_key_function",
]
