"""Coarse-grained lock wrapper for sharing one Histogram across threads.

Histogram itself takes no locks: it assumes a single writer. When several
threads must update the same histogram, LockedHistogram puts one
re-entrant lock around every public operation.

The lock is an RLock because operations call each other on the same
instance (add_string_chars -> add, items(list) -> clear + add,
average -> frequencies).

Operations that read a second histogram (equals, merge) never hold this
histogram's lock while the other one is being read. Otherwise
a.equals(b) and b.equals(a) on two threads would take the two locks in
opposite order and deadlock.
"""
from __future__ import annotations

import logging
import threading
from collections.abc import Iterable
from typing import Any

from histogram_lite.core.histogram import Histogram
from histogram_lite.domain.types import Comparator, KeyFunction, Pair, Visitor

log = logging.getLogger(__name__)


class LockedHistogram(Histogram):
    """Histogram with a single RLock around each operation.

    Throughput under contention is that of one thread at a time. That is
    the point: it is correct and simple, and anything faster needs a
    different structure.
    """

    def __init__(self, key_fn: KeyFunction | None = None) -> None:
        self._lock = threading.RLock()
        super().__init__(key_fn)

    def key(self, fn: KeyFunction | None = None) -> KeyFunction | Histogram:
        with self._lock:
            return super().key(fn)

    def add(self, *items: Any) -> LockedHistogram:
        with self._lock:
            return super().add(*items)

    def add_string_chars(self, *texts: str) -> LockedHistogram:
        with self._lock:
            return super().add_string_chars(*texts)

    def remove(self, *items: Any) -> LockedHistogram:
        with self._lock:
            return super().remove(*items)

    def clear(self, *items: Any) -> LockedHistogram:
        with self._lock:
            return super().clear(*items)

    def normalize(self, frequency: int = 1) -> LockedHistogram:
        with self._lock:
            return super().normalize(frequency)

    def merge(self, *histograms: Histogram) -> LockedHistogram:
        """Snapshot each source's pairs first, then add them under our lock."""
        snapshots = [other.pairs() for other in histograms]
        with self._lock:
            for pairs in snapshots:
                log.debug("Merging %d keys into locked histogram", len(pairs))
                for item, freq in pairs:
                    for _ in range(freq):
                        super().add(item)
        return self

    def items(
        self, replacement: Iterable[Any] | None = None
    ) -> list[Any] | Histogram:
        with self._lock:
            return super().items(replacement)

    def frequencies(self) -> list[int]:
        with self._lock:
            return super().frequencies()

    def pairs(self) -> list[Pair]:
        with self._lock:
            return super().pairs()

    def keys(self) -> list[str]:
        with self._lock:
            return super().keys()

    def each(self, visit: Visitor, context: Any = None) -> LockedHistogram:
        with self._lock:
            return super().each(visit, context)

    def has(self, item: Any) -> bool:
        with self._lock:
            return super().has(item)

    def frequency(self, item: Any) -> int:
        with self._lock:
            return super().frequency(item)

    def freq_to_items(self, frequency: int) -> list[Any]:
        with self._lock:
            return super().freq_to_items(frequency)

    def size(self) -> int:
        with self._lock:
            return super().size()

    def sorted_pairs(self, comparator: Comparator | None = None) -> list[Pair]:
        with self._lock:
            return super().sorted_pairs(comparator)

    def equals(self, other: Histogram) -> bool:
        """Same comparison as Histogram.equals, over a snapshot of our items.

        Each frequency() call locks only its own histogram.
        """
        if self is other:
            return True
        with self._lock:
            size, items = self._size, super().items()
        if size != other.size():
            return False
        for item in items:
            if self.frequency(item) != other.frequency(item):
                return False
        return True

    def copy(self) -> LockedHistogram:
        with self._lock:
            return type(self)(self._key).items(super().items())

    def clone(self) -> LockedHistogram:
        with self._lock:
            return super().clone()

    def to_string(self) -> str:
        with self._lock:
            return super().to_string()
