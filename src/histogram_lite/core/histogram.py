"""Histogram: a discrete frequency counter keyed by a derived string.

Items are not compared with == or hashed. Each item is passed through the
histogram's key function and the resulting string is what gets counted:

    h = Histogram().add(1, 2, 2, "2")
    h.frequency(2)    -> 2
    h.frequency("2")  -> 1      # "(2:5)" is a different key than "(2:3)"
    h.size()          -> 3

The store is a dict from key to Entry(item, freq). Enumeration order is
dict order (first-insertion order of each key). Only keys() and
to_string() promise a sorted order.

Mutating methods return the histogram, so calls chain:

    Histogram().key(lambda o: o.id).items(objects).frequency(o1)

Replacing the key function does not re-key what is already stored. Items
added under the old function stay under their old keys, and lookups made
with the new function may miss them.
"""
from __future__ import annotations

import functools
import logging
from collections.abc import Iterable, Iterator
from typing import Any, overload

from histogram_lite.core import stats
from histogram_lite.core.entry import Entry
from histogram_lite.domain.types import (
    Comparator,
    Frequency,
    Key,
    KeyFunction,
    Pair,
    Visitor,
)
from histogram_lite.keys.derivation import default_key

log = logging.getLogger(__name__)


class Histogram:
    """Frequency counter over items identified by a key function.

    Args:
        key_fn: item -> str. Defaults to `default_key` (text form plus a
            coarse type tag).
    """

    def __init__(self, key_fn: KeyFunction | None = None) -> None:
        self._store: dict[Key, Entry] = {}
        self._size = 0
        self._key: KeyFunction = key_fn or default_key

    @classmethod
    def from_items(
        cls, items: Iterable[Any], key_fn: KeyFunction | None = None
    ) -> Histogram:
        """Factory: a new histogram with every element of `items` added once."""
        return cls(key_fn).add(*items)

    # ── Key function ──

    @overload
    def key(self) -> KeyFunction: ...

    @overload
    def key(self, fn: KeyFunction) -> Histogram: ...

    def key(self, fn: KeyFunction | None = None) -> KeyFunction | Histogram:
        """Get the key function, or install a new one and return self."""
        if fn is None:
            return self._key
        log.debug("Replacing key function on histogram with %d keys", self._size)
        self._key = fn
        return self

    # ── Mutation ──

    def add(self, *items: Any) -> Histogram:
        """Count each item once. None is skipped."""
        store = self._store
        key_fn = self._key
        for item in items:
            if item is None:
                continue
            k = key_fn(item)
            entry = store.get(k)
            if entry is None:
                store[k] = Entry(item)
                self._size += 1
            else:
                entry.freq += 1
        return self

    def add_string_chars(self, *texts: str) -> Histogram:
        """Add every character of each string as its own item."""
        for text in texts:
            if not isinstance(text, str):
                raise TypeError(
                    f"add_string_chars expects str, got {type(text).__name__}"
                )
            self.add(*text)
        return self

    def remove(self, *items: Any) -> Histogram:
        """Decrement each item's count, dropping keys that reach zero.

        Items that are not present are ignored.
        """
        for item in items:
            k = self._key(item)
            entry = self._store.get(k)
            if entry is None:
                continue
            entry.freq -= 1
            if entry.freq == 0:
                del self._store[k]
                self._size -= 1
        return self

    def clear(self, *items: Any) -> Histogram:
        """With no arguments empty the histogram, else drop the given items.

        Dropping ignores the current count: the whole entry goes.
        """
        if not items:
            log.debug("Clearing histogram with %d keys", self._size)
            self._store = {}
            self._size = 0
            return self
        for item in items:
            k = self._key(item)
            if k in self._store:
                del self._store[k]
                self._size -= 1
        return self

    def normalize(self, frequency: Frequency = 1) -> Histogram:
        """Set every stored frequency to `frequency` (default 1)."""
        if frequency < 1:
            raise ValueError(f"frequency must be >= 1, got {frequency}")
        for entry in self._store.values():
            entry.freq = frequency
        return self

    def merge(self, *histograms: Histogram) -> Histogram:
        """Add every item of each histogram as many times as it occurs there.

        Items are re-keyed with this histogram's key function, so items the
        source kept apart can land on one key here.
        """
        for other in histograms:
            log.debug("Merging %d keys into histogram", other.size())
            for item, freq in other.pairs():
                for _ in range(freq):
                    self.add(item)
        return self

    # ── Read and iteration ──

    @overload
    def items(self) -> list[Any]: ...

    @overload
    def items(self, replacement: Iterable[Any]) -> Histogram: ...

    def items(
        self, replacement: Iterable[Any] | None = None
    ) -> list[Any] | Histogram:
        """Get one item per key, or replace the contents and return self.

        Replacing is clear() followed by add() of each element in order.
        """
        if replacement is None:
            return [entry.item for entry in self._store.values()]
        self.clear()
        self.add(*replacement)
        return self

    def frequencies(self) -> list[Frequency]:
        return [entry.freq for entry in self._store.values()]

    def pairs(self) -> list[Pair]:
        """(item, frequency) per key, in enumeration order."""
        return [(entry.item, entry.freq) for entry in self._store.values()]

    def keys(self) -> list[Key]:
        """Derived keys, always in ascending order."""
        return sorted(self._store)

    def each(self, visit: Visitor, context: Any = None) -> Histogram:
        """Call visit(item, frequency, key) for every entry.

        If `context` is given it is passed first, standing in for a bound
        receiver: visit(context, item, frequency, key). The store must not
        be mutated from inside `visit`.
        """
        for k, entry in self._store.items():
            if context is None:
                visit(entry.item, entry.freq, k)
            else:
                visit(context, entry.item, entry.freq, k)
        return self

    def has(self, item: Any) -> bool:
        return self._key(item) in self._store

    def frequency(self, item: Any) -> Frequency:
        """Stored count for the item's key, 0 if absent."""
        entry = self._store.get(self._key(item))
        if entry is None:
            return 0
        return entry.freq

    def freq_to_items(self, frequency: Frequency) -> list[Any]:
        """Items whose count is exactly `frequency`."""
        return [
            entry.item for entry in self._store.values() if entry.freq == frequency
        ]

    def size(self) -> int:
        """Number of distinct keys."""
        return self._size

    def sorted_pairs(self, comparator: Comparator | None = None) -> list[Pair]:
        """Pairs sorted low-to-high by frequency, or by a cmp-style comparator.

        The comparator receives two (item, frequency) pairs and returns a
        negative, zero or positive int. Its exceptions propagate.
        """
        result = self.pairs()
        if comparator is None:
            result.sort(key=lambda pair: pair[1])
        else:
            result.sort(key=functools.cmp_to_key(comparator))
        return result

    # ── Aggregate statistics ──

    def min(self) -> float:
        """Lowest frequency. NaN when empty."""
        return stats.minimum(self.frequencies())

    def max(self) -> float:
        """Highest frequency. NaN when empty."""
        return stats.maximum(self.frequencies())

    def total(self) -> int:
        """Sum of all frequencies."""
        return stats.total(self.frequencies())

    def average(self) -> float:
        """total() / size(). NaN when empty."""
        return stats.mean(self.frequencies())

    def entropy(self) -> float:
        """Shannon entropy of the frequency distribution, in bits."""
        return stats.shannon_entropy(self.frequencies())

    # ── Comparison and copying ──

    def equals(self, other: Histogram) -> bool:
        """True if both have the same size and matching frequencies.

        Walks this histogram's items and compares self.frequency(item)
        with other.frequency(item). Each side derives keys with its own
        key function, so with differing key functions a.equals(b) and
        b.equals(a) can disagree.
        """
        if self is other:
            return True
        if self.size() != other.size():
            return False
        for item in self.items():
            if self.frequency(item) != other.frequency(item):
                return False
        return True

    def copy(self) -> Histogram:
        """New histogram with the same key function and the same items.

        Rebuilt by adding each distinct item once, so every frequency in
        the copy is 1. Use clone() to keep the counts.
        """
        return type(self)().key(self.key()).items(self.items())

    def clone(self) -> Histogram:
        """New histogram with a duplicate of the store: same keys, same counts."""
        twin = type(self)(self._key)
        twin._store = {k: Entry(e.item, e.freq) for k, e in self._store.items()}
        twin._size = self._size
        log.debug("Cloned histogram with %d keys", self._size)
        return twin

    def to_string(self) -> str:
        """Sorted "key:freq" strings, comma-joined inside braces."""
        entries = sorted(f"{k}:{entry.freq}" for k, entry in self._store.items())
        return "{" + ",".join(entries) + "}"

    # ── Python protocols ──

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, item: Any) -> bool:
        return self.has(item)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.items())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Histogram):
            return NotImplemented
        return self.equals(other)

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self._size}, total={self.total()})"


def histogram(key_fn: KeyFunction | None = None) -> Histogram:
    """Factory: a new, empty Histogram."""
    return Histogram(key_fn)
