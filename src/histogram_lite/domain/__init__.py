"""Type aliases for histogram-lite.

Re-exports the aliases for convenient access:
    from histogram_lite.domain import Key, Pair, KeyFunction
"""
from histogram_lite.domain.types import (
    Comparator,
    Frequency,
    Key,
    KeyFunction,
    Pair,
    Visitor,
)

__all__ = [
    "Comparator",
    "Frequency",
    "Key",
    "KeyFunction",
    "Pair",
    "Visitor",
]
