"""Shared type aliases used across the histogram package."""
from __future__ import annotations

from typing import Any, Callable, TypeAlias

Key: TypeAlias = str
Frequency: TypeAlias = int
Pair: TypeAlias = tuple[Any, int]        # (item, frequency)
KeyFunction: TypeAlias = Callable[[Any], str]
Visitor: TypeAlias = Callable[..., Any]
Comparator: TypeAlias = Callable[[Pair, Pair], int]
