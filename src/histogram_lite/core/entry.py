"""Entry: the record a histogram stores under each key."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(slots=True)
class Entry:
    """Representative item plus its count.

    `item` is whichever item first produced the key; later adds with the
    same key only bump `freq`. A live entry always has freq >= 1.
    """
    item: Any
    freq: int = 1
