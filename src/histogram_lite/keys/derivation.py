"""Key functions: map an item to the string that identifies it.

A histogram never compares items with ==. Two items are "the same" when
their key function returns the same string, so the key function alone
decides deduplication.

The default key is "(" + str(item) + ":" + tag + ")":

    default_key(1)      -> "(1:3)"
    default_key("1")    -> "(1:5)"
    default_key([1, 2]) -> "([1, 2]:4)"

Two objects whose str() and tag coincide collide on purpose. Callers that
need per-object identity supply their own key function, for example
`lambda item: item.id`.
"""
from __future__ import annotations

from typing import Any

from histogram_lite.domain.types import KeyFunction
from histogram_lite.keys.type_tags import DEFAULT_TYPE_TAGS, TypeTagTable


def make_key_function(table: TypeTagTable) -> KeyFunction:
    """Build a default-style key function over a custom tag table."""

    def key(item: Any) -> str:
        return f"({item}:{table.tag_for(item)})"

    return key


def default_key(item: Any) -> str:
    """Key derived from str(item) and the item's default type tag."""
    return f"({item}:{DEFAULT_TYPE_TAGS.tag_for(item)})"
