"""Key derivation for histogram items.

Public API:
    default_key: str(item) plus a coarse type tag
    make_key_function: default-style key over a custom TypeTagTable
    TypeTagTable / TypeTagRule: ordered, extensible tag rules
    DEFAULT_TYPE_TAGS: the table default_key uses
    FALLBACK_TAG: tag for items no rule accepts
"""

from histogram_lite.keys.derivation import default_key, make_key_function
from histogram_lite.keys.type_tags import (
    DEFAULT_TYPE_TAGS,
    FALLBACK_TAG,
    TypeTagRule,
    TypeTagTable,
)

__all__ = [
    "DEFAULT_TYPE_TAGS",
    "FALLBACK_TAG",
    "TypeTagRule",
    "TypeTagTable",
    "default_key",
    "make_key_function",
]
