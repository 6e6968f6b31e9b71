"""Coarse type tags for default key derivation.

The default key for an item is its text form plus a small integer naming
its broad runtime category. Without the tag, the number 1 and the string
"1" would share the key "1" and be counted as the same item.

Tags are assigned by an ordered table of (name, tag, predicate) rules.
The first rule whose predicate accepts the item wins. Items that no rule
accepts get FALLBACK_TAG, which no named rule may use.

Order matters where Python's types overlap: bool is a subclass of int,
so "boolean" must be checked before "number", and classes are callable,
so "callable" sits last.
"""
from __future__ import annotations

import datetime
import numbers
import re
from collections.abc import Mapping, Sequence, Set
from dataclasses import dataclass
from typing import Any, Callable

FALLBACK_TAG = 0


@dataclass(frozen=True, slots=True)
class TypeTagRule:
    """One row of a TypeTagTable."""
    name: str
    tag: int
    predicate: Callable[[Any], bool]


class TypeTagTable:
    """Ordered, extensible list of type-tag rules.

    Lookups walk the rules front to back. New rules go to the end unless
    `before` names an existing rule to insert ahead of.
    """

    def __init__(self, rules: list[TypeTagRule] | None = None) -> None:
        self._rules: list[TypeTagRule] = []
        for rule in rules or []:
            self.register(rule.name, rule.tag, rule.predicate)

    def register(
        self,
        name: str,
        tag: int,
        predicate: Callable[[Any], bool],
        before: str | None = None,
    ) -> TypeTagTable:
        """Add a rule. Returns the table so registrations can be chained."""
        if tag <= FALLBACK_TAG:
            raise ValueError(f"Tag must be positive, got {tag}")
        for rule in self._rules:
            if rule.name == name:
                raise ValueError(f"Rule {name!r} is already registered")
            if rule.tag == tag:
                raise ValueError(f"Tag {tag} is already used by rule {rule.name!r}")

        rule = TypeTagRule(name=name, tag=tag, predicate=predicate)
        if before is None:
            self._rules.append(rule)
        else:
            self._rules.insert(self._index_of(before), rule)
        return self

    def unregister(self, name: str) -> None:
        """Remove a rule by name. Raises KeyError if it is not registered."""
        del self._rules[self._index_of(name)]

    def tag_for(self, item: Any) -> int:
        """Return the tag of the first rule accepting `item`."""
        for rule in self._rules:
            if rule.predicate(item):
                return rule.tag
        return FALLBACK_TAG

    def names(self) -> list[str]:
        return [rule.name for rule in self._rules]

    def copy(self) -> TypeTagTable:
        return TypeTagTable(list(self._rules))

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self):
        return iter(list(self._rules))

    def _index_of(self, name: str) -> int:
        for i, rule in enumerate(self._rules):
            if rule.name == name:
                return i
        raise KeyError(name)


def _is_sequence(item: Any) -> bool:
    # str and bytes are sequences too, but have their own rules
    return isinstance(item, Sequence) and not isinstance(
        item, (str, bytes, bytearray)
    )


def _default_rules() -> list[TypeTagRule]:
    return [
        TypeTagRule("none", 2, lambda item: item is None),
        TypeTagRule("boolean", 7, lambda item: isinstance(item, bool)),
        TypeTagRule("number", 3, lambda item: isinstance(item, numbers.Number)),
        TypeTagRule("text", 5, lambda item: isinstance(item, str)),
        TypeTagRule("sequence", 4, _is_sequence),
        TypeTagRule("mapping", 6, lambda item: isinstance(item, Mapping)),
        TypeTagRule("set", 14, lambda item: isinstance(item, Set)),
        TypeTagRule("bytes", 13, lambda item: isinstance(item, (bytes, bytearray))),
        TypeTagRule(
            "date",
            10,
            lambda item: isinstance(item, (datetime.date, datetime.time)),
        ),
        TypeTagRule("error", 11, lambda item: isinstance(item, BaseException)),
        TypeTagRule("pattern", 12, lambda item: isinstance(item, re.Pattern)),
        TypeTagRule("callable", 8, callable),
    ]


DEFAULT_TYPE_TAGS = TypeTagTable(_default_rules())
