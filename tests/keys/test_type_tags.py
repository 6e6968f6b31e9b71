"""Tests for the ordered type-tag table."""
from __future__ import annotations

import datetime
import re

import pytest

from histogram_lite.keys.type_tags import (
    DEFAULT_TYPE_TAGS,
    FALLBACK_TAG,
    TypeTagTable,
)


class _Plain:
    pass


class TestDefaultTags:
    @pytest.mark.parametrize(
        "item, tag",
        [
            (None, 2),
            (True, 7),
            (1, 3),
            (1.5, 3),
            (complex(1, 2), 3),
            ("1", 5),
            ([1, 2], 4),
            ((1, 2), 4),
            ({"a": 1}, 6),
            ({1, 2}, 14),
            (frozenset(), 14),
            (b"ab", 13),
            (datetime.date(2020, 1, 1), 10),
            (datetime.datetime(2020, 1, 1, 12, 0), 10),
            (ValueError("x"), 11),
            (re.compile("a+"), 12),
            (len, 8),
            (lambda: None, 8),
        ],
    )
    def test_known_categories(self, item, tag):
        assert DEFAULT_TYPE_TAGS.tag_for(item) == tag

    def test_bool_is_not_a_number(self):
        assert DEFAULT_TYPE_TAGS.tag_for(False) != DEFAULT_TYPE_TAGS.tag_for(0)

    def test_unknown_object_gets_fallback(self):
        assert DEFAULT_TYPE_TAGS.tag_for(_Plain()) == FALLBACK_TAG

    def test_fallback_distinct_from_named_tags(self):
        assert FALLBACK_TAG not in [rule.tag for rule in DEFAULT_TYPE_TAGS]

    def test_names_in_priority_order(self):
        names = DEFAULT_TYPE_TAGS.names()
        assert names.index("boolean") < names.index("number")
        assert names[-1] == "callable"


class TestRegistration:
    def test_register_appends(self):
        table = DEFAULT_TYPE_TAGS.copy()
        table.register("plain", 20, lambda item: isinstance(item, _Plain))
        assert table.tag_for(_Plain()) == 20
        assert table.names()[-1] == "plain"

    def test_copy_leaves_default_untouched(self):
        table = DEFAULT_TYPE_TAGS.copy()
        table.register("plain", 20, lambda item: isinstance(item, _Plain))
        assert len(table) == len(DEFAULT_TYPE_TAGS) + 1
        assert DEFAULT_TYPE_TAGS.tag_for(_Plain()) == FALLBACK_TAG

    def test_register_before(self):
        table = DEFAULT_TYPE_TAGS.copy()
        table.register("digits", 21, lambda s: isinstance(s, str) and s.isdigit(),
                       before="text")
        assert table.tag_for("123") == 21
        assert table.tag_for("abc") == 5
        assert table.names().index("digits") == table.names().index("text") - 1

    def test_register_chains(self):
        table = TypeTagTable()
        result = table.register("a", 1, lambda item: item == "a")
        assert result is table

    def test_duplicate_name_rejected(self):
        table = DEFAULT_TYPE_TAGS.copy()
        with pytest.raises(ValueError):
            table.register("text", 99, lambda item: False)

    def test_duplicate_tag_rejected(self):
        table = DEFAULT_TYPE_TAGS.copy()
        with pytest.raises(ValueError):
            table.register("other", 5, lambda item: False)

    @pytest.mark.parametrize("tag", [0, -1])
    def test_non_positive_tag_rejected(self, tag):
        with pytest.raises(ValueError):
            TypeTagTable().register("bad", tag, lambda item: True)

    def test_unknown_before_raises(self):
        with pytest.raises(KeyError):
            TypeTagTable().register("a", 1, lambda item: True, before="missing")

    def test_unregister(self):
        table = DEFAULT_TYPE_TAGS.copy()
        table.unregister("text")
        assert table.tag_for("abc") == FALLBACK_TAG
        with pytest.raises(KeyError):
            table.unregister("text")

    def test_empty_table_is_all_fallback(self):
        table = TypeTagTable()
        assert len(table) == 0
        assert table.tag_for(1) == FALLBACK_TAG
        assert table.tag_for("x") == FALLBACK_TAG
