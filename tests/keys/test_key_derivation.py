"""Tests for default and custom key functions."""
from __future__ import annotations

from histogram_lite.keys.derivation import default_key, make_key_function
from histogram_lite.keys.type_tags import DEFAULT_TYPE_TAGS


def test_number_and_string_differ():
    assert default_key(1) == "(1:3)"
    assert default_key("1") == "(1:5)"
    assert default_key(1) != default_key("1")


def test_key_is_deterministic():
    assert default_key([1, 2]) == default_key([1, 2])
    assert default_key([1, 2]) == "([1, 2]:4)"


def test_same_text_same_tag_collides(objects):
    class Other:
        def __str__(self):
            return "id1"

    # Different classes, same str() and same fallback tag
    assert default_key(objects[0]) == default_key(Other())


def test_none_has_a_key():
    assert default_key(None) == "(None:2)"


def test_make_key_function_uses_table():
    table = DEFAULT_TYPE_TAGS.copy()
    table.register("digits", 30, lambda s: isinstance(s, str) and s.isdigit(),
                   before="text")
    key = make_key_function(table)
    assert key("42") == "(42:30)"
    assert key("ab") == "(ab:5)"
    assert key(42) == "(42:3)"


def test_make_key_function_sees_later_registrations():
    table = DEFAULT_TYPE_TAGS.copy()
    key = make_key_function(table)
    assert key(b"x") == "(b'x':13)"
    table.unregister("bytes")
    assert key(b"x") == "(b'x':0)"
