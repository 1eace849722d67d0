from __future__ import annotations

import pytest

from appconfig.utils import (
    deep_merge,
    is_key_value_collection,
    is_pair_sequence,
    normalize_key,
)


def test_deep_merge_simple():
    base = {"a": 1, "b": 2}
    override = {"b": 3, "c": 4}

    result = deep_merge(base, override)

    assert result == {"a": 1, "b": 3, "c": 4}
    # Ensure original dicts are not mutated
    assert base == {"a": 1, "b": 2}
    assert override == {"b": 3, "c": 4}


def test_deep_merge_replaces_pair_lists():
    base = {"db": [("host", "a")], "cache": {"ttl": 1}}
    override = {"db": [("port", 1)], "cache": {"size": 2}}

    assert deep_merge(base, override) == {
        "db": [("port", 1)],
        "cache": {"ttl": 1, "size": 2},
    }


def test_normalize_key():
    assert normalize_key("a") == ("a",)
    assert normalize_key(["a", "b"]) == ("a", "b")
    assert normalize_key(("a",)) == ("a",)

    with pytest.raises(ValueError):
        normalize_key(())


def test_key_value_collection_shapes():
    assert is_pair_sequence([("a", 1), ["b", 2]])
    assert is_pair_sequence([])
    assert not is_pair_sequence("ab")
    assert not is_pair_sequence([(1, "a")])
    assert not is_pair_sequence([("a", 1, 2)])

    assert is_key_value_collection({"a": 1})
    assert not is_key_value_collection({1: "a"})
    assert not is_key_value_collection(42)
