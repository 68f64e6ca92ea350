from __future__ import annotations

from collections import OrderedDict

import pytest

from sealed_result.equality import deep_equals, deep_hash


def test_scalars_use_plain_equality() -> None:
    assert deep_equals(1, 1)
    assert deep_equals(1, 1.0)
    assert not deep_equals("a", "b")
    assert deep_hash(1) == deep_hash(1.0)


def test_sequences_compare_in_order() -> None:
    assert deep_equals([1, [2, 3]], [1, [2, 3]])
    assert not deep_equals([1, 2], [2, 1])
    assert not deep_equals([1, 2], [1, 2, 3])


def test_list_and_tuple_with_equal_items_are_equal() -> None:
    assert deep_equals([1, (2, 3)], (1, [2, 3]))
    assert deep_hash([1, (2, 3)]) == deep_hash((1, [2, 3]))


def test_strings_are_not_treated_as_sequences() -> None:
    assert not deep_equals("ab", ["a", "b"])
    assert not deep_equals(b"ab", [97, 98])


def test_mappings_ignore_order() -> None:
    left: dict[str, object] = {"a": [1], "b": {"c": {1, 2}}}
    right: OrderedDict[str, object] = OrderedDict([("b", {"c": {2, 1}}), ("a", [1])])
    assert deep_equals(left, right)
    assert deep_hash(left) == deep_hash(right)


def test_mappings_with_different_keys_or_values_differ() -> None:
    assert not deep_equals({"a": 1}, {"b": 1})
    assert not deep_equals({"a": [1]}, {"a": [2]})
    assert not deep_equals({"a": 1}, {"a": 1, "b": 2})


def test_sets_ignore_order_and_compare_members() -> None:
    assert deep_equals({1, 2, 3}, frozenset({3, 2, 1}))
    assert deep_equals({(1, 2), (3,)}, {(3,), (1, 2)})
    assert not deep_equals({1, 2}, {1, 3})
    assert deep_hash({1, 2, 3}) == deep_hash(frozenset({3, 1, 2}))


def test_mapping_is_not_equal_to_a_sequence() -> None:
    assert not deep_equals({0: "a"}, ["a"])


def test_unhashable_leaf_still_raises() -> None:
    class Opaque:
        __hash__ = None  # type: ignore[assignment]

    with pytest.raises(TypeError):
        deep_hash([Opaque()])
