"""Deep structural equality and hashing over nested containers.

``Result`` compares its payload with these helpers so that a success
holding ``[1, {"a": {2, 3}}]`` equals another holding a fresh but equal
structure, and both hash identically even though lists, dicts and sets are
not hashable on their own.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence, Set
from typing import Any

_STRINGS: tuple[type, ...] = (str, bytes, bytearray, memoryview)

_SEQUENCE_TAG: str = "seq"
_MAPPING_TAG: str = "map"
_SET_TAG: str = "set"


def _is_sequence(obj: object) -> bool:
    return isinstance(obj, Sequence) and not isinstance(obj, _STRINGS)


def deep_equals(a: Any, b: Any) -> bool:
    if a is b:
        return True
    if isinstance(a, Mapping) and isinstance(b, Mapping):
        return _mappings_equal(a, b)
    if isinstance(a, Set) and isinstance(b, Set):
        return _sets_equal(a, b)
    if _is_sequence(a) and _is_sequence(b):
        return len(a) == len(b) and all(deep_equals(x, y) for x, y in zip(a, b))
    return bool(a == b)


def _mappings_equal(a: Mapping[Any, Any], b: Mapping[Any, Any]) -> bool:
    if len(a) != len(b):
        return False
    for key, value in a.items():
        if key not in b:
            return False
        if not deep_equals(value, b[key]):
            return False
    return True


def _sets_equal(a: Set[Any], b: Set[Any]) -> bool:
    if len(a) != len(b):
        return False
    # Bucket by deep hash, then pair elements off within each bucket.
    buckets: dict[int, list[Any]] = {}
    for item in b:
        buckets.setdefault(deep_hash(item), []).append(item)
    for item in a:
        candidates: list[Any] | None = buckets.get(deep_hash(item))
        if not candidates:
            return False
        for index, candidate in enumerate(candidates):
            if deep_equals(item, candidate):
                del candidates[index]
                break
        else:
            return False
    return True


def deep_hash(obj: Any) -> int:
    if isinstance(obj, Mapping):
        return hash(
            (_MAPPING_TAG, frozenset((deep_hash(k), deep_hash(v)) for k, v in obj.items()))
        )
    if isinstance(obj, Set):
        return hash((_SET_TAG, _unordered(deep_hash(item) for item in obj)))
    if _is_sequence(obj):
        return hash((_SEQUENCE_TAG, tuple(deep_hash(item) for item in obj)))
    return hash(obj)


def _unordered(hashes: Any) -> tuple[int, ...]:
    return tuple(sorted(hashes))
