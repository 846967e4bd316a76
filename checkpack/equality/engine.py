"""Shallow and deep structural equality."""

from __future__ import annotations

from collections import Counter
from collections.abc import Mapping, Set
from typing import Any, Callable, Sequence

from checkpack.core.access import own_keys, safe_access
from checkpack.core.kinds import (
    is_array_like,
    is_binary,
    is_boxed,
    is_date_like,
    is_function_like,
    is_pattern,
    is_primitive,
    is_same_value,
    is_weak_collection,
    same_value_key,
    unbox,
)

Comparer = Callable[[Any, Any], "bool | None"]


def is_equal(a: Any, b: Any, *, deep: bool = False) -> bool:
    """Return True when ``a`` and ``b`` are equivalent.

    Without ``deep`` only identity and same-valued primitives are equal.
    With ``deep`` containers and objects of the same type are compared
    structurally; set members and mapping keys are matched regardless of
    order.
    """
    if is_same_value(a, b):
        return True
    if not deep or is_primitive(a) or is_primitive(b):
        return False
    if is_function_like(a) or is_function_like(b):
        return False
    if is_weak_collection(a) or is_weak_collection(b):
        return False
    if type(a) is not type(b):
        return False

    for comparer in _COMPARERS:
        result = comparer(a, b)
        if result is not None:
            return result

    return _compare_attributes(a, b)


def _membership(a: Any, b: Any, predicate: Callable[[Any], bool]) -> bool | None:
    """True when both match, False on a mismatch, None when neither does."""
    in_a = predicate(a)
    in_b = predicate(b)
    if in_a != in_b:
        return False
    return True if in_a else None


def _compare_boxed(a: Any, b: Any) -> bool | None:
    both = _membership(a, b, is_boxed)
    if not both:
        return both
    return is_same_value(unbox(a), unbox(b))


def _compare_patterns(a: Any, b: Any) -> bool | None:
    both = _membership(a, b, is_pattern)
    if not both:
        return both
    return a.pattern == b.pattern and a.flags == b.flags


def _compare_dates(a: Any, b: Any) -> bool | None:
    both = _membership(a, b, is_date_like)
    if not both:
        return both
    return a == b


def _compare_binary(a: Any, b: Any) -> bool | None:
    both = _membership(a, b, is_binary)
    if not both:
        return both
    if memoryview(a).nbytes != memoryview(b).nbytes:
        return False
    return bytes(a) == bytes(b)


def _compare_arrays(a: Any, b: Any) -> bool | None:
    both = _membership(a, b, is_array_like)
    if not both:
        return both
    if len(a) != len(b):
        return False
    return all(is_equal(left, right, deep=True) for left, right in zip(a, b))


def _compare_sets(a: Any, b: Any) -> bool | None:
    both = _membership(a, b, lambda value: isinstance(value, Set))
    if not both:
        return both
    if len(a) != len(b):
        return False

    primitive_counts_b = Counter(same_value_key(item) for item in b if is_primitive(item))
    objects_a: list[Any] = []
    for item in a:
        if not is_primitive(item):
            objects_a.append(item)
            continue
        lookup = same_value_key(item)
        if not primitive_counts_b[lookup]:
            return False
        primitive_counts_b[lookup] -= 1
    if not objects_a:
        return True

    objects_b = [item for item in b if not is_primitive(item)]
    return _match_greedily(
        objects_a,
        objects_b,
        lambda left, right: is_equal(left, right, deep=True),
    )


def _compare_mappings(a: Any, b: Any) -> bool | None:
    both = _membership(a, b, lambda value: isinstance(value, Mapping))
    if not both:
        return both
    if len(a) != len(b):
        return False

    # NaN keys share one lookup, so each lookup holds every value stored under it.
    primitive_items_b: dict[Any, list[Any]] = {}
    for key, value in b.items():
        if is_primitive(key):
            primitive_items_b.setdefault(same_value_key(key), []).append(value)
    object_items_a: list[tuple[Any, Any]] = []
    for key, value in a.items():
        if not is_primitive(key):
            object_items_a.append((key, value))
            continue
        candidates = primitive_items_b.get(same_value_key(key), [])
        if not _take_match(candidates, lambda other: is_equal(value, other, deep=True)):
            return False
    if not object_items_a:
        return True

    object_items_b = [(key, value) for key, value in b.items() if not is_primitive(key)]
    return _match_greedily(
        object_items_a,
        object_items_b,
        lambda left, right: (
            is_equal(left[0], right[0], deep=True) and is_equal(left[1], right[1], deep=True)
        ),
    )


def _compare_attributes(a: Any, b: Any) -> bool:
    keys = own_keys(a)
    if len(keys) != len(own_keys(b)):
        return False

    both_errors = _membership(a, b, lambda value: isinstance(value, BaseException))
    if both_errors is False:
        return False
    if both_errors:
        if type(a).__name__ != type(b).__name__ or str(a) != str(b):
            return False
        keys = [key for key in keys if key != "__traceback__"]
    elif not keys and type(a).__eq__ is not object.__eq__:
        # No own state to walk; builtins such as slice keep theirs internally.
        return bool(a == b)

    return all(
        is_equal(safe_access(a, key), safe_access(b, key), deep=True) for key in keys
    )


def _match_greedily(
    left: Sequence[Any],
    right: Sequence[Any],
    matches: Callable[[Any, Any], bool],
) -> bool:
    candidates = list(right)
    return all(
        _take_match(candidates, lambda candidate: matches(item, candidate)) for item in left
    )


def _take_match(candidates: list[Any], matches: Callable[[Any], bool]) -> bool:
    """Remove the first candidate that ``matches`` accepts; False if none does."""
    for index, candidate in enumerate(candidates):
        if matches(candidate):
            candidates[index] = candidates[-1]
            candidates.pop()
            return True
    return False


_COMPARERS: tuple[Comparer, ...] = (
    _compare_boxed,
    _compare_patterns,
    _compare_dates,
    _compare_binary,
    _compare_arrays,
    _compare_sets,
    _compare_mappings,
)
