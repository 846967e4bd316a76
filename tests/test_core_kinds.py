import copy
from collections import deque
import pickle
import weakref

import pytest

from checkpack.core import (
    MISSING,
    is_array_like,
    is_boxed,
    is_function_like,
    is_missing_value,
    is_primitive,
    is_same_value,
    own_keys,
    safe_access,
    unbox,
)


class Tag(str):
    pass


class Sized:
    def __len__(self) -> int:
        return 2


class SizedIterable(Sized):
    def __iter__(self):
        return iter([1, 2])


class Base:
    __slots__ = ("base",)


class Child(Base):
    __slots__ = ("__secret", "child")

    def __init__(self) -> None:
        self.child = 1


class Flagged:
    __slots__ = ("ok",)

    def __init__(self) -> None:
        self.ok = True


def test_missing_is_a_falsy_singleton() -> None:
    assert bool(MISSING) is False
    assert repr(MISSING) == "<MISSING>"
    assert copy.copy(MISSING) is MISSING
    assert copy.deepcopy(MISSING) is MISSING
    assert pickle.loads(pickle.dumps(MISSING)) is MISSING
    assert type(MISSING)() is MISSING


@pytest.mark.parametrize(
    ("value", "allow_null", "expected"),
    [
        (MISSING, False, True),
        (MISSING, True, True),
        (None, False, True),
        (None, True, False),
        (0, False, False),
        ("", False, False),
    ],
)
def test_missing_values(value: object, allow_null: bool, expected: bool) -> None:
    assert is_missing_value(value, allow_null=allow_null) is expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ([1, 2], True),
        ((), True),
        (deque(), True),
        (range(2), True),
        (SizedIterable(), True),
        (Sized(), False),
        ("abc", False),
        (b"abc", False),
        (bytearray(b"a"), False),
        ({1}, False),
        ({"a": 1}, False),
        (weakref.WeakSet(), False),
        (list, False),
        (42, False),
        (None, False),
    ],
)
def test_array_like_detection(value: object, expected: bool) -> None:
    assert is_array_like(value) is expected


def test_boxed_values_unwrap_to_their_primitive() -> None:
    assert is_primitive("a") is True
    assert is_boxed("a") is False
    assert is_boxed(Tag("a")) is True

    unboxed = unbox(Tag("a"))
    assert type(unboxed) is str
    assert unboxed == "a"
    assert unbox([1]) == [1]


def test_same_value_distinguishes_types_and_signed_zero() -> None:
    assert is_same_value(float("nan"), float("nan")) is True
    assert is_same_value(0.0, -0.0) is False
    assert is_same_value(1, True) is False
    assert is_same_value(complex(0.0, -0.0), complex(0.0, 0.0)) is False
    assert is_same_value([1], [1]) is False


def test_own_keys_include_dict_entries_and_inherited_slots() -> None:
    class Plain:
        def __init__(self) -> None:
            self.b = 1
            self.a = 2

    assert own_keys(Plain()) == ["b", "a"]
    assert own_keys(Child()) == ["_Child__secret", "child", "base"]


def test_safe_access_returns_fallback_instead_of_raising() -> None:
    child = Child()

    assert safe_access(child, "child") == 1
    assert safe_access(child, "base") is MISSING
    assert safe_access(child, "base", "fallback") == "fallback"
    assert safe_access(child, "unknown") is MISSING
    assert safe_access(Flagged(), "ok") is True


def test_safe_access_ignores_class_attributes() -> None:
    class WithProperty:
        @property
        def computed(self) -> int:
            raise RuntimeError("never read")

    assert safe_access(WithProperty(), "computed") is MISSING
    assert own_keys(WithProperty()) == []


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (len, True),
        (lambda: None, True),
        (Tag, True),
        (int, True),
        (Tag("a").upper, True),
        (Tag("a"), False),
        (Sized(), False),
    ],
)
def test_function_like_covers_callables_and_classes(value: object, expected: bool) -> None:
    assert is_function_like(value) is expected
