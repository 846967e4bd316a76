"""Value classification helpers used by rendering and equality."""

from __future__ import annotations

from collections.abc import Mapping, Set
from datetime import date, time, timedelta
from decimal import Decimal
from fractions import Fraction
import functools
import math
import re
import types
from typing import Any, Callable
import weakref

from checkpack.core.types import MISSING, MissingType

PRIMITIVE_TYPES: tuple[type, ...] = (
    type(None),
    MissingType,
    bool,
    int,
    float,
    complex,
    str,
    bytes,
    Decimal,
    Fraction,
)

BOXABLE_TYPES: tuple[type, ...] = (int, float, complex, str, bytes)

_UNBOXERS: dict[type, Callable[[Any], Any]] = {
    int: int.__int__,
    float: float.__float__,
    complex: complex.__complex__,
    str: str.__str__,
    bytes: bytes.__bytes__,
}

WEAK_COLLECTION_TYPES: tuple[type, ...] = (
    weakref.WeakSet,
    weakref.WeakKeyDictionary,
    weakref.WeakValueDictionary,
)

BINARY_TYPES: tuple[type, ...] = (bytes, bytearray, memoryview)

DATE_TYPES: tuple[type, ...] = (date, time, timedelta)

FUNCTION_TYPES: tuple[type, ...] = (
    types.FunctionType,
    types.BuiltinFunctionType,
    types.MethodType,
    functools.partial,
)


def is_primitive(value: Any) -> bool:
    """Return True for immutable scalar values compared by value, not identity."""
    return type(value) in PRIMITIVE_TYPES


def is_boxed(value: Any) -> bool:
    """Return True for instances of subclasses of the scalar builtins.

    ``IntEnum`` members and ``class Tag(str)`` instances wrap a primitive
    payload the same way boxed primitives do.
    """
    return not is_primitive(value) and isinstance(value, BOXABLE_TYPES)


def unbox(value: Any) -> Any:
    for base in BOXABLE_TYPES:
        if isinstance(value, base):
            return _UNBOXERS[base](value)
    return value


def is_weak_collection(value: Any) -> bool:
    return isinstance(value, WEAK_COLLECTION_TYPES)


def is_binary(value: Any) -> bool:
    return isinstance(value, BINARY_TYPES)


def is_date_like(value: Any) -> bool:
    return isinstance(value, DATE_TYPES)


def is_pattern(value: Any) -> bool:
    return isinstance(value, re.Pattern)


def is_function(value: Any) -> bool:
    return isinstance(value, FUNCTION_TYPES)


def is_function_like(value: Any) -> bool:
    """Return True for values handled as functions, classes included."""
    return is_function(value) or isinstance(value, type)


def is_array_like(value: Any) -> bool:
    """Return True for sized, iterable, ordered containers.

    Strings, binary buffers, sets, mappings and weak collections are sized
    and iterable too but belong to their own categories.
    """
    if is_primitive(value) or isinstance(value, (str, bytearray, memoryview)):
        return False
    if isinstance(value, (Set, Mapping)) or is_weak_collection(value):
        return False
    if isinstance(value, type):
        return False
    value_type = type(value)
    if not hasattr(value_type, "__len__") or not hasattr(value_type, "__iter__"):
        return False
    try:
        length = len(value)
    except Exception:
        return False
    return isinstance(length, int) and length >= 0


def is_missing_value(value: Any, *, allow_null: bool = False) -> bool:
    """Return True when ``value`` counts as absent.

    ``MISSING`` is always absent; ``None`` is absent unless ``allow_null``.
    """
    return value is MISSING or (not allow_null and value is None)


def same_value_key(value: Any) -> tuple[Any, ...]:
    """Return a hashable key under which same-valued primitives collide.

    Floats keep their sign so ``0.0`` and ``-0.0`` differ, and every NaN
    maps to one key so NaN matches itself.
    """
    kind = type(value)
    if kind is float:
        return (kind, _float_key(value))
    if kind is complex:
        return (kind, _float_key(value.real), _float_key(value.imag))
    if kind is Decimal and value.is_nan():
        return (kind, "nan")
    return (kind, value)


def is_same_value(a: Any, b: Any) -> bool:
    if a is b:
        return True
    if not is_primitive(a) or not is_primitive(b):
        return False
    return same_value_key(a) == same_value_key(b)


def _float_key(value: float) -> Any:
    if math.isnan(value):
        return "nan"
    return (value, math.copysign(1.0, value))
