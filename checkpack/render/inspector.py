"""Deterministic, indentation-aware rendering of arbitrary values."""

from __future__ import annotations

from collections.abc import Mapping, Set
from datetime import datetime, timedelta
from decimal import Decimal
import enum
from fractions import Fraction
from typing import Any, Iterable, Literal

from checkpack.core.access import own_keys, safe_access
from checkpack.core.kinds import (
    is_array_like,
    is_binary,
    is_date_like,
    is_function_like,
    is_pattern,
    is_weak_collection,
    unbox,
)
from checkpack.core.types import MISSING

MAX_SAFE_INTEGER = 2**53 - 1

GETTER_FAILED = "[Getter (failed)]"

INDENT = "  "

_NUMBER_TYPES = (int, float, complex, Decimal, Fraction)

_EXCLUDED_ERROR_KEYS = frozenset({"message", "__traceback__"})

_GETTER_FAILED = object()

Brace = Literal["curly", "square"]


def inspect_value(value: Any, depth: int = 0) -> str:
    """Render ``value`` as text.

    ``depth`` only affects indentation of nested items (two spaces per
    level); the first line is never indented.
    """
    if value is None or value is MISSING:
        return repr(value)
    if isinstance(value, enum.Enum):
        return f"{type(value).__name__}.{value.name}"
    if isinstance(value, bool):
        return str(value)
    if isinstance(value, int) and abs(unbox(value)) > MAX_SAFE_INTEGER:
        return f"{unbox(value)}n"
    if isinstance(value, _NUMBER_TYPES):
        return _format_number(value)
    if is_pattern(value):
        return repr(value)
    if isinstance(value, str):
        return f'"{unbox(value)}"'
    if is_function_like(value):
        return _format_function(value)
    if is_date_like(value):
        return _format_date(value)
    if is_binary(value):
        return _format_binary(value, depth)
    if is_weak_collection(value):
        return f"[{type(value).__name__} (items unknown)]"
    if is_array_like(value):
        return _format_array(value, depth)
    if isinstance(value, Set):
        return _format_set(value, depth)
    if isinstance(value, Mapping):
        return _format_mapping(value, depth)
    if isinstance(value, BaseException):
        return _format_error(value, depth)
    return _format_object(value, depth)


def _format_number(value: Any) -> str:
    raw = unbox(value)
    if isinstance(raw, (float, complex)):
        return repr(raw)
    return str(raw)


def _format_function(fn: Any) -> str:
    name = getattr(fn, "__name__", "")
    if not isinstance(name, str) or not name or name == "<lambda>":
        return "[Function (anonymous)]"
    return f"[Function: {name}]"


def _format_date(value: Any) -> str:
    if isinstance(value, timedelta):
        return str(value)
    text = value.isoformat()
    if isinstance(value, datetime) and value.utcoffset() == timedelta(0):
        text = text.replace("+00:00", "Z")
    return text


def _format_binary(value: Any, depth: int) -> str:
    raw = bytes(value)
    head = f"[{type(value).__name__}({len(raw)})]"
    return f"{head} {_format_items(list(raw), depth)}"


def _format_array(value: Any, depth: int) -> str:
    items = list(value)
    head = f"[{type(value).__name__}({len(value)})]"
    return f"{head} {_format_items(items, depth)}"


def _format_items(items: list[Any], depth: int) -> str:
    rendered = [inspect_value(item, depth + 1) for item in items]
    return _enclose("square", rendered, depth)


def _format_set(value: Set[Any], depth: int) -> str:
    head = f"[{type(value).__name__}({len(value)})]"
    rendered = sorted(inspect_value(item, depth + 1) for item in value)
    return f"{head} {_enclose('curly', rendered, depth)}"


def _format_mapping(value: Mapping[Any, Any], depth: int) -> str:
    head = f"[{type(value).__name__}({len(value)})]"
    rendered = [
        f"{inspect_value(key, depth + 1)}: {inspect_value(item, depth + 1)}"
        for key, item in value.items()
    ]
    return f"{head} {_enclose('curly', rendered, depth)}"


def _format_error(error: BaseException, depth: int) -> str:
    message = str(error)
    head = f"[{type(error).__name__}: {message}]" if message else f"[{type(error).__name__}]"
    keys = [key for key in sorted(own_keys(error)) if key not in _EXCLUDED_ERROR_KEYS]
    items = _format_properties(error, keys, depth)
    return head if items == "{}" else f"{head} {items}"


def _format_object(value: Any, depth: int) -> str:
    head = f"[{type(value).__name__}]"
    return f"{head} {_format_properties(value, sorted(own_keys(value)), depth)}"


def _format_properties(obj: Any, keys: Iterable[str], depth: int) -> str:
    rendered: list[str] = []
    for key in keys:
        item = safe_access(obj, key, _GETTER_FAILED)
        if item is _GETTER_FAILED:
            rendered.append(f"{key}: {GETTER_FAILED}")
        else:
            rendered.append(f"{key}: {inspect_value(item, depth + 1)}")
    return _enclose("curly", rendered, depth)


def _enclose(brace: Brace, items: list[str], depth: int) -> str:
    open_char, close_char = ("{", "}") if brace == "curly" else ("[", "]")
    if not items:
        return f"{open_char}{close_char}"
    body = ",\n".join(_indent(item, depth + 1) for item in items)
    return f"{open_char}\n{body}\n{_indent(close_char, depth)}"


def _indent(item: str, depth: int) -> str:
    return f"{INDENT * depth}{item}"
