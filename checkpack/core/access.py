"""Fault-tolerant access to an object's own attributes."""

from __future__ import annotations

import functools
from typing import Any

from checkpack.core.types import MISSING

_SKIPPED_SLOTS = frozenset({"__dict__", "__weakref__"})


def own_keys(obj: Any) -> list[str]:
    """Return the names of attributes stored on ``obj`` itself.

    Instance ``__dict__`` entries come first in insertion order, followed by
    ``__slots__`` declared anywhere along the MRO.
    """
    keys: list[str] = []
    attrs = _instance_dict(obj)
    if attrs is not None:
        keys.extend(key for key in attrs if isinstance(key, str))
    for name in _slot_names(type(obj)):
        if name not in keys:
            keys.append(name)
    return keys


def safe_access(obj: Any, key: str, fallback: Any = MISSING) -> Any:
    """Read an own attribute without letting the read fail outward.

    Returns ``fallback`` when ``key`` is not an own attribute of ``obj`` or
    when reading it raises (an unset slot, a failing descriptor).
    """
    attrs = _instance_dict(obj)
    if attrs is not None and key in attrs:
        return attrs[key]
    if key not in _slot_names(type(obj)):
        return fallback
    try:
        return getattr(obj, key)
    except Exception:
        return fallback


def _instance_dict(obj: Any) -> dict[Any, Any] | None:
    try:
        attrs = object.__getattribute__(obj, "__dict__")
    except Exception:
        return None
    return attrs if isinstance(attrs, dict) else None


@functools.lru_cache(maxsize=512)
def _slot_names(cls: type) -> tuple[str, ...]:
    names: list[str] = []
    for klass in cls.__mro__:
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for slot in slots:
            if slot in _SKIPPED_SLOTS:
                continue
            name = _mangle(klass, slot)
            if name not in names:
                names.append(name)
    return tuple(names)


def _mangle(klass: type, name: str) -> str:
    if name.startswith("__") and not name.endswith("__"):
        return f"_{klass.__name__.lstrip('_')}{name}"
    return name
