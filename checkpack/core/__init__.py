"""Core primitives shared by checkpack subsystems."""

from checkpack.core.access import own_keys, safe_access
from checkpack.core.kinds import (
    is_array_like,
    is_binary,
    is_boxed,
    is_date_like,
    is_function,
    is_function_like,
    is_missing_value,
    is_pattern,
    is_primitive,
    is_same_value,
    is_weak_collection,
    same_value_key,
    unbox,
)
from checkpack.core.types import MISSING, MissingType

__all__ = [
    "MISSING",
    "MissingType",
    "own_keys",
    "safe_access",
    "is_array_like",
    "is_binary",
    "is_boxed",
    "is_date_like",
    "is_function",
    "is_function_like",
    "is_missing_value",
    "is_pattern",
    "is_primitive",
    "is_same_value",
    "is_weak_collection",
    "same_value_key",
    "unbox",
]
