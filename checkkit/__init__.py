"""Stable public API surface for checkkit.

This module is the supported import path for library users.
"""

from __future__ import annotations

from typing import Any

from checkpack.chain import (
    ErrorFactory,
    ErrorOverride,
    ValidationError,
    Validator,
    ValidatorOptions,
    ValidatorUsageError,
)
from checkpack.core import MISSING
from checkpack.diff import generate_diff
from checkpack.equality import is_equal
from checkpack.render import inspect_value

__version__ = "0.1.0"


def validate(
    value: Any,
    *,
    name: str | None = None,
    error: ErrorOverride | None = None,
) -> Validator:
    """Create a validation chain for ``value``.

    ``name`` labels the value in failure messages. ``error`` replaces the
    error of any failing step that has no error of its own: a message for
    ``ValidationError``, an exception instance, or a callable receiving the
    current value and returning either.
    """
    return Validator(value, ValidatorOptions(name=name, error=error))


__all__ = [
    "__version__",
    "MISSING",
    "ErrorFactory",
    "ErrorOverride",
    "ValidationError",
    "ValidatorUsageError",
    "ValidatorOptions",
    "Validator",
    "validate",
    "is_equal",
    "inspect_value",
    "generate_diff",
]
