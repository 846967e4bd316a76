"""Data models for validation chains."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Union

from checkpack.chain.exceptions import ValidatorUsageError

ErrorResult = Union[str, BaseException]
ErrorFactory = Callable[[Any], Union[ErrorResult, Awaitable[ErrorResult]]]
ErrorOverride = Union[str, BaseException, ErrorFactory]


@dataclass(slots=True)
class Step:
    """A single deferred assertion or transform in a validation chain."""

    name: str
    action: Callable[[], Any]
    error: ErrorOverride | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "has_error_override": self.error is not None,
        }


@dataclass(frozen=True, slots=True)
class ValidatorOptions:
    """Construction options for a validation chain."""

    name: str | None = None
    error: ErrorOverride | None = None

    def __post_init__(self) -> None:
        if self.name is not None and not isinstance(self.name, str):
            raise ValidatorUsageError("name must be a string")
        if self.error is not None:
            ensure_error_override(self.error)


def ensure_error_override(error: Any) -> None:
    """Reject anything that is not a message, an exception or a factory."""
    if isinstance(error, (str, BaseException)) or callable(error):
        return
    raise ValidatorUsageError(
        "error must be a message string, an exception instance or a callable, "
        f"got {type(error).__name__}"
    )
