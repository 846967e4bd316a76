"""Type definitions shared across checkpack."""

from __future__ import annotations

from typing import Final


class _MissingType:
    """Marker for an absent value, as opposed to an explicit ``None``."""

    __slots__ = ()

    _instance: _MissingType | None = None

    def __new__(cls) -> _MissingType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "<MISSING>"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> _MissingType:
        return self

    def __deepcopy__(self, memo: dict[int, object]) -> _MissingType:
        return self

    def __reduce__(self) -> str:
        return "MISSING"


MISSING: Final = _MissingType()

MissingType = _MissingType
