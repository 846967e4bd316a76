"""Data models for line-level diffs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

DiffKind = Literal["equal", "delete", "insert"]

DIFF_PREFIXES: dict[str, str] = {
    "equal": "  ",
    "delete": "- ",
    "insert": "+ ",
}


@dataclass(frozen=True, slots=True)
class DiffLine:
    """A single line kept, removed from the old text or added in the new text."""

    kind: DiffKind
    value: str

    @property
    def prefix(self) -> str:
        return DIFF_PREFIXES[self.kind]

    def render(self) -> str:
        return f"{self.prefix}{self.value}"

    def to_dict(self) -> dict[str, str]:
        return {
            "kind": self.kind,
            "value": self.value,
        }
