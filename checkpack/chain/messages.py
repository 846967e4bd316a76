"""Failure message assembly for validation chains."""

from __future__ import annotations

from typing import Any, Sequence

from checkpack.diff import DIFF_LEGEND, generate_diff
from checkpack.render import inspect_value

MATCH_MARKER = "> "
NO_MATCH_MARKER = "  "


def failure_prefix(name: str | None) -> str:
    if name:
        return f"Validation failed for '{name}':"
    return "Validation failed:"


def format_failure(message: str, name: str | None) -> str:
    return f"{failure_prefix(name)} {message}"


def required_message(value: Any) -> str:
    return f"value is required but was {inspect_value(value)}"


def missing_message(value: Any) -> str:
    return f"value must be missing but was {inspect_value(value)}"


def equal_message(actual: Any, expected: Any) -> str:
    diff = generate_diff(inspect_value(expected), inspect_value(actual))
    return f"value must be equal to the expected value\n{DIFF_LEGEND}\n\n{diff}"


def not_equal_message(forbidden: Any) -> str:
    return f"value must not be equal to {inspect_value(forbidden)}"


def in_message(actual: Any, candidates: Sequence[Any]) -> str:
    if not candidates:
        return "value must be one of the expected values, but no candidates were given"
    rendered_actual = inspect_value(actual)
    sections = [
        f"candidate [{index}]:\n{generate_diff(inspect_value(candidate), rendered_actual)}"
        for index, candidate in enumerate(candidates)
    ]
    body = "\n\n".join(sections)
    return f"value must be one of the expected values\n{DIFF_LEGEND}\n\n{body}"


def not_in_message(candidates: Sequence[Any], matched_index: int) -> str:
    lines: list[str] = []
    for index, candidate in enumerate(candidates):
        marker = MATCH_MARKER if index == matched_index else NO_MATCH_MARKER
        for line in inspect_value(candidate).split("\n"):
            lines.append(f"{marker}{line}")
    listing = "\n".join(lines)
    return f"value must not be one of the forbidden values (matched [{matched_index}])\n{listing}"
