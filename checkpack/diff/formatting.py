"""Text rendering for line diffs."""

from __future__ import annotations

from typing import Iterable

from checkpack.diff.models import DIFF_PREFIXES, DiffLine

DIFF_LEGEND = f"{DIFF_PREFIXES['delete']}expected\n{DIFF_PREFIXES['insert']}actual"


def render_diff(lines: Iterable[DiffLine]) -> str:
    return "\n".join(line.render() for line in lines)
