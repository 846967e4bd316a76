"""LCS-based line diff engine."""

from __future__ import annotations

from checkpack.diff.formatting import render_diff
from checkpack.diff.models import DiffLine


def split_lines(text: str) -> list[str]:
    """Split ``text`` on newlines; an empty string has no lines."""
    if not text:
        return []
    return text.split("\n")


def diff_lines(old_text: str, new_text: str) -> list[DiffLine]:
    """Diff two texts line by line in O(m * n) time and space.

    On a mismatch with equal LCS lengths either way, backtracking consumes
    the old line first, so the added line is listed before the removed one.
    """
    old = split_lines(old_text)
    new = split_lines(new_text)
    rows = len(old)
    cols = len(new)

    table = [[0] * (cols + 1) for _ in range(rows + 1)]
    for i in range(1, rows + 1):
        for j in range(1, cols + 1):
            if old[i - 1] == new[j - 1]:
                table[i][j] = table[i - 1][j - 1] + 1
            else:
                table[i][j] = max(table[i - 1][j], table[i][j - 1])

    # Backtracking yields operations last-to-first.
    operations: list[DiffLine] = []
    i, j = rows, cols
    while i > 0 and j > 0:
        if old[i - 1] == new[j - 1]:
            operations.append(DiffLine(kind="equal", value=old[i - 1]))
            i -= 1
            j -= 1
        elif table[i - 1][j] >= table[i][j - 1]:
            operations.append(DiffLine(kind="delete", value=old[i - 1]))
            i -= 1
        else:
            operations.append(DiffLine(kind="insert", value=new[j - 1]))
            j -= 1

    while i > 0:
        operations.append(DiffLine(kind="delete", value=old[i - 1]))
        i -= 1

    while j > 0:
        operations.append(DiffLine(kind="insert", value=new[j - 1]))
        j -= 1

    operations.reverse()
    return operations


def generate_diff(old_text: str, new_text: str) -> str:
    """Return a unified-style line diff of ``old_text`` against ``new_text``."""
    return render_diff(diff_lines(old_text, new_text))
