"""Diff subsystem for checkpack."""

from checkpack.diff.engine import diff_lines, generate_diff, split_lines
from checkpack.diff.formatting import DIFF_LEGEND, render_diff
from checkpack.diff.models import DIFF_PREFIXES, DiffKind, DiffLine

__all__ = [
    "DiffKind",
    "DiffLine",
    "DIFF_PREFIXES",
    "DIFF_LEGEND",
    "diff_lines",
    "generate_diff",
    "render_diff",
    "split_lines",
]
