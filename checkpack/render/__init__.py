"""Value rendering for checkpack messages."""

from checkpack.render.inspector import GETTER_FAILED, MAX_SAFE_INTEGER, inspect_value

__all__ = [
    "GETTER_FAILED",
    "MAX_SAFE_INTEGER",
    "inspect_value",
]
