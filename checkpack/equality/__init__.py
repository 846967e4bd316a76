"""Equality subsystem for checkpack."""

from checkpack.equality.engine import is_equal

__all__ = ["is_equal"]
