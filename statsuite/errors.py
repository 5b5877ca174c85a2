"""Exception types raised by statsuite."""

from __future__ import annotations

from typing import Sized


class LengthMismatchError(ValueError):
    """Raised when paired sequences do not have the same number of elements."""


def require_same_length(first: Sized, second: Sized, message: str) -> None:
    """Raise :class:`LengthMismatchError` unless both sequences match in length."""
    if len(first) != len(second):
        raise LengthMismatchError(f"{message} (got {len(first)} and {len(second)})")
