"""Error types raised by the grid core."""

from __future__ import annotations

__all__ = ["ShapeMismatch"]


class ShapeMismatch(ValueError):
    """Raised when grid rows do not all share the width of the first row."""

    def __init__(self, row_index: int, length: int, expected: int) -> None:
        self.row_index = row_index
        self.length = length
        self.expected = expected
        super().__init__(
            f"row {row_index} has length {length} which does not match "
            f"the expected length {expected}"
        )
