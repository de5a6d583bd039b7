"""Coordinate-plus-value snapshots produced by grid lookup and iteration."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, Tuple, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Grid2DPoint(Generic[T]):
    """Snapshot of a single grid cell.

    ``value`` is copied out of the grid when the point is produced and is not
    updated afterwards. Equality and hashing only consider ``(row, col)`` so
    points can be used directly as visited-set members; compare ``value``
    explicitly where it matters.
    """

    row: int
    col: int
    value: T = field(compare=False)

    @property
    def y(self) -> int:
        return self.row

    @property
    def x(self) -> int:
        return self.col

    @property
    def coords(self) -> Tuple[int, int]:
        """Return ``(row, col)``."""
        return (self.row, self.col)
