"""Dense two dimensional grid used by the daily puzzle solvers."""

from __future__ import annotations

import copy as _copy
from typing import (
    Any,
    Callable,
    Generic,
    Iterable,
    Iterator,
    List,
    Optional,
    Sequence,
    Tuple,
    TypeVar,
)

import numpy as np

from .errors import ShapeMismatch
from .point import Grid2DPoint
from ..utils import config_loader
from ..utils.logger import get_logger

T = TypeVar("T")
U = TypeVar("U")

logger = get_logger(__name__)


class Grid2D(Generic[T]):
    """Fixed-size grid of values addressed by ``(row, col)``.

    Values live in a single row-major list of length ``width * height``.
    The shape never changes after construction, but cell values may be
    reassigned through :meth:`set`. Out-of-bounds lookups return ``None``
    instead of raising so that neighbour scans can probe past the edges.
    """

    def __init__(self, rows: Iterable[Sequence[T]] = ()) -> None:
        cells: List[T] = []
        width = 0
        height = 0
        for i, row in enumerate(rows):
            row = list(row)
            if i == 0:
                width = len(row)
            elif len(row) != width:
                logger.debug("rejecting ragged row %d (%d != %d)", i, len(row), width)
                raise ShapeMismatch(i, len(row), width)
            cells.extend(row)
            height += 1

        self._cells = cells
        self._width = width
        self._height = height

    @classmethod
    def _from_flat(cls, width: int, height: int, cells: List[T]) -> "Grid2D[T]":
        grid = cls.__new__(cls)
        grid._cells = cells
        grid._width = width
        grid._height = height
        return grid

    @classmethod
    def from_points(
        cls, points: Iterable[Grid2DPoint[T]], height: Optional[int] = None
    ) -> "Grid2D[T]":
        """Build a grid from a stream of points.

        A new row starts whenever the row index of the incoming point changes,
        so the stream produced by iterating a grid (optionally transformed)
        rebuilds a grid of the same shape. A zero-width grid yields no points;
        pass ``height`` to pad the result with empty rows up to that height.
        Padding a non-empty stream that is short on rows raises
        :class:`ShapeMismatch` like any other ragged input.
        """
        rows: List[List[T]] = []
        current_row: Optional[int] = None
        for point in points:
            if point.row != current_row:
                rows.append([])
                current_row = point.row
            rows[-1].append(point.value)
        if height is not None:
            rows.extend([] for _ in range(height - len(rows)))
        return cls(rows)

    @classmethod
    def from_array(cls, arr: Any) -> "Grid2D[Any]":
        """Build a grid from a two dimensional array-like."""
        data = np.asarray(arr)
        if data.ndim != 2:
            raise ValueError(f"Expected a 2D array, got {data.ndim} dimension(s)")
        height, width = data.shape
        return cls._from_flat(width, height, data.reshape(-1).tolist())

    # ------------------------------------------------------------------
    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def shape(self) -> Tuple[int, int]:
        """Return the grid shape as (height, width)."""
        return self._height, self._width

    def __len__(self) -> int:
        return len(self._cells)

    # Coordinate mapping ----------------------------------------------------

    def index_of(self, row: int, col: int) -> Optional[int]:
        """Return the flat offset of ``(row, col)`` or ``None`` if out of bounds."""
        if 0 <= row < self._height and 0 <= col < self._width:
            return row * self._width + col
        return None

    def coords_of(self, index: int) -> Tuple[int, int]:
        """Return ``(row, col)`` for a flat offset within ``[0, len(grid))``."""
        return index // self._width, index % self._width

    # Cell access -----------------------------------------------------------

    def get(self, row: int, col: int, default: Optional[T] = None) -> Optional[T]:
        """Return the value at ``row``, ``col`` or ``default`` if out of bounds."""
        index = self.index_of(row, col)
        if index is None:
            return default
        return self._cells[index]

    def set(self, row: int, col: int, value: T) -> bool:
        """Assign ``value`` to a cell; return ``False`` if it is out of bounds."""
        index = self.index_of(row, col)
        if index is None:
            return False
        self._cells[index] = value
        return True

    def point_at(self, row: int, col: int) -> Optional[Grid2DPoint[T]]:
        """Return a snapshot point for ``(row, col)`` or ``None`` if out of bounds."""
        index = self.index_of(row, col)
        if index is None:
            return None
        return Grid2DPoint(row, col, _copy.deepcopy(self._cells[index]))

    def __iter__(self) -> Iterator[Grid2DPoint[T]]:
        # Values are read as each point is produced, not when iteration starts.
        for index in range(len(self._cells)):
            row, col = self.coords_of(index)
            yield Grid2DPoint(row, col, _copy.deepcopy(self._cells[index]))

    # Derived grids ---------------------------------------------------------

    def copy(self) -> "Grid2D[T]":
        """Return an independent grid with the same shape and values."""
        return self._from_flat(self._width, self._height, _copy.deepcopy(self._cells))

    __copy__ = copy

    def map(self, func: Callable[[Grid2DPoint[T]], U]) -> "Grid2D[U]":
        """Return a new grid holding ``func(point)`` for every point."""
        cells = [func(point) for point in self]
        return Grid2D._from_flat(self._width, self._height, cells)

    def rows(self) -> List[List[T]]:
        """Return a nested list copy of the grid rows."""
        w = self._width
        return [_copy.deepcopy(self._cells[r * w : (r + 1) * w]) for r in range(self._height)]

    def to_array(self, dtype: Any = None) -> np.ndarray:
        """Return the grid as a ``(height, width)`` numpy array."""
        return np.array(self._cells, dtype=dtype).reshape(self._height, self._width)

    def render(
        self,
        separator: Optional[str] = None,
        formatter: Callable[[T], str] = str,
    ) -> str:
        """Return the grid as text, one line per row."""
        if separator is None:
            separator = config_loader.RENDER_SEPARATOR
        return "\n".join(separator.join(formatter(v) for v in row) for row in self.rows())

    # ------------------------------------------------------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid2D):
            return NotImplemented
        return self.shape() == other.shape() and self._cells == other._cells

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Grid2D(shape={self.shape()})"
