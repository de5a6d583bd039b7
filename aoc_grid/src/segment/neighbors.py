"""Neighbour probing and region growing on top of :class:`Grid2D`."""

from __future__ import annotations

from collections import deque
from typing import Any, Callable, Dict, List, Optional, Sequence, Set, Tuple, Union

from ..core.grid import Grid2D
from ..core.point import Grid2DPoint
from ..utils.logger import get_logger

logger = get_logger(__name__)

Offset = Tuple[int, int]
Origin = Union[Grid2DPoint[Any], Tuple[int, int]]
PointPredicate = Callable[[Grid2DPoint[Any]], bool]

ORTHOGONAL_OFFSETS: Tuple[Offset, ...] = ((-1, 0), (0, -1), (0, 1), (1, 0))
DIAGONAL_OFFSETS: Tuple[Offset, ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ALL_OFFSETS: Tuple[Offset, ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)


def _coords(origin: Origin) -> Tuple[int, int]:
    if isinstance(origin, Grid2DPoint):
        return origin.coords
    row, col = origin
    return row, col


# ---------------------------------------------------------------------------
# Adjacency
# ---------------------------------------------------------------------------

def adjacent_points(
    grid: Grid2D[Any],
    origin: Origin,
    offsets: Sequence[Offset] = ORTHOGONAL_OFFSETS,
) -> List[Grid2DPoint[Any]]:
    """Return the in-bounds neighbours of ``origin`` in ``offsets`` order.

    Offsets that land off the grid are dropped; ``origin`` itself is only
    included when ``(0, 0)`` is one of the offsets.
    """

    row, col = _coords(origin)
    points: List[Grid2DPoint[Any]] = []
    for dr, dc in offsets:
        point = grid.point_at(row + dr, col + dc)
        if point is not None:
            points.append(point)
    return points


# ---------------------------------------------------------------------------
# Region growing
# ---------------------------------------------------------------------------

def flood_fill(
    grid: Grid2D[Any],
    start: Origin,
    predicate: PointPredicate,
    offsets: Sequence[Offset] = ORTHOGONAL_OFFSETS,
) -> List[Grid2DPoint[Any]]:
    """Return every point reachable from ``start`` through cells matching ``predicate``.

    A breadth-first search is used; points are returned in visit order and
    each coordinate appears at most once. An off-grid ``start`` or one that
    fails ``predicate`` yields an empty list.
    """

    row, col = _coords(start)
    first = grid.point_at(row, col)
    if first is None or not predicate(first):
        return []

    seen: Set[Tuple[int, int]] = {first.coords}
    queue: deque[Grid2DPoint[Any]] = deque([first])
    region: List[Grid2DPoint[Any]] = []

    while queue:
        current = queue.popleft()
        region.append(current)
        for neighbour in adjacent_points(grid, current, offsets):
            if neighbour.coords in seen or not predicate(neighbour):
                continue
            seen.add(neighbour.coords)
            queue.append(neighbour)

    return region


def connected_regions(
    grid: Grid2D[Any],
    offsets: Sequence[Offset] = ORTHOGONAL_OFFSETS,
    predicate: Optional[PointPredicate] = None,
) -> Dict[int, List[Grid2DPoint[Any]]]:
    """Label connected regions of equal value.

    Cells failing ``predicate`` (when given) are left unlabelled. Region ids
    increase in row-major order of each region's first cell.
    """

    labelled: Set[Tuple[int, int]] = set()
    regions: Dict[int, List[Grid2DPoint[Any]]] = {}
    region_id = 0

    for point in grid:
        if point.coords in labelled:
            continue
        if predicate is not None and not predicate(point):
            continue
        value = point.value
        cells = flood_fill(
            grid,
            point,
            lambda p: p.value == value and (predicate is None or predicate(p)),
            offsets,
        )
        labelled.update(p.coords for p in cells)
        regions[region_id] = cells
        region_id += 1

    logger.debug("labelled %d region(s) on %r", len(regions), grid)
    return regions


__all__ = [
    "ORTHOGONAL_OFFSETS",
    "DIAGONAL_OFFSETS",
    "ALL_OFFSETS",
    "adjacent_points",
    "flood_fill",
    "connected_regions",
]
