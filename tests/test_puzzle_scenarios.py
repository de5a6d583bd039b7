from math import prod
from typing import Tuple

from aoc_grid.src.core import Grid2D
from aoc_grid.src.segment import ALL_OFFSETS, adjacent_points, flood_fill


HEIGHTMAP = """\
2199943210
3987894921
9856789892
8767896789
9899965678"""

OCTOPUSES = """\
5483143223
2745854711
5264556173
6141336146
6357385478
4167524645
2176841721
6882881134
4846848554
5283751526"""


def _digits(text: str) -> Grid2D[int]:
    return Grid2D([int(ch) for ch in line] for line in text.splitlines())


def _low_points(grid: Grid2D[int]):
    return [p for p in grid if all(n.value > p.value for n in adjacent_points(grid, p))]


def _flash_step(grid: Grid2D[int]) -> Tuple[Grid2D[int], int]:
    grid = grid.map(lambda p: p.value + 1)
    flashed = set()
    pending = [p.coords for p in grid if p.value > 9]
    while pending:
        coords = pending.pop()
        if coords in flashed:
            continue
        flashed.add(coords)
        for n in adjacent_points(grid, coords, ALL_OFFSETS):
            grid.set(n.row, n.col, n.value + 1)
            if n.value + 1 > 9 and n.coords not in flashed:
                pending.append(n.coords)
    return grid.map(lambda p: 0 if p.value > 9 else p.value), len(flashed)


def test_low_point_risk_levels():
    grid = _digits(HEIGHTMAP)
    assert grid.shape() == (5, 10)
    assert sum(p.value + 1 for p in _low_points(grid)) == 15


def test_three_largest_basins():
    grid = _digits(HEIGHTMAP)
    sizes = sorted(len(flood_fill(grid, p, lambda q: q.value < 9)) for p in _low_points(grid))
    assert prod(sizes[-3:]) == 1134


def test_flash_simulation_counts():
    start = _digits(OCTOPUSES)
    grid = start
    total = 0
    for step in range(100):
        grid, flashes = _flash_step(grid)
        total += flashes
        if step == 9:
            assert total == 204
    assert total == 1656
    assert start == _digits(OCTOPUSES)


def test_first_synchronised_flash():
    grid = _digits(OCTOPUSES)
    step = 0
    flashes = 0
    while flashes != len(grid):
        grid, flashes = _flash_step(grid)
        step += 1
    assert step == 195
    assert all(p.value == 0 for p in grid)
