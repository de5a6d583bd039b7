"""Neighbour and region utilities for grids."""

from .neighbors import (
    ALL_OFFSETS,
    DIAGONAL_OFFSETS,
    ORTHOGONAL_OFFSETS,
    adjacent_points,
    connected_regions,
    flood_fill,
)

__all__ = [
    "ORTHOGONAL_OFFSETS",
    "DIAGONAL_OFFSETS",
    "ALL_OFFSETS",
    "adjacent_points",
    "flood_fill",
    "connected_regions",
]
