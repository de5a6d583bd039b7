"""Core grid data structures."""

from .errors import ShapeMismatch
from .grid import Grid2D
from .point import Grid2DPoint

__all__ = ["Grid2D", "Grid2DPoint", "ShapeMismatch"]
