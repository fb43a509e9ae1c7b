"""Bounded Conway's Game of Life with JSON persistence and a text menu."""

__version__ = "0.1.0"

from .core.grid import Cell, Grid, MalformedGridError, OutOfBoundsAccess
from .core.game import GameOfLife
from .core.persistence import GridFileError, load_grid, save_grid

__all__ = [
    "Cell",
    "Grid",
    "MalformedGridError",
    "OutOfBoundsAccess",
    "GameOfLife",
    "GridFileError",
    "load_grid",
    "save_grid",
]
