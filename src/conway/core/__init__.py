"""Core cellular automata logic."""

from .grid import Cell, Grid, MalformedGridError, OutOfBoundsAccess
from .engine import count_live_neighbors, count_all_neighbors, next_generation
from .game import GameOfLife
from .persistence import GridFileError, grid_from_json, grid_to_json, load_grid, save_grid

__all__ = [
    "Cell",
    "Grid",
    "MalformedGridError",
    "OutOfBoundsAccess",
    "count_live_neighbors",
    "count_all_neighbors",
    "next_generation",
    "GameOfLife",
    "GridFileError",
    "grid_from_json",
    "grid_to_json",
    "load_grid",
    "save_grid",
]
