"""JSON persistence for grids.

A saved grid is a JSON array of rows, each row an array of "0" (live) and
"." (dead) strings.
"""

import json
import logging
from pathlib import Path
from typing import Union

from .grid import Grid

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class GridFileError(Exception):
    """Raised when a grid file cannot be read or does not hold a grid."""


def grid_to_json(grid: Grid) -> str:
    """Serialize a grid to its JSON text."""
    return json.dumps(grid.snapshot_for_persistence())


def grid_from_json(text: str) -> Grid:
    """Build a grid from JSON text.

    Args:
        text: JSON array of rows

    Returns:
        New Grid sized from the rows

    Raises:
        GridFileError: If the text is not JSON or not a non-empty list of rows
        MalformedGridError: If rows differ in length or hold unknown symbols
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise GridFileError(f"Invalid grid JSON: {e}") from e
    except RecursionError as e:
        raise GridFileError("Grid JSON is nested too deeply") from e

    if not isinstance(data, list) or not data:
        raise GridFileError("Grid JSON must be a non-empty array of rows")
    if not all(isinstance(row, list) for row in data):
        raise GridFileError("Every grid row must be a JSON array")

    return Grid.from_rows(data)


def save_grid(grid: Grid, path: PathLike) -> None:
    """Write a grid to a JSON file.

    Raises:
        GridFileError: If the file cannot be written
    """
    path = Path(path)
    try:
        path.write_text(grid_to_json(grid), encoding="utf-8")
    except OSError as e:
        raise GridFileError(f"Cannot write {path}: {e}") from e

    logger.info("Saved %dx%d grid to %s", grid.height, grid.width, path)


def load_grid(path: PathLike) -> Grid:
    """Read a grid from a JSON file.

    Raises:
        GridFileError: If the file is missing, unreadable or not a grid document
        MalformedGridError: If the rows are not a valid grid
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise GridFileError(f"Cannot read {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise GridFileError(f"{path} is not UTF-8 text: {e}") from e

    grid = grid_from_json(text)
    logger.info("Loaded %dx%d grid from %s", grid.height, grid.width, path)
    return grid
