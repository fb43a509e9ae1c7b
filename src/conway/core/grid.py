"""Grid data structure for a bounded Game of Life board."""

from enum import Enum
from typing import Any, List, Sequence, Tuple
import numpy as np

from . import engine


class Cell(str, Enum):
    """State of a single grid position, valued by its display symbol."""

    LIVE = "0"
    DEAD = "."


class MalformedGridError(ValueError):
    """Raised when grid input is not a rectangle of valid cell symbols."""


class OutOfBoundsAccess(IndexError):
    """Raised when a cell coordinate lies outside the grid."""


_SYMBOL_VALUES = {Cell.LIVE.value: 1, Cell.DEAD.value: 0}


def _symbol_value(symbol: Any, row: int, col: int) -> int:
    """Map a cell symbol to its stored value, rejecting anything else."""
    if isinstance(symbol, str) and symbol in _SYMBOL_VALUES:
        return _SYMBOL_VALUES[symbol]
    raise MalformedGridError(f"Invalid cell symbol {symbol!r} at ({row}, {col})")


class Grid:
    """Represents a finite, non-wrapping 2D grid of live and dead cells.

    Cells are stored in a numpy array of shape (height, width) where 1 is
    live and 0 is dead. The grid owns its storage: input is copied on
    construction and every accessor hands out copies.
    """

    def __init__(self, height: int, width: int, cells: Sequence[Sequence[Any]]) -> None:
        """Initialize a grid from an explicit cell matrix.

        Args:
            height: Number of rows
            width: Number of columns
            cells: Rectangular matrix of Cell values (or their symbols)

        Raises:
            MalformedGridError: If dimensions are not positive, the matrix is
                not height x width, or a cell symbol is unknown
        """
        if height <= 0 or width <= 0:
            raise MalformedGridError(f"Grid dimensions must be positive, got {height}x{width}")
        if len(cells) != height:
            raise MalformedGridError(f"Expected {height} rows, got {len(cells)}")

        data = np.zeros((height, width), dtype=np.int8)
        for r, row in enumerate(cells):
            if len(row) != width:
                raise MalformedGridError(f"Row {r} has {len(row)} cells, expected {width}")
            for c, symbol in enumerate(row):
                data[r, c] = _symbol_value(symbol, r, c)

        self.height = height
        self.width = width
        self._cells = data

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Any]]) -> "Grid":
        """Create a grid sized from the rows themselves.

        Height is the number of rows and width the length of the first row.

        Raises:
            MalformedGridError: If there are no rows or the rows disagree
        """
        if len(rows) == 0:
            raise MalformedGridError("Grid must have at least one row")
        return cls(len(rows), len(rows[0]), rows)

    @classmethod
    def _from_array(cls, data: np.ndarray) -> "Grid":
        """Wrap a copy of an existing 0/1 array without revalidating it."""
        grid = cls.__new__(cls)
        grid.height, grid.width = data.shape
        grid._cells = data.astype(np.int8, copy=True)
        return grid

    @property
    def shape(self) -> Tuple[int, int]:
        """Get grid dimensions as (height, width)."""
        return (self.height, self.width)

    @property
    def cells(self) -> Tuple[Tuple[Cell, ...], ...]:
        """Get an immutable copy of the cell matrix."""
        data = self._cells
        return tuple(tuple(Cell.LIVE if v else Cell.DEAD for v in row) for row in data.tolist())

    @property
    def population(self) -> int:
        """Get the number of living cells."""
        return int(np.count_nonzero(self._cells))

    def _check_bounds(self, row: int, col: int) -> None:
        """Raise OutOfBoundsAccess unless (row, col) lies on the grid."""
        if not (0 <= row < self.height and 0 <= col < self.width):
            raise OutOfBoundsAccess(
                f"Coordinates ({row}, {col}) out of bounds for {self.height}x{self.width} grid"
            )

    def cell_at(self, row: int, col: int) -> Cell:
        """Get the state of a cell.

        Args:
            row: Row coordinate
            col: Column coordinate

        Returns:
            Cell.LIVE or Cell.DEAD

        Raises:
            OutOfBoundsAccess: If coordinates are out of bounds
        """
        self._check_bounds(row, col)
        return Cell.LIVE if self._cells[row, col] else Cell.DEAD

    def is_alive(self, row: int, col: int) -> bool:
        """Check whether a cell is alive (same bounds policy as cell_at)."""
        return self.cell_at(row, col) is Cell.LIVE

    def count_live_neighbors(self, row: int, col: int) -> int:
        """Count living neighbors of a cell, skipping positions off the grid.

        Raises:
            OutOfBoundsAccess: If the cell itself is out of bounds
        """
        self._check_bounds(row, col)
        return engine.count_live_neighbors(row, col, self._cells)

    def advance(self) -> None:
        """Advance the grid by exactly one generation."""
        # next_generation never touches its input; the swap below is the only write
        self._cells = engine.next_generation(self._cells)

    def render_text(self) -> List[str]:
        """Render the grid as display lines.

        Returns:
            One line per row, top to bottom, each cell symbol followed by a space
        """
        data = self._cells
        return ["".join(f"{Cell.LIVE.value if v else Cell.DEAD.value} " for v in row) for row in data.tolist()]

    def snapshot_for_persistence(self) -> List[List[str]]:
        """Convert grid to nested lists of symbols for serialization.

        Returns:
            Row-major 2D list of "0"/"." strings
        """
        data = self._cells
        return [[Cell.LIVE.value if v else Cell.DEAD.value for v in row] for row in data.tolist()]

    def copy(self) -> "Grid":
        """Create an independent copy of the grid."""
        return Grid._from_array(self._cells)

    def __eq__(self, other: object) -> bool:
        """Check if two grids are equal."""
        if not isinstance(other, Grid):
            return NotImplemented
        return self.shape == other.shape and np.array_equal(self._cells, other._cells)

    def __repr__(self) -> str:
        """Short summary with dimensions and population."""
        return f"Grid(height={self.height}, width={self.width}, population={self.population})"

    def __str__(self) -> str:
        """Text rendering with a newline after every row."""
        return "".join(f"{line}\n" for line in self.render_text())
