"""Generation update rules for a bounded Game of Life grid.

Everything here is a pure function of its input matrix. A matrix is either a
numpy array (non-zero means live) or a nested sequence of cell symbols, where
the live symbol "0" means live.
"""

from typing import Any, Optional, Sequence, Union
import numpy as np
import torch
import torch.nn.functional as F

LIVE_SYMBOL = "0"

Matrix = Union[np.ndarray, Sequence[Sequence[Any]]]

# Set single-threaded; grids are small and advance() runs in the caller's thread
torch.set_num_threads(1)

_KERNEL = torch.tensor([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)

_OFFSETS = [(dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)]


def _live_mask(matrix: Matrix) -> np.ndarray:
    """Convert a matrix to a boolean (height, width) array of live cells."""
    if isinstance(matrix, np.ndarray):
        return matrix != 0
    # str-valued enum members compare equal to their symbol
    return np.array([[cell == LIVE_SYMBOL for cell in row] for row in matrix], dtype=bool).reshape(
        len(matrix), len(matrix[0]) if len(matrix) else 0
    )


def count_live_neighbors(row: int, col: int, matrix: Matrix) -> Optional[int]:
    """Count living neighbors of a cell.

    Neighbor positions that fall outside the matrix are skipped; edges do not
    wrap around.

    Args:
        row: Row coordinate
        col: Column coordinate
        matrix: Cell matrix to read

    Returns:
        Number of living neighbors (0-8), or None if (row, col) itself is
        outside the matrix
    """
    mask = _live_mask(matrix)
    height, width = mask.shape

    if not (0 <= row < height and 0 <= col < width):
        return None

    count = 0
    for dr, dc in _OFFSETS:
        nr, nc = row + dr, col + dc
        if 0 <= nr < height and 0 <= nc < width and mask[nr, nc]:
            count += 1

    return count


def count_all_neighbors(matrix: Matrix) -> np.ndarray:
    """Count neighbors for all cells using PyTorch-accelerated convolution.

    Zero padding stands in for the dead space beyond the grid edges.

    Returns:
        2D int8 array with the neighbor count of each cell
    """
    mask = _live_mask(matrix)
    torch_input = torch.from_numpy(mask.astype(np.float32)).unsqueeze(0).unsqueeze(0)
    neighbors = F.conv2d(torch_input, _KERNEL, padding=1)
    return neighbors[0, 0].round().numpy().astype(np.int8)


def next_generation(matrix: Matrix) -> np.ndarray:
    """Compute the generation that follows matrix.

    The input is read as a snapshot and never modified, so every cell is
    updated from the same previous generation.

    Returns:
        New int8 array, 1 for live and 0 for dead
    """
    prev = _live_mask(matrix).copy()
    neighbor_counts = count_all_neighbors(prev)

    # Survival: live cell with 2 or 3 neighbors. Birth: any cell with exactly 3
    survive = prev & (neighbor_counts == 2)
    born = neighbor_counts == 3

    return (survive | born).astype(np.int8)
