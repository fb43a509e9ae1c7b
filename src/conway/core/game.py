"""Conway's Game of Life session driver."""

import logging
from typing import Callable, Optional

from .grid import Grid

logger = logging.getLogger(__name__)


class GameOfLife:
    """Conway's Game of Life simulation over a bounded grid.

    Implements the classic rules:
    - Live cell with 2-3 neighbors survives
    - Dead cell with exactly 3 neighbors becomes alive
    - All other cells die or stay dead
    """

    def __init__(self, grid: Grid) -> None:
        """Initialize the game with a grid.

        Args:
            grid: The cellular grid to simulate
        """
        self.grid = grid
        self._generation = 0

    @property
    def generation(self) -> int:
        """Current generation number."""
        return self._generation

    @property
    def population(self) -> int:
        """Current number of living cells."""
        return self.grid.population

    def step(self) -> None:
        """Advance the simulation by one generation."""
        self.grid.advance()
        self._generation += 1
        logger.debug("Generation %d: population %d", self._generation, self.population)

    def run(self, generations: int, on_step: Optional[Callable[[int, Grid], None]] = None) -> int:
        """Advance the simulation a fixed number of generations.

        Args:
            generations: Number of generations to run (0 is a no-op)
            on_step: Called with (generation, grid) after every step

        Returns:
            The generation number reached

        Raises:
            ValueError: If generations is negative
        """
        if generations < 0:
            raise ValueError(f"Generations must be non-negative, got {generations}")

        for _ in range(generations):
            self.step()
            if on_step is not None:
                on_step(self._generation, self.grid)

        return self._generation
