#!/usr/bin/env python3
"""
Example usage of the conway package.
"""

from pathlib import Path
import tempfile

from conway import GameOfLife, Grid, load_grid, save_grid


def main():
    """Demonstrate programmatic usage of the conway package."""
    # A glider in the top-left corner of a bounded 8x8 grid
    grid = Grid.from_rows(
        [
            ".0......",
            "..0.....",
            "000.....",
            "........",
            "........",
            "........",
            "........",
            "........",
        ]
    )
    game = GameOfLife(grid)

    print("Initial state:")
    print(grid)
    print(f"Population: {game.population}")
    print()

    def show(generation, current):
        print(f"Generation {generation}:")
        print(current)
        print(f"Population: {current.population}")
        print()

    # Edges do not wrap, so the glider eventually collides with the corner
    game.run(20, on_step=show)

    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "glider.json"
        save_grid(grid, path)
        restored = load_grid(path)
        print(f"Saved and reloaded {path.name}: identical = {restored == grid}")


if __name__ == "__main__":
    main()
