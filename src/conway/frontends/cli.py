"""Command-line interface for Conway's Game of Life."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from ..core.grid import Grid, MalformedGridError
from ..core.game import GameOfLife
from ..core.persistence import GridFileError, load_grid, save_grid

logger = logging.getLogger(__name__)

MENU_PROMPT = (
    "Press q to quit, w to save to disk\n"
    "n to iterate multiple times, or any other\n"
    "key to continue to the next generation"
)


def is_valid_integer_string(text: str) -> bool:
    """Check whether text is the canonical decimal spelling of an integer.

    "12" and "-3" are valid; "007", " 3", "+3", "1.5" and "" are not.
    """
    try:
        return str(int(text)) == text
    except ValueError:
        return False


class CLIGameOfLife:
    """Interactive text menu for stepping through generations."""

    def __init__(
        self, game: GameOfLife, input_stream: Optional[TextIO] = None, output: Optional[TextIO] = None
    ) -> None:
        """Initialize CLI interface.

        Args:
            game: Game session to drive
            input_stream: Where menu answers are read from (default stdin)
            output: Where grids and prompts are written (default stdout)
        """
        self.game = game
        self.input_stream = input_stream if input_stream is not None else sys.stdin
        self.output = output if output is not None else sys.stdout

    def _print(self, text: str = "") -> None:
        """Write one line to the output stream."""
        print(text, file=self.output)

    def _read_line(self) -> Optional[str]:
        """Read one answer, or None at end of input."""
        line = self.input_stream.readline()
        if not line:
            return None
        return line.rstrip("\r\n")

    def show_grid(self, grid: Optional[Grid] = None) -> None:
        """Print the grid, one row per line."""
        if grid is None:
            grid = self.game.grid
        self.output.write(str(grid))

    def advance(self, generations: int = 1) -> None:
        """Advance and print the grid after every generation."""
        self.game.run(generations, on_step=lambda generation, grid: self.show_grid(grid))

    def save(self, filename: str) -> bool:
        """Save the current grid, reporting failures instead of raising.

        Returns:
            True if the grid was written
        """
        try:
            save_grid(self.game.grid, filename)
        except GridFileError as e:
            self._print(f"Error: {e}")
            return False
        return True

    def run(self) -> None:
        """Run the menu loop until the user quits or input ends."""
        self.show_grid()

        while True:
            self._print(MENU_PROMPT)
            choice = self._read_line()

            if choice is None or choice == "q":
                return
            elif choice == "w":
                self._print("Enter a file name. ")
                filename = self._read_line()
                if filename:
                    self.save(filename)
                else:
                    self._print("Error: no file name given")
            elif choice == "n":
                self._print("How many iterations? ")
                times = self._read_line()
                if times is not None and is_valid_integer_string(times) and int(times) >= 0:
                    self.advance(int(times))
                else:
                    self._print("Invalid Input: iteration value must be an integer")
            else:
                self.advance()


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Step through Conway's Game of Life on a grid loaded from a JSON file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Interactive menu on a saved grid
  conway-cli glider.json

  # Print the next 10 generations and exit
  conway-cli glider.json --generations 10

  # Advance 50 generations and save the result
  conway-cli glider.json -n 50 -o glider_50.json
        """,
    )

    parser.add_argument("file", help="JSON grid file to load")

    parser.add_argument(
        "-n",
        "--generations",
        type=int,
        default=None,
        help="Advance this many generations without the menu, printing each",
    )

    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Save the final grid here after a --generations run",
    )

    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    return parser


def validate_args(args: argparse.Namespace) -> bool:
    """Validate command-line arguments.

    Args:
        args: Parsed arguments

    Returns:
        True if arguments are valid
    """
    errors = []

    if args.generations is not None and args.generations < 0:
        errors.append("Generations must be non-negative")

    if args.output is not None and args.generations is None:
        errors.append("--output requires --generations")

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI interface.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not validate_args(args):
        return 1

    if not Path(args.file).is_file():
        print("Error: file does not exist")
        return 1

    try:
        grid = load_grid(args.file)
    except (GridFileError, MalformedGridError) as e:
        print(f"Error: {e}")
        return 1

    logger.debug("Starting with %dx%d grid, population %d", grid.height, grid.width, grid.population)
    cli = CLIGameOfLife(GameOfLife(grid))

    try:
        if args.generations is not None:
            cli.show_grid()
            cli.advance(args.generations)
            if args.output and not cli.save(args.output):
                return 1
        else:
            cli.run()
    except KeyboardInterrupt:
        print("\nSimulation interrupted by user")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
