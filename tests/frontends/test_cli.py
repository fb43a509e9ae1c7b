"""Tests for the CLI frontend."""

from io import StringIO
from unittest.mock import patch

import pytest
from conway.core.game import GameOfLife
from conway.core.grid import Grid
from conway.core.persistence import load_grid, save_grid
from conway.frontends.cli import (
    CLIGameOfLife,
    MENU_PROMPT,
    create_parser,
    is_valid_integer_string,
    main,
    validate_args,
)

BLINKER_HORIZONTAL = [".....", ".....", ".000.", ".....", "....."]
BLINKER_VERTICAL = [".....", "..0..", "..0..", "..0..", "....."]


def make_cli(commands, rows=BLINKER_HORIZONTAL):
    """Build a CLI over a fresh grid fed with the given input lines."""
    game = GameOfLife(Grid.from_rows(rows))
    output = StringIO()
    cli = CLIGameOfLife(game, input_stream=StringIO("".join(f"{c}\n" for c in commands)), output=output)
    return cli, output


@pytest.fixture
def blinker_file(tmp_path):
    path = tmp_path / "blinker.json"
    save_grid(Grid.from_rows(BLINKER_HORIZONTAL), path)
    return path


class TestIsValidIntegerString:
    """Test cases for integer string validation."""

    @pytest.mark.parametrize("text", ["0", "7", "12", "-3", "100"])
    def test_valid(self, text):
        """Test canonical integer spellings."""
        assert is_valid_integer_string(text)

    @pytest.mark.parametrize("text", ["", "007", " 3", "3 ", "+3", "-0", "1.5", "abc", "1_000"])
    def test_invalid(self, text):
        """Test non-canonical or non-integer text."""
        assert not is_valid_integer_string(text)


class TestCLIGameOfLife:
    """Test cases for the interactive menu."""

    def test_quit_immediately(self):
        """Test that q prints the grid once and stops."""
        cli, output = make_cli(["q"])
        cli.run()

        text = output.getvalue()
        assert text.startswith(str(Grid.from_rows(BLINKER_HORIZONTAL)))
        assert MENU_PROMPT in text
        assert cli.game.generation == 0

    def test_end_of_input_stops(self):
        """Test that running out of input ends the loop."""
        cli, _ = make_cli([])
        cli.run()
        assert cli.game.generation == 0

    def test_any_other_key_advances(self):
        """Test that an unrecognized key advances one generation."""
        cli, output = make_cli(["", "x", "q"])
        cli.run()

        assert cli.game.generation == 2
        assert cli.game.grid == Grid.from_rows(BLINKER_HORIZONTAL)
        assert str(Grid.from_rows(BLINKER_VERTICAL)) in output.getvalue()

    def test_iterate_multiple(self):
        """Test that n advances exactly the requested number of generations."""
        cli, output = make_cli(["n", "3", "q"])
        cli.run()

        assert cli.game.generation == 3
        assert cli.game.grid == Grid.from_rows(BLINKER_VERTICAL)
        text = output.getvalue()
        assert "How many iterations?" in text
        # Initial grid plus one rendering per generation
        assert text.count(str(Grid.from_rows(BLINKER_HORIZONTAL))) == 2
        assert text.count(str(Grid.from_rows(BLINKER_VERTICAL))) == 2

    def test_iterate_zero(self):
        """Test that n with 0 does not advance."""
        cli, _ = make_cli(["n", "0", "q"])
        cli.run()
        assert cli.game.generation == 0

    @pytest.mark.parametrize("answer", ["abc", "1.5", "-2", "03"])
    def test_iterate_invalid_count(self, answer):
        """Test that a bad iteration count is reported and the loop continues."""
        cli, output = make_cli(["n", answer, "q"])
        cli.run()

        assert cli.game.generation == 0
        assert "Invalid Input: iteration value must be an integer" in output.getvalue()

    def test_save(self, tmp_path):
        """Test that w saves the current grid to the named file."""
        path = tmp_path / "saved.json"
        cli, output = make_cli(["", "w", str(path), "q"])
        cli.run()

        assert "Enter a file name." in output.getvalue()
        assert load_grid(path) == Grid.from_rows(BLINKER_VERTICAL)

    def test_save_failure_is_reported(self, tmp_path):
        """Test that a failed save prints an error and keeps the loop going."""
        path = tmp_path / "missing_dir" / "saved.json"
        cli, output = make_cli(["w", str(path), "", "q"])
        cli.run()

        assert "Error:" in output.getvalue()
        assert cli.game.generation == 1

    def test_save_without_name(self):
        """Test that an empty file name is reported."""
        cli, output = make_cli(["w", "", "q"])
        cli.run()
        assert "Error: no file name given" in output.getvalue()


class TestArgParsing:
    """Test cases for argument parsing and validation."""

    def test_parser_defaults(self):
        """Test parser defaults."""
        args = create_parser().parse_args(["grid.json"])
        assert args.file == "grid.json"
        assert args.generations is None
        assert args.output is None
        assert args.verbose is False

    def test_parser_options(self):
        """Test parsing all options."""
        args = create_parser().parse_args(["grid.json", "-n", "5", "-o", "out.json", "-v"])
        assert args.generations == 5
        assert args.output == "out.json"
        assert args.verbose is True

    def test_parser_requires_file(self):
        """Test that the grid file is required."""
        with pytest.raises(SystemExit):
            create_parser().parse_args([])

    def test_validate_args(self):
        """Test argument validation."""
        parser = create_parser()
        assert validate_args(parser.parse_args(["g.json", "-n", "2"]))

        with patch("sys.stdout", new_callable=StringIO) as stdout:
            assert not validate_args(parser.parse_args(["g.json", "-n", "-1"]))
            assert not validate_args(parser.parse_args(["g.json", "-o", "out.json"]))
        assert "Generations must be non-negative" in stdout.getvalue()


class TestMain:
    """Test cases for the main entry point."""

    def test_missing_file(self, tmp_path, capsys):
        """Test that a missing file exits with an error."""
        assert main([str(tmp_path / "nope.json")]) == 1
        assert "Error: file does not exist" in capsys.readouterr().out

    def test_malformed_file(self, tmp_path, capsys):
        """Test that a malformed grid file exits with an error."""
        path = tmp_path / "bad.json"
        path.write_text('[["0", "."], ["0"]]')

        assert main([str(path)]) == 1
        assert "Error:" in capsys.readouterr().out

    def test_non_utf8_file(self, tmp_path, capsys):
        """Test that a file of undecodable bytes exits with an error."""
        path = tmp_path / "binary.json"
        path.write_bytes(b"\xff\xfe")

        assert main([str(path)]) == 1
        assert "Error:" in capsys.readouterr().out

    def test_generations_mode(self, blinker_file, tmp_path, capsys):
        """Test non-interactive stepping with an output file."""
        output = tmp_path / "out.json"

        assert main([str(blinker_file), "-n", "1", "-o", str(output)]) == 0

        assert load_grid(output) == Grid.from_rows(BLINKER_VERTICAL)
        out = capsys.readouterr().out
        assert str(Grid.from_rows(BLINKER_HORIZONTAL)) in out
        assert str(Grid.from_rows(BLINKER_VERTICAL)) in out

    def test_interactive_mode(self, blinker_file, capsys):
        """Test the interactive menu through main."""
        with patch("sys.stdin", StringIO("\nq\n")):
            assert main([str(blinker_file)]) == 0

        assert MENU_PROMPT in capsys.readouterr().out

    def test_keyboard_interrupt(self, blinker_file, capsys):
        """Test that Ctrl-C exits cleanly with an error code."""
        with patch.object(CLIGameOfLife, "run", side_effect=KeyboardInterrupt):
            assert main([str(blinker_file)]) == 1

        assert "interrupted" in capsys.readouterr().out
