"""Frontend interfaces for the Game of Life."""

from .cli import CLIGameOfLife, is_valid_integer_string

__all__ = ["CLIGameOfLife", "is_valid_integer_string"]
