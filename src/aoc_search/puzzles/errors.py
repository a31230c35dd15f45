# puzzles/errors.py


class PuzzleInputError(ValueError):
    """The puzzle input could not be parsed."""


class NoPathError(RuntimeError):
    """The search exhausted its frontier without reaching a goal."""
