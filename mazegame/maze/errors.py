"""Maze engine error taxonomy.

``ConfigurationError`` and ``OutOfBoundsError`` are raised synchronously to the
immediate caller. ``DegenerateMazeError`` is a warning category: it is emitted
through :mod:`warnings` (and logged) so callers can decide whether to
regenerate, but generation still completes.
"""


class MazeError(Exception):
    """Base class for maze engine failures and lifecycle misuse."""


class ConfigurationError(MazeError, ValueError):
    """Grid dimensions cannot hold a lattice cell, or carving opened nothing."""


class OutOfBoundsError(MazeError, IndexError):
    def __init__(self, x: int, y: int, width: int, height: int):
        super().__init__(f"({x}, {y}) outside {width}x{height} grid")
        self.x = x
        self.y = y


class DegenerateMazeError(UserWarning):
    """Fewer than two open cells: start and end coincide."""


__all__ = ["MazeError", "ConfigurationError", "OutOfBoundsError", "DegenerateMazeError"]
