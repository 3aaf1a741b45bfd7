"""Public maze package interface."""

from .config import MazeConfig
from .errors import ConfigurationError, DegenerateMazeError, MazeError, OutOfBoundsError
from .generator import generate
from .grid import Grid
from .maze import Maze
from .solver import flood_distances, solve
from .tiles import OPEN, WALL

__all__ = [
    "Maze",
    "MazeConfig",
    "Grid",
    "generate",
    "solve",
    "flood_distances",
    "WALL",
    "OPEN",
    "MazeError",
    "ConfigurationError",
    "OutOfBoundsError",
    "DegenerateMazeError",
]
