"""Gameplay helpers layered on the maze core (player movement, hints, cell text)."""

from .hints import HintTracker
from .movement import Player
from .tiles import char_to_type, describe_cell_and_exits

__all__ = ["HintTracker", "Player", "char_to_type", "describe_cell_and_exits"]
