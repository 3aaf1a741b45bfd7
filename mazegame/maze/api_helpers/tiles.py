"""Shared cell description helpers for the maze API.

Isolated to avoid circular imports between `maze_api` and the movement helpers.
"""

from __future__ import annotations

from typing import List, Tuple

from mazegame.maze.tiles import OPEN, WALL

EXIT_ORDER = (("n", (0, -1)), ("s", (0, 1)), ("w", (-1, 0)), ("e", (1, 0)))
CARDINAL_FULL = {"n": "north", "s": "south", "e": "east", "w": "west"}


def char_to_type(ch: str) -> str:
    if ch == OPEN:
        return "path"
    if ch == WALL:
        return "wall"
    return "unknown"


def describe_cell_and_exits(maze, x: int, y: int) -> Tuple[str, List[str]]:
    """Return (description, exits_list) for current coordinates."""
    desc = f"You are on a {char_to_type(maze.cell_state(x, y))}."
    if (x, y) == tuple(maze.end):
        desc += " The exit is here."
    exits: List[str] = []
    for d, (dx, dy) in EXIT_ORDER:
        if maze.is_walkable(x + dx, y + dy):
            exits.append(d)
    if exits:
        desc += " Exits: " + ", ".join(CARDINAL_FULL[e].capitalize() for e in exits) + "."
    return desc, exits
