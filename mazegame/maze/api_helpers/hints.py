"""Hint path tracking.

The client shows the shortest route to the exit as a trail of waypoints. The
route only changes when the player enters a different grid cell, so the solve
is re-run on cell changes only.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

Coord = Tuple[int, int]


class HintTracker:
    def __init__(self, maze, enabled: bool = False):
        self.maze = maze
        self.enabled = enabled
        self.path: List[Coord] = []
        self.last_pos: Optional[Coord] = None
        self.solves = 0

    def enable(self, pos: Coord) -> List[Coord]:
        self.enabled = True
        self.last_pos = None
        return self.update(pos)

    def disable(self) -> None:
        self.enabled = False
        self.path = []
        self.last_pos = None

    def update(self, pos: Coord) -> List[Coord]:
        """Return the current hint, re-solving only if ``pos`` changed since last time."""
        if not self.enabled:
            return []
        pos = tuple(pos)
        if pos != self.last_pos:
            self.path = self.maze.solve(*pos)
            self.last_pos = pos
            self.solves += 1
        return self.path
