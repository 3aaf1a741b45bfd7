"""Grid player controller.

Encapsulates:
- Discrete grid position and facing (unit vector on the grid axes, y grows south)
- Cardinal moves that turn the player toward the step (overhead play)
- Tank-style turning and forward/backward steps that keep facing (first-person play)
- The escape (win) condition

Visual interpolation and key polling belong to the client; this module only
decides which grid cell the player occupies.
"""

from __future__ import annotations

from typing import Tuple

from mazegame.logging_utils import get_logger

log = get_logger("mazegame.player")

DELTAS = {"n": (0, -1), "s": (0, 1), "w": (-1, 0), "e": (1, 0)}
ALIASES = {"north": "n", "south": "s", "west": "w", "east": "e", "up": "n", "down": "s", "left": "w", "right": "e"}


def normalize_direction(direction: str | None) -> str | None:
    d = (direction or "").strip().lower()
    d = ALIASES.get(d, d)
    return d if d in DELTAS else None


class Player:
    def __init__(self, maze):
        if maze.start is None:
            raise ValueError("maze must be generated before placing a player")
        self.maze = maze
        self.pos: Tuple[int, int] = tuple(maze.start)
        self.facing: Tuple[int, int] = (0, 1)
        self._escape_logged = False

    @property
    def escaped(self) -> bool:
        return self.pos == tuple(self.maze.end)

    def is_valid_move(self, x: int, y: int) -> bool:
        # bounds first: cell_state rejects out-of-range queries
        if not self.maze.in_bounds(x, y):
            return False
        return self.maze.is_walkable(x, y)

    def try_move(self, dx: int, dy: int, update_facing: bool = True) -> bool:
        """Attempt a single grid step; diagonal input keeps only the x component."""
        if dx and dy:
            dy = 0
        if not dx and not dy:
            return False
        nx, ny = self.pos[0] + dx, self.pos[1] + dy
        if not self.is_valid_move(nx, ny):
            return False
        self.pos = (nx, ny)
        if update_facing:
            self.facing = (dx, dy)
        self._check_escape()
        return True

    def move(self, direction: str | None) -> bool:
        d = normalize_direction(direction)
        if d is None:
            return False
        return self.try_move(*DELTAS[d], update_facing=True)

    def turn(self, direction: str) -> Tuple[int, int]:
        """Rotate facing 90 degrees; ``left`` is counter-clockwise seen from above."""
        fx, fy = self.facing
        if direction == "right":
            self.facing = (-fy, fx)
        elif direction == "left":
            self.facing = (fy, -fx)
        else:
            raise ValueError(f"turn direction must be 'left' or 'right', got {direction!r}")
        return self.facing

    def step(self, forward: bool = True) -> bool:
        sign = 1 if forward else -1
        return self.try_move(self.facing[0] * sign, self.facing[1] * sign, update_facing=False)

    def _check_escape(self) -> None:
        if self.escaped and not self._escape_logged:
            self._escape_logged = True
            log.info(event="escaped", seed=self.maze.seed, x=self.pos[0], y=self.pos[1])

    def to_dict(self):
        return {"pos": list(self.pos), "facing": list(self.facing), "escaped": self.escaped}
