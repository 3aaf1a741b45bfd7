"""Grid model: a width x height lattice of WALL / OPEN cells.

Storage is column-major (``cells[x][y]``), matching how the generator, solver
and movement helpers index it. Every cell starts as WALL and may only ever be
flipped to OPEN.
"""
from __future__ import annotations

from typing import Iterable, Iterator, List, Tuple

from .errors import OutOfBoundsError
from .tiles import OPEN, WALL

Coord = Tuple[int, int]

# North, South, West, East; y grows southward
DIRECTIONS: Tuple[Coord, ...] = ((0, -1), (0, 1), (-1, 0), (1, 0))


class Grid:
    __slots__ = ("width", "height", "cells")

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"grid dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.cells: List[List[str]] = [[WALL for _ in range(height)] for _ in range(width)]

    @classmethod
    def from_rows(cls, rows: Iterable[str]) -> "Grid":
        """Build a grid from row strings (one per y) of WALL/OPEN characters."""
        rows = list(rows)
        if not rows:
            raise ValueError("at least one row required")
        width = len(rows[0])
        grid = cls(width, len(rows))
        for y, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(f"row {y} has length {len(row)}, expected {width}")
            for x, ch in enumerate(row):
                if ch == OPEN:
                    grid.cells[x][y] = OPEN
                elif ch != WALL:
                    raise ValueError(f"unknown cell character {ch!r} at ({x}, {y})")
        return grid

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _check(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise OutOfBoundsError(x, y, self.width, self.height)

    def cell_state(self, x: int, y: int) -> str:
        self._check(x, y)
        return self.cells[x][y]

    def set_open(self, x: int, y: int) -> None:
        self._check(x, y)
        self.cells[x][y] = OPEN

    def is_open(self, x: int, y: int) -> bool:
        return self.in_bounds(x, y) and self.cells[x][y] == OPEN

    def key(self, x: int, y: int) -> int:
        return x * self.height + y

    def neighbors(self, x: int, y: int) -> Iterator[Coord]:
        """Yield in-bounds 4-neighbors of (x, y) in North, South, West, East order."""
        for dx, dy in DIRECTIONS:
            nx, ny = x + dx, y + dy
            if 0 <= nx < self.width and 0 <= ny < self.height:
                yield nx, ny

    def open_neighbors(self, x: int, y: int) -> List[Coord]:
        return [(nx, ny) for nx, ny in self.neighbors(x, y) if self.cells[nx][ny] == OPEN]

    def open_cells(self) -> List[Coord]:
        return [(x, y) for x in range(self.width) for y in range(self.height) if self.cells[x][y] == OPEN]

    def count(self, state: str) -> int:
        return sum(col.count(state) for col in self.cells)

    def to_rows(self) -> List[str]:
        return ["".join(self.cells[x][y] for x in range(self.width)) for y in range(self.height)]

    def to_ascii(self, wall: str = "#", open_: str = " ") -> str:
        table = str.maketrans({WALL: wall, OPEN: open_})
        return "\n".join(row.translate(table) for row in self.to_rows())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.width == other.width and self.height == other.height and self.cells == other.cells

    def __repr__(self) -> str:
        return f"<Grid {self.width}x{self.height} open={self.count(OPEN)}>"


__all__ = ["Grid", "Coord", "DIRECTIONS"]
