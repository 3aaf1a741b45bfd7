"""Breadth-first search over open cells.

With uniform step cost the first time BFS dequeues the target is a shortest
route. Ties between equally short routes are broken by the fixed
North, South, West, East neighbour order, so results are deterministic.
"""
from __future__ import annotations

from collections import deque
from typing import Dict, List, Optional

from .errors import OutOfBoundsError
from .grid import DIRECTIONS, Coord, Grid
from .tiles import OPEN


def solve(grid: Grid, origin_x: int, origin_y: int, end: Coord) -> List[Coord]:
    """Return the shortest path from (origin_x, origin_y) to ``end``, inclusive.

    An empty list means no route exists. Out-of-bounds origin or end raise
    OutOfBoundsError.
    """
    w, h = grid.width, grid.height
    if not grid.in_bounds(origin_x, origin_y):
        raise OutOfBoundsError(origin_x, origin_y, w, h)
    if not grid.in_bounds(*end):
        raise OutOfBoundsError(end[0], end[1], w, h)
    origin = (origin_x, origin_y)
    cells = grid.cells
    # parent links keyed by canonical cell key; origin maps to None
    parents: Dict[int, Optional[Coord]] = {grid.key(origin_x, origin_y): None}
    q = deque([origin])
    while q:
        pos = q.popleft()
        if pos == end:
            return _trace(grid, parents, pos)
        x, y = pos
        for dx, dy in DIRECTIONS:
            nx, ny = x + dx, y + dy
            if 0 <= nx < w and 0 <= ny < h and cells[nx][ny] == OPEN:
                k = nx * h + ny
                if k not in parents:
                    parents[k] = pos
                    q.append((nx, ny))
    return []


def _trace(grid: Grid, parents: Dict[int, Optional[Coord]], pos: Coord) -> List[Coord]:
    path = [pos]
    prev = parents[grid.key(*pos)]
    while prev is not None:
        path.append(prev)
        prev = parents[grid.key(*prev)]
    path.reverse()
    return path


def flood_distances(grid: Grid, origin: Coord) -> Dict[Coord, int]:
    """BFS step count from ``origin`` to every open cell reachable from it."""
    if not grid.in_bounds(*origin):
        raise OutOfBoundsError(origin[0], origin[1], grid.width, grid.height)
    dist = {origin: 0}
    q = deque([origin])
    while q:
        x, y = q.popleft()
        for nx, ny in grid.neighbors(x, y):
            if (nx, ny) not in dist and grid.cells[nx][ny] == OPEN:
                dist[(nx, ny)] = dist[(x, y)] + 1
                q.append((nx, ny))
    return dist


__all__ = ["solve", "flood_distances"]
