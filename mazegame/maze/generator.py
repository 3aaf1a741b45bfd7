"""Perfect-maze carving: randomized depth-first backtracking over the odd-coordinate lattice."""
from __future__ import annotations

import random
import warnings
from typing import List, Tuple

from ..logging_utils import get_logger
from .errors import ConfigurationError, DegenerateMazeError
from .grid import Coord, Grid
from .tiles import WALL

log = get_logger("mazegame.generator")

# Lattice offsets: two steps so a single wall cell separates neighbouring lattice cells
LATTICE_STEPS: Tuple[Coord, ...] = ((0, -2), (2, 0), (0, 2), (-2, 0))


def check_dimensions(width: int, height: int) -> None:
    if width < 3 or height < 3:
        raise ConfigurationError(f"maze needs at least 3x3 cells to hold a lattice cell, got {width}x{height}")


def unvisited_neighbors(grid: Grid, cell: Coord) -> List[Coord]:
    cx, cy = cell
    out = []
    for dx, dy in LATTICE_STEPS:
        nx, ny = cx + dx, cy + dy
        # keep the outermost ring intact
        if 0 < nx < grid.width - 1 and 0 < ny < grid.height - 1 and grid.cells[nx][ny] == WALL:
            out.append((nx, ny))
    return out


def carve(grid: Grid, rng: random.Random) -> int:
    """Carve a perfect maze into an all-WALL grid in place.

    Uses an explicit stack rather than recursion so large grids do not hit the
    interpreter recursion limit. Returns the number of lattice cells visited.
    """
    check_dimensions(grid.width, grid.height)
    current = (
        1 + 2 * rng.randrange((grid.width - 1) // 2),
        1 + 2 * rng.randrange((grid.height - 1) // 2),
    )
    grid.set_open(*current)
    stack = [current]
    visited = 1
    while stack:
        current = stack[-1]
        candidates = unvisited_neighbors(grid, current)
        if not candidates:
            stack.pop()
            continue
        nxt = rng.choice(candidates)
        grid.set_open((current[0] + nxt[0]) // 2, (current[1] + nxt[1]) // 2)
        grid.set_open(*nxt)
        stack.append(nxt)
        visited += 1
    return visited


def pick_spawn_points(grid: Grid, rng: random.Random) -> Tuple[Coord, Coord]:
    """Choose distinct random start/end cells among the open cells.

    A grid with a single open cell yields start == end and emits a
    DegenerateMazeError warning instead of retrying forever.
    """
    open_cells = grid.open_cells()
    if not open_cells:
        log.error(event="generation_failed", reason="no_open_cells", width=grid.width, height=grid.height)
        raise ConfigurationError("maze generation failed: no open cells")
    start_idx = rng.randrange(len(open_cells))
    if len(open_cells) == 1:
        log.warn(event="degenerate_maze", width=grid.width, height=grid.height, open_cells=1)
        warnings.warn(
            DegenerateMazeError(f"{grid.width}x{grid.height} maze has a single open cell; start == end"),
            stacklevel=2,
        )
        return open_cells[start_idx], open_cells[start_idx]
    end_idx = rng.randrange(len(open_cells))
    while end_idx == start_idx:
        end_idx = rng.randrange(len(open_cells))
    return open_cells[start_idx], open_cells[end_idx]


def generate(grid: Grid, rng: random.Random) -> Tuple[Coord, Coord]:
    carve(grid, rng)
    return pick_spawn_points(grid, rng)


__all__ = ["generate", "carve", "pick_spawn_points", "unvisited_neighbors", "check_dimensions"]
