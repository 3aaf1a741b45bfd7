"""Maze instance: grid + spawn points + generation bookkeeping.

Public contract consumed elsewhere:
    Maze(seed: int|None = None, size=(W, H)) OR Maze(MazeConfig(...))
    maze.generate()             -> carve once; a second call raises MazeError
    maze.solve(x, y)            -> shortest path from (x, y) to maze.end ([] if unreachable)
    Attributes: grid, start, end, seed, config, metrics, width, height

Generation may run on a worker thread via ``generate_in_background``; readers
must wait on ``wait_until_ready`` before touching the grid. There is exactly one
writer, so the readiness event is the only synchronization needed. Solving is
read-only and safe to call concurrently once the maze is ready.
"""

from __future__ import annotations

import random
import threading
import time
from dataclasses import replace
from typing import Any, Dict, List, Optional, Tuple

from ..logging_utils import get_logger
from .config import MazeConfig
from .errors import MazeError
from .generator import carve, check_dimensions, pick_spawn_points
from .grid import Coord, Grid
from .metrics import init_metrics
from .solver import flood_distances, solve
from .tiles import OPEN, WALL

log = get_logger("mazegame.maze")


class Maze:
    def __init__(
        self,
        config: MazeConfig | None = None,
        *,
        seed: int | None = None,
        size: Tuple[int, int] | None = None,
    ):
        # Private copy; the caller's config is left untouched
        config = replace(config) if config is not None else MazeConfig()
        if seed is not None:
            config.seed = seed
        if size is not None:
            config.width, config.height = size[0], size[1]
        check_dimensions(config.width, config.height)
        if config.seed is None:
            config.seed = random.randint(0, 2**31 - 1)
        self.config = config
        self.seed = config.seed
        # Local RNG so external random usage does not affect generation
        self._rng = random.Random(self.seed)
        self.grid = Grid(config.width, config.height)
        self.start: Optional[Coord] = None
        self.end: Optional[Coord] = None
        self.metrics: Dict[str, Any] = init_metrics()
        self._ready = threading.Event()
        self._done = threading.Event()
        self._error: Optional[BaseException] = None
        self._started = False
        self._start_lock = threading.Lock()

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    @property
    def ready(self) -> bool:
        return self._ready.is_set()

    # ------------------------------------------------------------------
    # Generation
    # ------------------------------------------------------------------
    def _claim_generation(self) -> None:
        with self._start_lock:
            if self._started:
                raise MazeError("maze already generated")
            self._started = True

    def generate(self) -> "Maze":
        self._claim_generation()
        try:
            self._generate()
        finally:
            self._done.set()
        return self

    def generate_in_background(self) -> threading.Thread:
        """Run generation on a daemon thread; pair with ``wait_until_ready``."""
        self._claim_generation()
        worker = threading.Thread(target=self._generate_worker, name=f"maze-gen-{self.seed}", daemon=True)
        worker.start()
        return worker

    def wait_until_ready(self, timeout: float | None = None) -> bool:
        """Block until generation finishes; re-raise a failure from the worker thread."""
        finished = self._done.wait(timeout)
        if self._error is not None:
            raise self._error
        return finished and self._ready.is_set()

    def _generate_worker(self) -> None:
        try:
            self._generate()
        except Exception as exc:
            self._error = exc
            log.error(event="maze_generate_failed", seed=self.seed, error=repr(exc))
        finally:
            self._done.set()

    def _generate(self) -> None:
        began = time.perf_counter()
        log.debug(event="maze_generate", seed=self.seed, width=self.width, height=self.height)
        carve(self.grid, self._rng)
        self.start, self.end = pick_spawn_points(self.grid, self._rng)
        self._collect_metrics()
        self.metrics["runtime_ms"] = int((time.perf_counter() - began) * 1000)
        self._ready.set()
        log.info(
            event="maze_generated",
            seed=self.seed,
            width=self.width,
            height=self.height,
            open_cells=self.metrics["open_cells"],
            runtime_ms=self.metrics["runtime_ms"],
        )

    def _collect_metrics(self) -> None:
        dead_ends = junctions = 0
        for x, y in self.grid.open_cells():
            degree = len(self.grid.open_neighbors(x, y))
            if degree == 1:
                dead_ends += 1
            elif degree >= 3:
                junctions += 1
        open_cells = self.grid.count(OPEN)
        solution_length = 0
        if self.start != self.end:
            solution_length = flood_distances(self.grid, self.start).get(self.end, 0)
        self.metrics.update(
            {
                "seed": self.seed,
                "width": self.width,
                "height": self.height,
                "open_cells": open_cells,
                "wall_cells": self.grid.count(WALL),
                "dead_ends": dead_ends,
                "junctions": junctions,
                "solution_length": solution_length,
                "degenerate": open_cells < 2,
            }
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def _require_ready(self) -> None:
        if not self._ready.is_set():
            raise MazeError("maze not generated yet")

    def in_bounds(self, x: int, y: int) -> bool:
        return self.grid.in_bounds(x, y)

    def cell_state(self, x: int, y: int) -> str:
        return self.grid.cell_state(x, y)

    def is_walkable(self, x: int, y: int) -> bool:
        return self.grid.is_open(x, y)

    def solve(self, x: int, y: int) -> List[Coord]:
        self._require_ready()
        return solve(self.grid, x, y, self.end)

    # Convenience outputs
    def to_ascii(self, path: List[Coord] | None = None) -> str:
        rows = [list(row) for row in self.grid.to_ascii().splitlines()]
        for px, py in path or ():
            rows[py][px] = "."
        if self.start is not None:
            rows[self.start[1]][self.start[0]] = "S"
        if self.end is not None:
            rows[self.end[1]][self.end[0]] = "E"
        return "\n".join("".join(r) for r in rows)

    def to_json(self) -> Dict[str, Any]:
        return {
            "seed": self.seed,
            "width": self.width,
            "height": self.height,
            "grid": self.grid.to_rows(),
            "start": list(self.start) if self.start else None,
            "end": list(self.end) if self.end else None,
            "metrics": self.metrics,
        }

    def __repr__(self) -> str:
        return f"<Maze {self.width}x{self.height} seed={self.seed} ready={self.ready}>"


__all__ = ["Maze", "MazeConfig"]

if __name__ == "__main__":  # manual quick smoke
    m = Maze(seed=1234, size=(21, 11)).generate()
    print(m.to_ascii(m.solve(*m.start)))
    print(m.metrics)
