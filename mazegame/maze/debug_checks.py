"""Structural diagnostics for generated mazes.

Used by ``scripts/diagnose_seeds.py`` and the ``run.py diagnose`` subcommand to
confirm the perfect-maze invariants on concrete seeds.
"""
from __future__ import annotations

from typing import Any, Dict, Tuple

from .maze import Maze
from .solver import flood_distances


def analyze(maze) -> Dict[str, Any]:
    grid = maze.grid
    w, h = grid.width, grid.height
    open_cells = grid.open_cells()
    border = [(x, y) for x, y in open_cells if x in (0, w - 1) or y in (0, h - 1)]
    reached = flood_distances(grid, maze.start) if maze.start is not None else {}
    unreachable = [c for c in open_cells if c not in reached]
    # count each undirected edge once (east and south links only)
    edges = 0
    for x, y in open_cells:
        if grid.is_open(x + 1, y):
            edges += 1
        if grid.is_open(x, y + 1):
            edges += 1
    # a connected acyclic graph on n nodes has exactly n - 1 edges
    cycle_edges = edges - (len(open_cells) - 1) if open_cells else 0
    return {
        "open_cells": len(open_cells),
        "edges": edges,
        "cycle_edges": cycle_edges,
        "border_open_cells": border,
        "unreachable_open_cells": unreachable,
        "start_open": maze.start is not None and grid.is_open(*maze.start),
        "end_open": maze.end is not None and grid.is_open(*maze.end),
    }


def is_perfect(report: Dict[str, Any]) -> bool:
    return (
        report["cycle_edges"] == 0
        and not report["border_open_cells"]
        and not report["unreachable_open_cells"]
        and report["start_open"]
        and report["end_open"]
    )


def diagnose_seed(seed: int, size: Tuple[int, int] = (75, 75)) -> Dict[str, Any]:
    """Generate one maze and summarise its structural report as a JSON-ready row."""
    maze = Maze(seed=seed, size=size).generate()
    report = analyze(maze)
    return {
        "seed": seed,
        "issues": {
            "cycle_edges": report["cycle_edges"],
            "border_open_cells": len(report["border_open_cells"]),
            "unreachable_open_cells": len(report["unreachable_open_cells"]),
        },
        "dead_ends": maze.metrics["dead_ends"],
        "solution_length": maze.metrics["solution_length"],
        "ok": is_perfect(report),
    }


__all__ = ["analyze", "diagnose_seed", "is_perfect"]
