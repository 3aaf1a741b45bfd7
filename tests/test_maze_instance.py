"""Maze lifecycle: construction, one-shot generation, readiness, outputs."""

import random
from concurrent.futures import ThreadPoolExecutor

import pytest

from mazegame.maze import ConfigurationError, DegenerateMazeError, Maze, MazeConfig, MazeError


def test_generate_fills_spawns_and_metrics():
    m = Maze(seed=77, size=(31, 21))
    assert m.generate() is m
    assert m.ready
    assert m.is_walkable(*m.start) and m.is_walkable(*m.end)
    assert m.start != m.end
    path = m.solve(*m.start)
    assert m.metrics["solution_length"] == len(path) - 1
    assert m.metrics["open_cells"] + m.metrics["wall_cells"] == 31 * 21
    assert m.metrics["seed"] == 77
    assert m.metrics["dead_ends"] > 0
    assert m.metrics["degenerate"] is False
    assert type(m.metrics["runtime_ms"]) is int


def test_metrics_start_zeroed_with_integer_runtime():
    m = Maze(seed=5, size=(9, 9))
    assert m.metrics["runtime_ms"] == 0
    assert type(m.metrics["runtime_ms"]) is int


def test_generate_twice_is_rejected():
    m = Maze(seed=1, size=(9, 9)).generate()
    with pytest.raises(MazeError):
        m.generate()


def test_solve_before_generate_is_rejected():
    m = Maze(seed=1, size=(9, 9))
    with pytest.raises(MazeError):
        m.solve(1, 1)


def test_small_dimensions_fail_at_construction():
    with pytest.raises(ConfigurationError):
        Maze(seed=1, size=(2, 10))


def test_defaults_and_seed_assignment():
    m = Maze()
    assert (m.width, m.height) == (150, 150)
    assert isinstance(m.seed, int)
    assert not m.ready


def test_config_object_with_overrides():
    cfg = MazeConfig(width=11, height=9, seed=3)
    m = Maze(cfg, seed=4, size=(13, 7))
    assert (m.width, m.height, m.seed) == (13, 7, 4)
    assert cfg == MazeConfig(width=11, height=9, seed=3)


def test_reused_config_keeps_drawing_fresh_seeds(monkeypatch):
    draws = iter([111, 222])
    monkeypatch.setattr(random, "randint", lambda a, b: next(draws))
    cfg = MazeConfig(width=21, height=21)
    first = Maze(cfg).generate()
    second = Maze(cfg).generate()
    assert cfg.seed is None
    assert (first.seed, second.seed) == (111, 222)
    assert first.config is not cfg


def test_determinism_ignores_global_random():
    a = Maze(seed=2025, size=(25, 25))
    random.seed(1)
    random.random()
    a.generate()
    b = Maze(seed=2025, size=(25, 25)).generate()
    assert a.grid == b.grid
    assert (a.start, a.end) == (b.start, b.end)


def test_background_generation_readiness():
    m = Maze(seed=10, size=(61, 61))
    worker = m.generate_in_background()
    assert m.wait_until_ready(timeout=10)
    worker.join(timeout=10)
    assert m.ready
    assert m.solve(*m.start)[-1] == m.end
    with pytest.raises(MazeError):
        m.generate()


def test_background_failure_surfaces_in_waiter(monkeypatch):
    import mazegame.maze.maze as maze_mod

    def broken_carve(grid, rng):
        raise RuntimeError("carve exploded")

    monkeypatch.setattr(maze_mod, "carve", broken_carve)
    m = Maze(seed=10, size=(21, 21))
    worker = m.generate_in_background()
    worker.join(timeout=10)
    with pytest.raises(RuntimeError, match="carve exploded"):
        m.wait_until_ready()
    assert not m.ready
    with pytest.raises(MazeError):
        m.solve(1, 1)


def test_wait_before_generation_times_out():
    assert Maze(seed=1, size=(9, 9)).wait_until_ready(timeout=0.01) is False


def test_concurrent_solves_agree():
    m = Maze(seed=12, size=(41, 41)).generate()
    origins = m.grid.open_cells()[:20]
    with ThreadPoolExecutor(max_workers=4) as pool:
        parallel = list(pool.map(lambda c: m.solve(*c), origins))
    assert parallel == [m.solve(*c) for c in origins]


def test_degenerate_maze_warns_and_records_metric():
    m = Maze(seed=1, size=(3, 3))
    with pytest.warns(DegenerateMazeError):
        m.generate()
    assert m.start == m.end == (1, 1)
    assert m.metrics["degenerate"] is True
    assert m.solve(1, 1) == [(1, 1)]


def test_to_json_and_ascii():
    m = Maze(seed=6, size=(11, 7)).generate()
    data = m.to_json()
    assert data["width"] == 11 and data["height"] == 7
    assert len(data["grid"]) == 7 and all(len(r) == 11 for r in data["grid"])
    assert data["start"] == list(m.start)
    art = m.to_ascii(m.solve(*m.start)).splitlines()
    assert art[0] == "#" * 11
    assert art[m.start[1]][m.start[0]] == "S"
    assert art[m.end[1]][m.end[0]] == "E"
