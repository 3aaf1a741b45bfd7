from mazegame.maze import Grid
from mazegame.maze.api_helpers import HintTracker, describe_cell_and_exits
from mazegame.maze.api_helpers.tiles import char_to_type

from tests.maze_test_utils import DISCONNECTED_ROWS


def test_disabled_tracker_never_solves(corridor_maze):
    h = HintTracker(corridor_maze)
    assert h.update((1, 1)) == []
    assert h.solves == 0


def test_resolves_only_on_cell_change(corridor_maze):
    h = HintTracker(corridor_maze)
    assert h.enable((1, 1)) == [(1, 1), (1, 2), (1, 3), (2, 3), (3, 3)]
    assert h.solves == 1
    h.update((1, 1))
    h.update([1, 1])
    assert h.solves == 1
    assert h.update((2, 3)) == [(2, 3), (3, 3)]
    assert h.solves == 2


def test_disable_clears_path(corridor_maze):
    h = HintTracker(corridor_maze)
    h.enable((1, 2))
    h.disable()
    assert h.path == [] and h.last_pos is None
    assert h.update((1, 2)) == []


def test_unreachable_exit_gives_empty_hint(corridor_maze):
    corridor_maze.grid = Grid.from_rows(DISCONNECTED_ROWS)
    h = HintTracker(corridor_maze, enabled=True)
    assert h.update((1, 1)) == []
    assert h.solves == 1


def test_cell_description_lists_exits(corridor_maze):
    desc, exits = describe_cell_and_exits(corridor_maze, 1, 3)
    assert exits == ["n", "e"]
    assert desc == "You are on a path. Exits: North, East."
    desc_end, exits_end = describe_cell_and_exits(corridor_maze, 3, 3)
    assert exits_end == ["w"]
    assert "The exit is here." in desc_end


def test_char_to_type():
    assert char_to_type("W") == "wall"
    assert char_to_type("O") == "path"
    assert char_to_type("?") == "unknown"
