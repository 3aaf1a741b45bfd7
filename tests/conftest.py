import os
import sys

import pytest

# Ensure repository root importable early
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from mazegame import create_app  # noqa: E402
from mazegame.maze import Grid, Maze  # noqa: E402

from tests.maze_test_utils import L_CORRIDOR_ROWS  # noqa: E402


@pytest.fixture()
def test_app():
    app = create_app(
        {
            "TESTING": True,
            "SECRET_KEY": "test-secret",
            "MAZE_WIDTH": 21,
            "MAZE_HEIGHT": 15,
            "MAZE_SEED": None,
        }
    )
    return app


@pytest.fixture()
def client(test_app):
    return test_app.test_client()


@pytest.fixture()
def corridor_maze():
    """A generated maze whose grid is swapped for the hand-built L corridor.

    Start is (1,1), end is (3,3); the only route is down then right.
    """
    m = Maze(seed=1, size=(5, 5)).generate()
    m.grid = Grid.from_rows(L_CORRIDOR_ROWS)
    m.start = (1, 1)
    m.end = (3, 3)
    return m
