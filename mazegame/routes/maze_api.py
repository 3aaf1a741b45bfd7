"""
project: Maze Game
module: maze_api.py

Maze creation, map, movement and hint API routes.

The browser client renders the maze and polls input; these endpoints own the
authoritative grid position. The active game id is kept in the Flask session
cookie and resolved against the in-process session store.
"""

from flask import Blueprint, current_app, jsonify, request, session

from mazegame.logging_utils import get_logger
from mazegame.maze import ConfigurationError, MazeConfig
from mazegame.maze.api_helpers import describe_cell_and_exits
from mazegame.services.game_sessions import coerce_seed, new_game

log = get_logger("mazegame.api")

bp_maze = Blueprint("maze", __name__)

SESSION_KEY = "maze_session_id"
STEP_DIRS = {"forward": True, "back": False, "backward": False}


def _store():
    return current_app.extensions["maze_sessions"]


def _active_game():
    return _store().get(session.get(SESSION_KEY))


def _no_game():
    return jsonify({"error": "no active maze"}), 404


def _position_payload(game):
    player = game.player
    desc, exits = describe_cell_and_exits(game.maze, *player.pos)
    data = player.to_dict()
    data.update({"desc": desc, "exits": exits})
    return data


def _dimension(data, key, default, limit):
    value = data.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{key} must be an integer")
    if value > limit:
        raise ConfigurationError(f"{key} must be at most {limit}")
    return value


@bp_maze.route("/api/maze/new", methods=["POST"])
def new_maze():
    """Generate a fresh maze for this browser session.

    Body JSON (all optional): { "seed": <int|str|null>, "width": <int>, "height": <int> }
    Response: { session_id, seed, width, height, start, end }
    """
    data = request.get_json(silent=True) or {}
    cfg = current_app.config
    provided = data.get("seed", cfg.get("MAZE_SEED"))
    limit = cfg["MAZE_MAX_SIZE"]
    try:
        config = MazeConfig(
            width=_dimension(data, "width", cfg["MAZE_WIDTH"], limit),
            height=_dimension(data, "height", cfg["MAZE_HEIGHT"], limit),
            seed=coerce_seed(provided),
        )
        game = new_game(config)
    except ConfigurationError as exc:
        log.warn(event="maze_rejected", error=str(exc))
        return jsonify({"error": str(exc)}), 400
    store = _store()
    store.discard(session.get(SESSION_KEY))
    store.add(game)
    session[SESSION_KEY] = game.session_id
    maze = game.maze
    log.info(event="maze_created", session_id=game.session_id, seed=maze.seed, width=maze.width, height=maze.height)
    return jsonify(
        {
            "session_id": game.session_id,
            "seed": maze.seed,
            "width": maze.width,
            "height": maze.height,
            "start": list(maze.start),
            "end": list(maze.end),
        }
    )


@bp_maze.route("/api/maze/map")
def maze_map():
    """Return the grid rows (one string per y), spawn points and player position."""
    game = _active_game()
    if game is None:
        return _no_game()
    maze = game.maze
    return jsonify(
        {
            "seed": maze.seed,
            "width": maze.width,
            "height": maze.height,
            "grid": maze.grid.to_rows(),
            "start": list(maze.start),
            "end": list(maze.end),
            "player_pos": list(game.player.pos),
        }
    )


@bp_maze.route("/api/maze/state")
def maze_state():
    game = _active_game()
    if game is None:
        return _no_game()
    return jsonify(_position_payload(game))


@bp_maze.route("/api/maze/move", methods=["POST"])
def maze_move():
    """Move one cell. ``dir`` is n/s/e/w (turns toward the step) or forward/back (keeps facing).

    Unknown or empty directions are a no-op and report ``moved: false``.
    """
    game = _active_game()
    if game is None:
        return _no_game()
    data = request.get_json(silent=True) or {}
    direction = str(data.get("dir") or "").strip().lower()
    if direction in STEP_DIRS:
        moved = game.player.step(forward=STEP_DIRS[direction])
    else:
        moved = game.player.move(direction)
    payload = _position_payload(game)
    payload["moved"] = moved
    if moved:
        log.debug(event="move", session_id=game.session_id, dir=direction, x=payload["pos"][0], y=payload["pos"][1])
    return jsonify(payload)


@bp_maze.route("/api/maze/turn", methods=["POST"])
def maze_turn():
    game = _active_game()
    if game is None:
        return _no_game()
    data = request.get_json(silent=True) or {}
    direction = str(data.get("dir") or "").strip().lower()
    try:
        facing = game.player.turn(direction)
    except ValueError as exc:
        return jsonify({"error": str(exc)}), 400
    return jsonify({"facing": list(facing)})


@bp_maze.route("/api/maze/hint")
def maze_hint():
    """Shortest route from the player's cell to the exit; empty when unreachable."""
    game = _active_game()
    if game is None:
        return _no_game()
    hints = game.hints
    if not hints.enabled:
        hints.enable(game.player.pos)
    path = hints.update(game.player.pos)
    return jsonify({"path": [list(p) for p in path], "length": len(path)})
