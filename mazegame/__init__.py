"""
project: Maze Game
module: __init__.py

Flask application factory and configuration.

Configuration is sourced from environment variables (optionally loaded from a
`.env` file) with defaults suitable for local play. Explicit overrides passed
to `create_app` win over the environment.
"""

import logging
import os
import uuid

from dotenv import load_dotenv
from flask import Flask, jsonify

from mazegame.services.game_sessions import SessionStore

# Load .env if present so `SECRET_KEY`, `MAZE_WIDTH`, etc. can be supplied
# without exporting shell variables during development.
load_dotenv()

DEFAULT_SIZE = 150
DEFAULT_MAX_SIZE = 301


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        logging.getLogger(__name__).warning("Ignoring non-integer %s=%r", name, raw)
        return default


def load_config() -> dict:
    seed_raw = os.getenv("MAZE_SEED")
    return {
        "SECRET_KEY": os.getenv("SECRET_KEY", "dev-secret-change-me"),
        "MAZE_WIDTH": _int_env("MAZE_WIDTH", DEFAULT_SIZE),
        "MAZE_HEIGHT": _int_env("MAZE_HEIGHT", DEFAULT_SIZE),
        # Unset or blank -> each new game draws a random seed
        "MAZE_SEED": seed_raw.strip() if seed_raw and seed_raw.strip() else None,
        "MAZE_SESSION_CACHE_MAX": _int_env("MAZE_SESSION_CACHE_MAX", 8),
        # Largest width or height a client may request from /api/maze/new
        "MAZE_MAX_SIZE": _int_env("MAZE_MAX_SIZE", DEFAULT_MAX_SIZE),
    }


def create_app(overrides: dict | None = None) -> Flask:
    """Build a Flask app with the maze blueprint and a fresh session store."""
    app = Flask(__name__, instance_relative_config=True)
    app.config.update(load_config())
    if overrides:
        app.config.update(overrides)
    app.extensions["maze_sessions"] = SessionStore(max_entries=app.config["MAZE_SESSION_CACHE_MAX"])

    from mazegame.routes.maze_api import bp_maze

    app.register_blueprint(bp_maze)

    @app.errorhandler(500)
    def internal_error(e):
        error_id = uuid.uuid4().hex[:8]
        logging.exception("Unhandled exception (id=%s)", error_id)
        return jsonify({"error": "internal error", "error_id": error_id}), 500

    return app


__all__ = ["create_app", "load_config"]
