"""
project: Maze Game
module: server.py

Server bootstrap helpers: logging configuration and the development server.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler

from mazegame import create_app


def configure_logging(log_dir: str) -> str:
    """Configure logging to both console and a rotating file in ``log_dir``.

    The file path will be <log_dir>/maze.log. Retains a few backups to avoid growth.
    Calling twice replaces the handlers instead of stacking duplicates.
    """
    try:
        os.makedirs(log_dir, exist_ok=True)
    except OSError:
        pass
    log_path = os.path.join(log_dir, "maze.log")

    root = logging.getLogger()
    root.setLevel(logging.INFO)
    for handler in list(root.handlers):
        if getattr(handler, "_maze_handler", False):
            root.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    file_handler = RotatingFileHandler(log_path, maxBytes=1_000_000, backupCount=3)
    file_handler.setLevel(logging.INFO)
    file_handler.setFormatter(formatter)
    file_handler._maze_handler = True

    console = logging.StreamHandler()
    console.setLevel(logging.INFO)
    console.setFormatter(formatter)
    console._maze_handler = True

    root.addHandler(file_handler)
    root.addHandler(console)
    return log_path


def start_server(host="0.0.0.0", port=5000, debug: bool = False):  # pragma: no cover (runtime only)
    """Start the Flask development server.

    When debug=True, Flask's debugger and reloader provide verbose tracebacks.
    """
    app = create_app()
    configure_logging(app.instance_path)
    try:
        app.run(host=host, port=port, debug=debug)
    except KeyboardInterrupt:
        print("\n[INFO] Server stopped by user (Ctrl+C)")
        sys.exit(0)
