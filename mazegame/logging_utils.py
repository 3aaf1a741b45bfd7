"""Minimal structured logging helper.

Provides a lightweight wrapper around print() to emit key=value pairs with a
timestamp, level and logger name. Keeps the maze core free of stdlib logging
configuration while still producing lines that are easy to grep and parse.

Usage:
    from mazegame.logging_utils import get_logger
    log = get_logger("mazegame.maze")
    log.info(event="maze_generated", seed=1234, width=150)

Environment:
    MAZE_LOG_LEVEL   debug | info | warn | error (default: info)
    MAZE_LOG_JSON    1/true/yes/on to emit one JSON object per line

Reserved keys: level, ts, logger.
"""

from __future__ import annotations

import json
import os
import sys
import time

LEVELS = {"debug": 10, "info": 20, "warn": 30, "error": 40}


def _env_level() -> int:
    return LEVELS.get(os.getenv("MAZE_LOG_LEVEL", "info").lower(), 20)


def _env_json() -> bool:
    return os.getenv("MAZE_LOG_JSON", "0").lower() in ("1", "true", "yes", "on")


CURRENT_LEVEL = _env_level()
JSON_MODE = _env_json()


def configure(level: str | None = None, json_mode: bool | None = None) -> None:
    """Override level / output mode at runtime (CLI flags, tests)."""
    global CURRENT_LEVEL, JSON_MODE
    CURRENT_LEVEL = LEVELS[level] if level is not None else _env_level()
    JSON_MODE = json_mode if json_mode is not None else _env_json()


def _format(level: str, **fields) -> str:
    if JSON_MODE:
        rec = {k: v for k, v in fields.items() if v is not None}
        rec["level"] = level
        rec["ts"] = int(time.time())
        return json.dumps(rec, separators=(",", ":"), default=repr)
    parts = [f"level={level}", f"ts={int(time.time())}"]
    for k, v in fields.items():
        if v is None:
            continue
        if isinstance(v, (bool, int, float)):
            parts.append(f"{k}={v}")
        else:
            parts.append(f"{k}={str(v).replace(' ', '_')}")
    return " ".join(parts)


class _Logger:
    def __init__(self, name: str | None = None):
        self.name = name or "mazegame"

    def _log(self, lvl: str, **fields):
        if LEVELS[lvl] < CURRENT_LEVEL:
            return
        fields.setdefault("logger", self.name)
        print(_format(lvl, **fields), file=sys.stderr if lvl == "error" else sys.stdout)

    def debug(self, **fields):
        self._log("debug", **fields)

    def info(self, **fields):
        self._log("info", **fields)

    def warn(self, **fields):
        self._log("warn", **fields)

    def error(self, **fields):
        self._log("error", **fields)


_LOGGER_CACHE: dict[str, _Logger] = {}


def get_logger(name: str) -> _Logger:
    if name not in _LOGGER_CACHE:
        _LOGGER_CACHE[name] = _Logger(name)
    return _LOGGER_CACHE[name]


log = get_logger("mazegame")
