"""In-process game session registry.

Each browser session owns one generated maze plus the player and hint state
that go with it. Sessions live in a small lock-guarded dict; the oldest entry
is evicted once the configured cap is exceeded.
"""

from __future__ import annotations

import hashlib
import random
import threading
import uuid
from dataclasses import dataclass, field
from typing import Dict, Optional

from mazegame.logging_utils import get_logger
from mazegame.maze import Maze, MazeConfig
from mazegame.maze.api_helpers import HintTracker, Player

log = get_logger("mazegame.sessions")

MAX_SEED = 9223372036854775807


def coerce_seed(payload_seed) -> int:
    """Convert a provided seed (int or str) into a bounded non-negative int."""
    if payload_seed is None or isinstance(payload_seed, bool):
        return random.randint(1, 1_000_000)
    if isinstance(payload_seed, int):
        return payload_seed % MAX_SEED
    if isinstance(payload_seed, str):
        s = payload_seed.strip()
        if not s:
            return random.randint(1, 1_000_000)
        if s.isdigit():
            return int(s) % MAX_SEED
        h = hashlib.sha256(s.encode("utf-8")).digest()
        return int.from_bytes(h[:8], "big") % MAX_SEED
    return random.randint(1, 1_000_000)


@dataclass
class GameSession:
    maze: Maze
    player: Player
    hints: HintTracker
    session_id: str = field(default_factory=lambda: uuid.uuid4().hex)


def new_game(config: MazeConfig) -> GameSession:
    """Generate a maze and place a player on its start cell."""
    maze = Maze(config).generate()
    return GameSession(maze=maze, player=Player(maze), hints=HintTracker(maze))


class SessionStore:
    def __init__(self, max_entries: int = 8):
        # the newest game always survives eviction
        self.max_entries = max(1, max_entries)
        self._sessions: Dict[str, GameSession] = {}
        self._lock = threading.Lock()

    def add(self, game: GameSession) -> GameSession:
        with self._lock:
            self._sessions[game.session_id] = game
            while len(self._sessions) > self.max_entries:
                oldest = next(iter(self._sessions))
                self._sessions.pop(oldest)
                log.debug(event="session_evicted", session_id=oldest)
        return game

    def get(self, session_id: Optional[str]) -> Optional[GameSession]:
        if not session_id:
            return None
        with self._lock:
            return self._sessions.get(session_id)

    def discard(self, session_id: Optional[str]) -> None:
        with self._lock:
            self._sessions.pop(session_id, None)

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)


__all__ = ["GameSession", "SessionStore", "coerce_seed", "new_game"]
