from dataclasses import dataclass
from typing import Optional


@dataclass
class MazeConfig:
    width: int = 150
    height: int = 150
    seed: Optional[int] = None


__all__ = ["MazeConfig"]
