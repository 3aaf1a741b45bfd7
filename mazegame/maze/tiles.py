# Cell state constants centralized for modular imports
WALL = "W"
OPEN = "O"

CELL_STATES = (WALL, OPEN)

__all__ = ["WALL", "OPEN", "CELL_STATES"]
