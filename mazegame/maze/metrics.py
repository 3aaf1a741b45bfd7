from typing import Dict


def init_metrics() -> Dict[str, int | bool]:
    return {
        'open_cells': 0,
        'wall_cells': 0,
        'dead_ends': 0,
        'junctions': 0,
        'solution_length': 0,
        'runtime_ms': 0,
        'degenerate': False,
    }
