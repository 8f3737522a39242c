from typing import Dict


def init_metrics() -> Dict[str, int]:
    return {
        'rooms_requested': 0,
        'rooms_placed': 0,
        'placement_attempts': 0,
        'rooms_rejected': 0,
        'corridors_carved': 0,
        'corridor_tiles_carved': 0,
        'tiles_floor': 0,
        'tiles_wall': 0,
        'runtime_ms': 0,
    }
