"""Public dungeon package interface."""

from .config import (
    ROOM_COUNT_MAX,
    ROOM_COUNT_MIN,
    DungeonConfig,
    DungeonConfigError,
)
from .connectivity import ConnectionState, connect_rooms
from .generator import DungeonGenerator, DungeonResult, generate
from .grid import GridBuffer, GridFrozenError
from .random_source import RandomSource
from .rooms import Room, place_rooms
from .tiles import FLOOR, WALL, Tile
from .tunnels import carve_corridor

__all__ = [
    "ConnectionState",
    "DungeonConfig",
    "DungeonConfigError",
    "DungeonGenerator",
    "DungeonResult",
    "FLOOR",
    "GridBuffer",
    "GridFrozenError",
    "RandomSource",
    "ROOM_COUNT_MAX",
    "ROOM_COUNT_MIN",
    "Room",
    "Tile",
    "WALL",
    "carve_corridor",
    "connect_rooms",
    "generate",
    "place_rooms",
]
