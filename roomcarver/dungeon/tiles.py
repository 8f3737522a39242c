# Tile states; integer values match the 0/1 grid the map view consumes.
from enum import IntEnum


class Tile(IntEnum):
    WALL = 0
    FLOOR = 1


WALL = Tile.WALL
FLOOR = Tile.FLOOR

__all__ = ["Tile", "WALL", "FLOOR"]
