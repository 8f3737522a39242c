from typing import Tuple

from .grid import GridBuffer
from .random_source import RandomSource
from .tiles import FLOOR


def carve_corridor(grid: GridBuffer, a: Tuple[int, int], b: Tuple[int, int], rng: RandomSource) -> int:
    """L-shaped corridor from point a to point b.

    A coin flip picks the elbow: horizontal along a's row then vertical along
    b's column, or vertical along a's column then horizontal along b's row.
    Both runs include their endpoints. Returns the number of WALL cells turned
    to FLOOR; re-carving an existing corridor returns 0.
    """
    (x1, y1) = a
    (x2, y2) = b
    if rng.coin():
        carved = carve_horizontal(grid, x1, x2, y1)
        carved += carve_vertical(grid, y1, y2, x2)
    else:
        carved = carve_vertical(grid, y1, y2, x1)
        carved += carve_horizontal(grid, x1, x2, y2)
    return carved


def carve_horizontal(grid: GridBuffer, x1: int, x2: int, y: int) -> int:
    lo, hi = (x1, x2) if x1 <= x2 else (x2, x1)
    carved = 0
    for x in range(lo, hi + 1):
        # clip silently; valid room centers never leave the grid
        if grid.in_bounds(x, y) and grid.set(x, y, FLOOR):
            carved += 1
    return carved


def carve_vertical(grid: GridBuffer, y1: int, y2: int, x: int) -> int:
    lo, hi = (y1, y2) if y1 <= y2 else (y2, y1)
    carved = 0
    for y in range(lo, hi + 1):
        if grid.in_bounds(x, y) and grid.set(x, y, FLOOR):
            carved += 1
    return carved


__all__ = ["carve_corridor", "carve_horizontal", "carve_vertical"]
