from __future__ import annotations

from typing import Iterator, List, Tuple

from .tiles import WALL, Tile

Coord2D = Tuple[int, int]


class GridFrozenError(RuntimeError):
    """Raised when a finished grid is written to."""


class GridBuffer:
    """Fixed-size tile buffer; rows[y][x], every cell WALL or FLOOR.

    Generation stages receive the buffer and mutate it in place. ``freeze()``
    marks the hand-off to the caller, after which writes raise.
    """

    __slots__ = ("width", "height", "_rows", "_frozen")

    def __init__(self, width: int, height: int, fill: Tile = WALL):
        if width <= 0 or height <= 0:
            raise ValueError(f"grid dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self._rows: List[List[Tile]] = [[Tile(fill) for _ in range(width)] for _ in range(height)]
        self._frozen = False

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> Tile:
        if not self.in_bounds(x, y):
            raise IndexError(f"({x}, {y}) outside {self.width}x{self.height} grid")
        return self._rows[y][x]

    def set(self, x: int, y: int, tile: Tile) -> bool:
        """Write ``tile`` at (x, y); returns True when the cell value changed."""
        if self._frozen:
            raise GridFrozenError("grid is frozen; generation already handed it off")
        if not self.in_bounds(x, y):
            raise IndexError(f"({x}, {y}) outside {self.width}x{self.height} grid")
        tile = Tile(tile)
        row = self._rows[y]
        if row[x] is tile:
            return False
        row[x] = tile
        return True

    def fill_rect(self, x: int, y: int, w: int, h: int, tile: Tile) -> int:
        changed = 0
        for yy in range(y, y + h):
            for xx in range(x, x + w):
                if self.set(xx, yy, tile):
                    changed += 1
        return changed

    def count(self, tile: Tile) -> int:
        return sum(row.count(tile) for row in self._rows)

    def cells(self) -> Iterator[Tuple[int, int, Tile]]:
        for y, row in enumerate(self._rows):
            for x, tile in enumerate(row):
                yield x, y, tile

    def rows(self) -> Tuple[Tuple[Tile, ...], ...]:
        return tuple(tuple(row) for row in self._rows)

    def to_rows(self) -> List[List[int]]:
        return [[int(t) for t in row] for row in self._rows]

    def freeze(self) -> "GridBuffer":
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def __eq__(self, other):
        if not isinstance(other, GridBuffer):
            return NotImplemented
        return self.width == other.width and self.height == other.height and self._rows == other._rows

    def __repr__(self):
        return f"GridBuffer({self.width}x{self.height}, frozen={self._frozen})"


__all__ = ["GridBuffer", "GridFrozenError", "Coord2D"]
