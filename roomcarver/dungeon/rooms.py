from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple

from ..logging_utils import get_logger
from .config import OVERLAP_BUFFER, ROOM_MARGIN_HIGH, ROOM_MARGIN_LOW, DungeonConfig
from .grid import GridBuffer
from .random_source import RandomSource
from .tiles import FLOOR

log = get_logger("roomcarver.dungeon.rooms")


@dataclass(frozen=True)
class Room:
    x: int
    y: int
    width: int
    height: int

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"room size must be positive, got {self.width}x{self.height}")

    def cells(self) -> Iterator[Tuple[int, int]]:
        for ix in range(self.x, self.x + self.width):
            for iy in range(self.y, self.y + self.height):
                yield ix, iy

    @property
    def center(self) -> Tuple[int, int]:
        return (self.x + self.width // 2, self.y + self.height // 2)

    @property
    def area(self) -> int:
        return self.width * self.height

    def contains(self, x: int, y: int) -> bool:
        return self.x <= x < self.x + self.width and self.y <= y < self.y + self.height

    def overlaps(self, other: "Room", buffer: int = OVERLAP_BUFFER) -> bool:
        """True when the two rooms, each grown by ``buffer`` on the max edges, intersect."""
        return not (
            self.x + self.width + buffer <= other.x
            or other.x + other.width + buffer <= self.x
            or self.y + self.height + buffer <= other.y
            or other.y + other.height + buffer <= self.y
        )

    def to_dict(self) -> Dict[str, int]:
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}


def place_rooms(
    grid: GridBuffer,
    target_count: int,
    config: DungeonConfig,
    rng: RandomSource,
    metrics: Optional[Dict] = None,
) -> List[Room]:
    """Scatter up to ``target_count`` non-overlapping rooms onto the grid.

    Rejection sampling bounded by ``config.attempt_cap``; returning fewer rooms
    than requested is the normal outcome on crowded or tiny grids. Accepted
    rooms are carved as FLOOR immediately.
    """
    rooms: List[Room] = []
    attempts = 0
    rejected = 0
    w_min, w_max = config.room_width_range
    h_min, h_max = config.room_height_range
    while len(rooms) < target_count and attempts < config.attempt_cap:
        attempts += 1
        w = rng.randint(w_min, w_max)
        h = rng.randint(h_min, h_max)
        x_max = grid.width - w - ROOM_MARGIN_HIGH
        y_max = grid.height - h - ROOM_MARGIN_HIGH
        if x_max < ROOM_MARGIN_LOW or y_max < ROOM_MARGIN_LOW:
            # no position keeps this size inside the margins
            rejected += 1
            continue
        x = rng.randint(ROOM_MARGIN_LOW, x_max)
        y = rng.randint(ROOM_MARGIN_LOW, y_max)
        candidate = Room(x, y, w, h)
        if any(r.overlaps(candidate) for r in rooms):
            rejected += 1
            continue
        grid.fill_rect(x, y, w, h, FLOOR)
        rooms.append(candidate)
    if len(rooms) < target_count:
        log.debug(event="room_placement_exhausted", requested=target_count, placed=len(rooms), attempts=attempts)
    if metrics is not None:
        metrics['placement_attempts'] = metrics.get('placement_attempts', 0) + attempts
        metrics['rooms_rejected'] = metrics.get('rooms_rejected', 0) + rejected
        metrics['rooms_placed'] = metrics.get('rooms_placed', 0) + len(rooms)
    return rooms


__all__ = ["Room", "place_rooms"]
