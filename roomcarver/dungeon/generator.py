"""Generation pass: empty grid -> rooms -> spanning-tree corridors.

One call runs to completion and hands back a frozen grid; nothing is shared
between calls, so regenerating means calling again and replacing the result.
"""
from __future__ import annotations

import time
from typing import Any, Dict, List, NamedTuple, Optional, Tuple

from ..logging_utils import get_logger
from .config import DungeonConfig
from .connectivity import connect_rooms
from .grid import GridBuffer
from .metrics import init_metrics
from .random_source import RandomSource
from .rooms import Room, place_rooms
from .tiles import FLOOR, WALL

log = get_logger("roomcarver.dungeon")


class DungeonResult(NamedTuple):
    grid: GridBuffer
    rooms: List[Room]
    corridors: List[Tuple[int, int]]
    metrics: Dict[str, Any]
    seed: Optional[int]

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "width": self.grid.width,
            "height": self.grid.height,
            "seed": self.seed,
            "grid": self.grid.to_rows(),
            "rooms": [r.to_dict() for r in self.rooms],
            "corridors": [list(e) for e in self.corridors],
        }
        if self.metrics:
            data["metrics"] = self.metrics
        return data


class DungeonGenerator:
    """Builds dungeons for one configuration.

    ``rng`` wins over ``config.seed``; with neither, each generator draws a
    fresh seed. The first pass runs on the source itself; later passes on a
    seedable source each run on a child seed drawn from it, so every result
    carries the seed that reproduces it. Unseeded (scripted) sources report None.
    """

    def __init__(self, config: DungeonConfig | None = None, rng: RandomSource | None = None):
        self.config = (config or DungeonConfig()).validate()
        if rng is None:
            rng = RandomSource(self.config.seed)
        self.rng = rng
        self._passes = 0

    def _pass_source(self) -> RandomSource:
        self._passes += 1
        if self._passes == 1 or getattr(self.rng, "seed", None) is None:
            return self.rng
        return RandomSource(self.rng.randint(0, 2**31 - 1))

    def generate(self, room_count: int | None = None) -> DungeonResult:
        cfg = self.config
        target = cfg.room_count if room_count is None else room_count
        metrics: Dict[str, Any] = init_metrics() if cfg.enable_metrics else {}
        phase_times: Dict[str, int] = {}
        start = time.perf_counter()

        def _phase(label, fn, *a, **k):
            ps = time.perf_counter()
            r = fn(*a, **k)
            phase_times[label] = int((time.perf_counter() - ps) * 1000)
            return r

        rng = self._pass_source()
        grid = GridBuffer(cfg.width, cfg.height, WALL)
        rooms = _phase('place_rooms', place_rooms, grid, target, cfg, rng, metrics if cfg.enable_metrics else None)
        corridors = _phase('connect_rooms', connect_rooms, grid, rooms, rng, metrics if cfg.enable_metrics else None)
        grid.freeze()

        seed = getattr(rng, "seed", None)
        if cfg.enable_metrics:
            metrics['rooms_requested'] = target
            metrics['tiles_floor'] = grid.count(FLOOR)
            metrics['tiles_wall'] = grid.count(WALL)
            metrics['runtime_ms'] = int((time.perf_counter() - start) * 1000)
            metrics['phase_ms'] = phase_times
        pass_log = log.bind(seed=seed)
        if len(rooms) < target:
            pass_log.warn(event="dungeon_degraded", requested=target, placed=len(rooms))
        pass_log.info(
            event="dungeon_generated",
            width=cfg.width,
            height=cfg.height,
            rooms=len(rooms),
            corridors=len(corridors),
        )
        return DungeonResult(grid, rooms, corridors, metrics, seed)


def generate(
    room_count: int | None = None,
    config: DungeonConfig | None = None,
    rng: RandomSource | None = None,
) -> DungeonResult:
    """One-shot helper: ``generate(10).grid`` / ``grid, rooms, *_ = generate(10)``."""
    return DungeonGenerator(config, rng).generate(room_count)


__all__ = ["DungeonGenerator", "DungeonResult", "generate"]
