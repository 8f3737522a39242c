"""Room connection: incremental nearest-neighbor spanning tree.

Prim-style growth over room centers with Manhattan distance. Each step joins
the closest (connected, unconnected) pair with one L-shaped corridor, so the
finished layout has exactly ``len(rooms) - 1`` corridors and every room is
reachable from room 0.
"""
from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Set, Tuple

from .grid import GridBuffer
from .random_source import RandomSource
from .rooms import Room
from .tunnels import carve_corridor

Coord2D = Tuple[int, int]
Edge = Tuple[int, int]


def manhattan(a: Coord2D, b: Coord2D) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


class ConnectionState:
    """Spanning-tree build state: centers by room index, connected set, chosen edges.

    ``order`` keeps connected indices in the order they joined; the pair scan
    walks it first-to-last and unconnected rooms by ascending index, keeping the
    first strict minimum. That is the whole tie-break rule.
    """

    def __init__(self, rooms: Sequence[Room]):
        self.centers: Dict[int, Coord2D] = {i: r.center for i, r in enumerate(rooms)}
        self.order: List[int] = []
        self.connected: Set[int] = set()
        self.edges: List[Edge] = []
        if self.centers:
            self._mark(0)

    def _mark(self, idx: int) -> None:
        self.connected.add(idx)
        self.order.append(idx)

    @property
    def complete(self) -> bool:
        return len(self.connected) >= len(self.centers)

    def nearest_pair(self) -> Optional[Edge]:
        best: Optional[Edge] = None
        best_dist = None
        for a in self.order:
            ca = self.centers[a]
            for b in range(len(self.centers)):
                if b in self.connected:
                    continue
                d = manhattan(ca, self.centers[b])
                if best_dist is None or d < best_dist:
                    best_dist = d
                    best = (a, b)
        return best

    def connect(self, edge: Edge) -> None:
        a, b = edge
        if a not in self.connected or b in self.connected:
            raise ValueError(f"edge {edge} must join a connected room to an unconnected one")
        self.edges.append(edge)
        self._mark(b)


def connect_rooms(
    grid: GridBuffer,
    rooms: Sequence[Room],
    rng: RandomSource,
    metrics: Optional[Dict] = None,
) -> List[Edge]:
    """Carve corridors until every room is reachable from ``rooms[0]``.

    Returns the spanning-tree edges as (connected_index, new_index) pairs in
    carving order. Empty input is a no-op.
    """
    if not rooms:
        return []
    state = ConnectionState(rooms)
    tiles = 0
    while not state.complete:
        edge = state.nearest_pair()
        if edge is None:
            break
        a, b = edge
        tiles += carve_corridor(grid, state.centers[a], state.centers[b], rng)
        state.connect(edge)
    if metrics is not None:
        metrics['corridors_carved'] = metrics.get('corridors_carved', 0) + len(state.edges)
        metrics['corridor_tiles_carved'] = metrics.get('corridor_tiles_carved', 0) + tiles
    return state.edges


__all__ = ["ConnectionState", "connect_rooms", "manhattan"]
