"""
project: Roomcarver
module: dungeon_api.py
License: MIT

Dungeon generation API routes.

The map view's "Generate" button and room-count slider both land on
`/api/dungeon/generate`; every call returns a brand new dungeon, nothing is
cached or stored between requests.
"""

from flask import Blueprint, current_app, jsonify, request

from roomcarver.dungeon import (
    ROOM_COUNT_MAX,
    ROOM_COUNT_MIN,
    DungeonConfig,
    DungeonConfigError,
    DungeonGenerator,
)
from roomcarver.logging_utils import get_logger

bp_dungeon = Blueprint("dungeon", __name__)
_log = get_logger("roomcarver.api")


def _int_arg(name: str):
    raw = request.args.get(name)
    if raw is None or raw == "":
        return None
    try:
        return int(raw)
    except ValueError:
        raise DungeonConfigError(f"query parameter '{name}' must be an integer, got {raw!r}")


def clamp_room_count(value: int) -> int:
    """Keep requests within the slider range the map view offers."""
    return max(ROOM_COUNT_MIN, min(ROOM_COUNT_MAX, value))


@bp_dungeon.route("/api/dungeon/generate")
def generate_dungeon():
    """
    Generate a fresh dungeon.
    Query: rooms (int, clamped to slider bounds), seed (int, optional)
    Response: { width, height, seed, grid: [[0|1,...],...], rooms, corridors, metrics? }
    """
    try:
        config = DungeonConfig.from_mapping(current_app.config)
        rooms = _int_arg("rooms")
        seed = _int_arg("seed")
        if seed is not None:
            config.seed = seed
        room_count = clamp_room_count(config.room_count if rooms is None else rooms)
        result = DungeonGenerator(config).generate(room_count)
    except DungeonConfigError as e:
        _log.warn(event="dungeon_generate_rejected", error=str(e))
        return jsonify({"error": str(e)}), 400
    return jsonify(result.to_dict())
