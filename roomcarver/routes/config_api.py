"""
project: Roomcarver
module: config_api.py
License: MIT

Generation configuration endpoint for the map view (grid size, room size
bounds and the room-count slider range).
"""
from flask import Blueprint, current_app, jsonify

from roomcarver.dungeon import ROOM_COUNT_MAX, ROOM_COUNT_MIN, DungeonConfig, DungeonConfigError

bp_config = Blueprint('config', __name__)


@bp_config.route('/api/dungeon/config')
def get_dungeon_config():
    try:
        config = DungeonConfig.from_mapping(current_app.config).validate()
    except DungeonConfigError as e:
        return jsonify({'error': str(e)}), 400
    return jsonify({
        'config': config.to_dict(),
        'room_count_bounds': {'min': ROOM_COUNT_MIN, 'max': ROOM_COUNT_MAX},
    })
