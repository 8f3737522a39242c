"""
project: Roomcarver
module: __init__.py
License: MIT

Flask application factory.

The map view calls into this service to (re)generate dungeons. Configuration
is sourced from environment variables (optionally via a local `.env`) and may
be overridden per app instance, which is how tests pin sizes and seeds.
"""

import logging
import os
import uuid

from dotenv import load_dotenv
from flask import Flask, jsonify

__version__ = "0.2.0"

# Keys copied from the environment into app.config; DungeonConfig.from_mapping reads them back.
DUNGEON_ENV_KEYS = (
    "DUNGEON_WIDTH",
    "DUNGEON_HEIGHT",
    "DUNGEON_ROOM_WIDTH",
    "DUNGEON_ROOM_HEIGHT",
    "DUNGEON_ROOM_COUNT",
    "DUNGEON_ATTEMPT_CAP",
    "DUNGEON_SEED",
    "DUNGEON_STRICT",
    "DUNGEON_ENABLE_GENERATION_METRICS",
)


def create_app(overrides=None):
    """Return a configured Flask app with the dungeon blueprints registered."""
    load_dotenv()
    app = Flask(__name__, instance_relative_config=True)
    try:
        os.makedirs(app.instance_path, exist_ok=True)
    except OSError:
        # read-only installs still serve requests; only file logging needs it
        pass

    for key in DUNGEON_ENV_KEYS:
        if key in os.environ:
            app.config[key] = os.environ[key]
    if overrides:
        app.config.update(overrides)

    from roomcarver.routes.config_api import bp_config
    from roomcarver.routes.dungeon_api import bp_dungeon

    app.register_blueprint(bp_dungeon)
    app.register_blueprint(bp_config)

    @app.route("/healthz")
    def healthz():
        return jsonify({"status": "ok", "version": __version__})

    @app.errorhandler(500)
    def internal_error(e):
        error_id = uuid.uuid4().hex[:8]
        logging.exception("Unhandled exception (id=%s)", error_id)
        return jsonify({"error": "internal server error", "error_id": error_id}), 500

    return app
