"""
project: Roomcarver
module: server.py
License: MIT

Server bootstrap: logging setup and the development server entry point.
"""

import logging
import os
from logging.handlers import RotatingFileHandler

from roomcarver import create_app


def start_server(host="0.0.0.0", port=5000, debug: bool = False):  # pragma: no cover (runtime only)
    """Configure logging and run the Flask server.

    When debug=True, Flask's debugger and reloader provide verbose tracebacks.
    """
    app = create_app()
    _configure_logging(app.instance_path)
    logging.getLogger(__name__).info("Starting dungeon server on %s:%s", host, port)
    app.run(host=host, port=port, debug=debug)


def _configure_logging(log_dir):
    """Configure logging to both console and a rotating file in ``log_dir``.

    The file is ``app.log``; a few backups are retained to bound growth.
    """
    try:
        os.makedirs(log_dir, exist_ok=True)
    except OSError:
        pass
    log_path = os.path.join(log_dir, "app.log")

    root = logging.getLogger()
    root.setLevel(logging.INFO)

    file_handler = RotatingFileHandler(log_path, maxBytes=1_000_000, backupCount=3)
    file_handler.setLevel(logging.INFO)
    file_handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))

    console = logging.StreamHandler()
    console.setLevel(logging.INFO)
    console.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))

    # Avoid duplicate handlers if reconfigured
    for h in list(root.handlers):
        root.removeHandler(h)

    root.addHandler(file_handler)
    root.addHandler(console)
    return log_path
