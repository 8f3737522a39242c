"""Structured event logging for generation and API code.

Each call prints one line: ``level=<lvl> ts=<epoch> key=value ...`` or, with
``ROOMCARVER_LOG_JSON`` set, a compact JSON object. Errors go to stderr,
everything else to stdout. ``ROOMCARVER_LOG_LEVEL`` (debug/info/warn/error)
sets the threshold.

    log = get_logger("roomcarver.dungeon")
    log.info(event="dungeon_generated", rooms=8)
    log.bind(seed=42).warn(event="dungeon_degraded", placed=3)

Fields whose value is None are dropped.
"""

from __future__ import annotations

import json
import os
import sys
import time
from typing import Any, Dict, Optional

LEVELS = {"debug": 10, "info": 20, "warn": 30, "error": 40}
CURRENT_LEVEL = LEVELS.get(os.getenv("ROOMCARVER_LOG_LEVEL", "info").lower(), LEVELS["info"])
JSON_MODE = os.getenv("ROOMCARVER_LOG_JSON", "0").lower() in ("1", "true", "yes", "on")


def _kv_value(value: Any) -> str:
    if isinstance(value, (int, float)):
        return str(value)
    return str(value).replace(" ", "_")


def render(level: str, fields: Dict[str, Any]) -> str:
    present = {k: v for k, v in fields.items() if v is not None}
    ts = int(time.time())
    if JSON_MODE:
        return json.dumps({**present, "level": level, "ts": ts}, separators=(",", ":"), default=str)
    body = " ".join(f"{k}={_kv_value(v)}" for k, v in present.items())
    head = f"level={level} ts={ts}"
    return f"{head} {body}" if body else head


class EventLogger:
    """Named logger carrying optional bound context fields."""

    def __init__(self, name: str, context: Optional[Dict[str, Any]] = None):
        self.name = name
        self.context = dict(context or {})

    def bind(self, **fields) -> "EventLogger":
        return EventLogger(self.name, {**self.context, **fields})

    def emit(self, level: str, **fields) -> None:
        if LEVELS[level] < CURRENT_LEVEL:
            return
        record = {**self.context, **fields}
        record.setdefault("logger", self.name)
        stream = sys.stderr if level == "error" else sys.stdout
        print(render(level, record), file=stream)

    def debug(self, **fields):
        self.emit("debug", **fields)

    def info(self, **fields):
        self.emit("info", **fields)

    def warn(self, **fields):
        self.emit("warn", **fields)

    def error(self, **fields):
        self.emit("error", **fields)


_registry: Dict[str, EventLogger] = {}


def get_logger(name: str) -> EventLogger:
    return _registry.setdefault(name, EventLogger(name))
