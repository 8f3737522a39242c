from __future__ import annotations

import re
from dataclasses import asdict, dataclass
from typing import Any, Mapping, Optional, Tuple

# Rooms keep this many cells clear of the low (x=0 / y=0) and high grid edges so
# corridors between centers never run off the map.
ROOM_MARGIN_LOW = 2
ROOM_MARGIN_HIGH = 3
# Gap enforced between rooms on their max edges (one WALL cell of separation).
OVERLAP_BUFFER = 1

# Room count bounds offered by the map view's slider.
ROOM_COUNT_MIN = 2
ROOM_COUNT_MAX = 25

_TRUTHY = {"1", "true", "yes", "on"}
# "min,max" or "min-max"; either bound may carry its own sign.
_RANGE_RE = re.compile(r"\s*(-?\d+)\s*[,-]\s*(-?\d+)\s*")


class DungeonConfigError(ValueError):
    """Raised when generation settings cannot describe a valid dungeon."""


@dataclass
class DungeonConfig:
    width: int = 64
    height: int = 64
    room_width_range: Tuple[int, int] = (4, 12)
    room_height_range: Tuple[int, int] = (2, 10)
    room_count: int = 10
    attempt_cap: int = 200
    seed: Optional[int] = None
    strict: bool = False
    enable_metrics: bool = True

    def validate(self) -> "DungeonConfig":
        """Check structural sanity; returns self so calls can be chained.

        A grid too small for the minimum room is only rejected in strict mode;
        otherwise placement simply never succeeds and yields an empty dungeon.
        """
        if self.width <= 0 or self.height <= 0:
            raise DungeonConfigError(f"grid dimensions must be positive, got {self.width}x{self.height}")
        for label, (lo, hi) in (("room_width_range", self.room_width_range), ("room_height_range", self.room_height_range)):
            if lo < 1:
                raise DungeonConfigError(f"{label} minimum must be at least 1, got {lo}")
            if lo > hi:
                raise DungeonConfigError(f"{label} minimum {lo} exceeds maximum {hi}")
        if self.attempt_cap < 0:
            raise DungeonConfigError(f"attempt_cap must not be negative, got {self.attempt_cap}")
        if self.strict and not self.fits_min_room():
            raise DungeonConfigError(
                "room bounds exceed grid size: a %dx%d room needs at least a %dx%d grid"
                % (
                    self.room_width_range[0],
                    self.room_height_range[0],
                    self.room_width_range[0] + ROOM_MARGIN_LOW + ROOM_MARGIN_HIGH,
                    self.room_height_range[0] + ROOM_MARGIN_LOW + ROOM_MARGIN_HIGH,
                )
            )
        return self

    def fits_min_room(self) -> bool:
        usable_w = self.width - ROOM_MARGIN_LOW - ROOM_MARGIN_HIGH
        usable_h = self.height - ROOM_MARGIN_LOW - ROOM_MARGIN_HIGH
        return usable_w >= self.room_width_range[0] and usable_h >= self.room_height_range[0]

    def to_dict(self) -> dict:
        data = asdict(self)
        data["room_width_range"] = list(self.room_width_range)
        data["room_height_range"] = list(self.room_height_range)
        return data

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "DungeonConfig":
        """Build a config from ``DUNGEON_*`` keys (``os.environ`` or a Flask config).

        Missing keys keep their defaults. Values may already be typed (Flask
        config) or raw strings (environment).
        """
        cfg = cls()
        int_keys = {
            "DUNGEON_WIDTH": "width",
            "DUNGEON_HEIGHT": "height",
            "DUNGEON_ROOM_COUNT": "room_count",
            "DUNGEON_ATTEMPT_CAP": "attempt_cap",
            "DUNGEON_SEED": "seed",
        }
        for key, attr in int_keys.items():
            raw = mapping.get(key)
            if raw is None or raw == "":
                continue
            setattr(cfg, attr, _parse_int(key, raw))
        range_keys = {"DUNGEON_ROOM_WIDTH": "room_width_range", "DUNGEON_ROOM_HEIGHT": "room_height_range"}
        for key, attr in range_keys.items():
            raw = mapping.get(key)
            if raw is None or raw == "":
                continue
            setattr(cfg, attr, _parse_range(key, raw))
        bool_keys = {"DUNGEON_STRICT": "strict", "DUNGEON_ENABLE_GENERATION_METRICS": "enable_metrics"}
        for key, attr in bool_keys.items():
            if key in mapping:
                setattr(cfg, attr, _parse_bool(mapping.get(key)))
        return cfg


def _parse_int(key: str, raw: Any) -> int:
    try:
        return int(raw)
    except (TypeError, ValueError) as exc:
        raise DungeonConfigError(f"{key} must be an integer, got {raw!r}") from exc


def _parse_range(key: str, raw: Any) -> Tuple[int, int]:
    if isinstance(raw, (tuple, list)):
        parts = list(raw)
    else:
        m = _RANGE_RE.fullmatch(str(raw))
        parts = list(m.groups()) if m else []
    if len(parts) != 2:
        raise DungeonConfigError(f"{key} must be 'min,max', got {raw!r}")
    return (_parse_int(key, parts[0]), _parse_int(key, parts[1]))


def _parse_bool(raw: Any) -> bool:
    if isinstance(raw, bool):
        return raw
    return str(raw).strip().lower() in _TRUTHY


__all__ = [
    "DungeonConfig",
    "DungeonConfigError",
    "ROOM_MARGIN_LOW",
    "ROOM_MARGIN_HIGH",
    "OVERLAP_BUFFER",
    "ROOM_COUNT_MIN",
    "ROOM_COUNT_MAX",
]
