import pytest

from roomcarver.dungeon import DungeonConfig, DungeonConfigError, DungeonGenerator


def test_defaults_match_reference():
    cfg = DungeonConfig()
    assert (cfg.width, cfg.height) == (64, 64)
    assert cfg.room_width_range == (4, 12)
    assert cfg.room_height_range == (2, 10)
    assert cfg.attempt_cap == 200
    assert cfg.validate() is cfg


@pytest.mark.parametrize(
    "kwargs",
    [
        {"width": 0},
        {"height": -4},
        {"room_width_range": (5, 4)},
        {"room_height_range": (0, 3)},
        {"attempt_cap": -1},
    ],
)
def test_malformed_config_rejected(kwargs):
    with pytest.raises(DungeonConfigError):
        DungeonConfig(**kwargs).validate()


def test_generator_validates_on_entry():
    with pytest.raises(DungeonConfigError):
        DungeonGenerator(DungeonConfig(width=0))


def test_small_grid_only_rejected_in_strict_mode():
    DungeonConfig(width=3).validate()
    with pytest.raises(DungeonConfigError, match="room bounds exceed grid size"):
        DungeonConfig(width=3, strict=True).validate()
    # 4 wide room + 2 low margin + 3 high margin fits exactly
    DungeonConfig(width=9, height=7, strict=True).validate()


def test_from_mapping_reads_env_style_strings():
    cfg = DungeonConfig.from_mapping(
        {
            "DUNGEON_WIDTH": "48",
            "DUNGEON_HEIGHT": "32",
            "DUNGEON_ROOM_WIDTH": "3,8",
            "DUNGEON_ROOM_HEIGHT": "2-6",
            "DUNGEON_ROOM_COUNT": "12",
            "DUNGEON_ATTEMPT_CAP": "500",
            "DUNGEON_SEED": "99",
            "DUNGEON_STRICT": "yes",
            "DUNGEON_ENABLE_GENERATION_METRICS": "0",
        }
    )
    assert (cfg.width, cfg.height) == (48, 32)
    assert cfg.room_width_range == (3, 8)
    assert cfg.room_height_range == (2, 6)
    assert cfg.room_count == 12
    assert cfg.attempt_cap == 500
    assert cfg.seed == 99
    assert cfg.strict is True
    assert cfg.enable_metrics is False


def test_from_mapping_accepts_typed_values_and_defaults():
    cfg = DungeonConfig.from_mapping({"DUNGEON_ROOM_WIDTH": (5, 9), "DUNGEON_STRICT": False, "OTHER": "x"})
    assert cfg.room_width_range == (5, 9)
    assert cfg.strict is False
    assert cfg.width == 64


def test_from_mapping_reads_environment(monkeypatch):
    import os

    monkeypatch.setenv("DUNGEON_ROOM_COUNT", "7")
    assert DungeonConfig.from_mapping(os.environ).room_count == 7


@pytest.mark.parametrize(
    "mapping",
    [{"DUNGEON_WIDTH": "wide"}, {"DUNGEON_ROOM_WIDTH": "4"}, {"DUNGEON_ROOM_HEIGHT": "2,x"}],
)
def test_from_mapping_rejects_garbage(mapping):
    with pytest.raises(DungeonConfigError):
        DungeonConfig.from_mapping(mapping)


def test_to_dict_uses_lists():
    data = DungeonConfig(seed=3).to_dict()
    assert data["room_width_range"] == [4, 12]
    assert data["seed"] == 3


def test_negative_range_bounds_keep_their_sign():
    cfg = DungeonConfig.from_mapping({"DUNGEON_ROOM_WIDTH": "-1,5", "DUNGEON_ROOM_HEIGHT": " 3 - 7 "})
    assert cfg.room_width_range == (-1, 5)
    assert cfg.room_height_range == (3, 7)
    with pytest.raises(DungeonConfigError, match="room_width_range minimum must be at least 1"):
        cfg.validate()
