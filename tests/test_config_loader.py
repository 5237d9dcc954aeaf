"""
Tests for YAML configuration loading.
"""

import logging

import pytest
import yaml

from coup.config import GameConfig, default_config, load_config, load_config_from_yaml


def test_load_from_yaml(tmp_path):
    config_file = tmp_path / "table.yaml"
    config_file.write_text("objection_window_seconds: 1.5\nmax_players: 4\nrandom_seed: 9\n")

    config = load_config_from_yaml(str(config_file))

    assert config.objection_window_seconds == 1.5
    assert config.max_players == 4
    assert config.random_seed == 9
    assert config.starting_coins == 2


def test_unknown_key_warns(tmp_path, caplog):
    config_file = tmp_path / "table.yaml"
    config_file.write_text("max_players: 3\nbogus: true\n")

    with caplog.at_level(logging.WARNING):
        config = load_config_from_yaml(str(config_file))

    assert config.max_players == 3
    assert not hasattr(config, "bogus")
    assert "bogus" in caplog.text


def test_empty_file_gives_defaults(tmp_path):
    config_file = tmp_path / "empty.yaml"
    config_file.write_text("")

    assert load_config_from_yaml(str(config_file)) == GameConfig()


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config_from_yaml(str(tmp_path / "nope.yaml"))


def test_invalid_yaml(tmp_path):
    config_file = tmp_path / "broken.yaml"
    config_file.write_text("max_players: [1, 2\n")

    with pytest.raises(yaml.YAMLError):
        load_config_from_yaml(str(config_file))


def test_default_config_is_not_shared():
    """Test that tweaking a loaded config leaves the module default alone."""
    config = load_config()
    config.objection_window_seconds = 0.1

    assert config is not default_config
    assert default_config.objection_window_seconds == 5.0


def test_values_are_type_checked(tmp_path):
    """Test that a quoted number is refused instead of failing mid-game."""
    config_file = tmp_path / "table.yaml"
    config_file.write_text('objection_window_seconds: "5"\n')

    with pytest.raises(ValueError, match="objection_window_seconds"):
        load_config_from_yaml(str(config_file))


def test_typed_values(tmp_path):
    config_file = tmp_path / "table.yaml"
    config_file.write_text("objection_window_seconds: 3\nrandom_seed: null\nrecord_events: false\n")

    config = load_config_from_yaml(str(config_file))

    assert config.objection_window_seconds == 3.0
    assert isinstance(config.objection_window_seconds, float)
    assert config.random_seed is None
    assert config.record_events is False


@pytest.mark.parametrize("line", [
    "max_players: true",
    "use_judge_announcements: 1",
    "random_seed: 1.5",
    "log_level: 10",
])
def test_wrong_types_rejected(tmp_path, line):
    config_file = tmp_path / "table.yaml"
    config_file.write_text(line + "\n")

    with pytest.raises(ValueError):
        load_config_from_yaml(str(config_file))


def test_non_mapping_rejected(tmp_path):
    config_file = tmp_path / "table.yaml"
    config_file.write_text("- max_players\n- 4\n")

    with pytest.raises(ValueError, match="mapping"):
        load_config_from_yaml(str(config_file))
