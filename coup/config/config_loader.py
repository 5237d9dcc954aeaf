"""
Configuration loader for YAML-based game configurations.
"""

import logging
from dataclasses import replace
from pathlib import Path
from typing import Any, Optional, Union, get_args, get_origin, get_type_hints

import yaml

from .game_config import GameConfig, default_config

logger = logging.getLogger(__name__)


def _check_value(key: str, value: Any, expected: Any) -> Any:
    """
    Check a YAML value against a GameConfig field type.

    Integers are accepted for float fields; booleans never pass as numbers.
    """
    if get_origin(expected) is Union:
        options = get_args(expected)
        if value is None and type(None) in options:
            return None
        expected = next(t for t in options if t is not type(None))

    if expected is float and type(value) in (int, float):
        return float(value)
    if type(value) is expected:
        return value
    raise ValueError(
        f"Config key '{key}' must be {expected.__name__}, got {type(value).__name__} {value!r}"
    )


def load_config_from_yaml(config_path: str) -> GameConfig:
    """
    Load game configuration from a YAML file.

    Args:
        config_path: Path to the YAML configuration file

    Returns:
        GameConfig instance with values from YAML file

    Raises:
        FileNotFoundError: If the config file doesn't exist
        yaml.YAMLError: If the YAML file is invalid
        ValueError: If a value does not match the field's type
    """
    config_file = Path(config_path)

    if not config_file.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_file, 'r') as f:
        config_dict = yaml.safe_load(f)

    if config_dict is None:
        return replace(default_config)
    if not isinstance(config_dict, dict):
        raise ValueError(f"Config file {config_path} must hold a mapping of settings")

    # Create config from dict, using defaults for missing values
    config = GameConfig()
    field_types = get_type_hints(GameConfig)

    for key, value in config_dict.items():
        if key in field_types:
            setattr(config, key, _check_value(key, value, field_types[key]))
        else:
            # Warn about unknown keys but don't fail
            logger.warning("Unknown config key '%s' in %s", key, config_path)

    return config


def load_config(config_path: Optional[str] = None) -> GameConfig:
    """
    Load configuration from YAML file or return default.

    Args:
        config_path: Optional path to YAML config file. If None, returns default config.

    Returns:
        GameConfig instance
    """
    if config_path is None:
        return replace(default_config)

    return load_config_from_yaml(config_path)
