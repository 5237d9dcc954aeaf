"""
Game configuration and constants.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class GameConfig:
    """Configuration for game parameters."""

    # Table limits
    max_players: int = 6
    min_players: int = 2
    starting_coins: int = 2

    # Time limits
    objection_window_seconds: float = 5.0  # how long players may call bullshit or block

    # Game settings
    random_seed: Optional[int] = None  # Random seed for reproducible deck order
    log_level: str = "INFO"

    # Judge announcements
    use_judge_announcements: bool = True

    # Event recording
    record_events: bool = True
    runs_dir: str = "runs"


# Default configuration instance
default_config = GameConfig()
