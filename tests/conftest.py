"""
Pytest fixtures for Coup engine tests.
"""

import pytest
from typing import Any, Callable, List, Tuple

from coup.config.game_config import GameConfig
from coup.core import GameState, GameSession, Judge
from coup.phases import ActionResolver, LobbyHandler, Scheduler
from coup.transport import RecordingChannel


class ManualScheduler(Scheduler):
    """Collects deferred callbacks so tests decide when windows close."""

    def __init__(self):
        self.pending: List[Tuple[float, Callable[..., Any], tuple]] = []

    def call_later(self, delay: float, callback: Callable[..., Any], *args: Any) -> None:
        self.pending.append((delay, callback, args))

    def fire_all(self) -> None:
        """Run every collected callback, oldest first."""
        pending, self.pending = self.pending, []
        for _, callback, args in pending:
            callback(*args)


@pytest.fixture
def game_config():
    """Test game configuration with a fixed deck order."""
    return GameConfig(random_seed=42, record_events=False)


@pytest.fixture
def channel():
    """Channel that keeps every message."""
    return RecordingChannel()


@pytest.fixture
def scheduler():
    """Scheduler whose windows only close on fire_all()."""
    return ManualScheduler()


@pytest.fixture
def game_state(game_config, channel):
    """Create a fresh game state with nobody seated."""
    return GameState(config=game_config, judge=Judge(channel, game_config))


@pytest.fixture
def session(game_state):
    return GameSession(game_state)


@pytest.fixture
def lobby(session):
    return LobbyHandler(session)


@pytest.fixture
def resolver(session, scheduler):
    return ActionResolver(session, scheduler)


@pytest.fixture
def two_player_game(game_state, lobby):
    """Alice and Bob seated, game started, Alice to act."""
    lobby.join("alice")
    lobby.join("bob")
    lobby.start("alice")
    return game_state


@pytest.fixture
def three_player_game(game_state, lobby):
    """Alice, Bob and Carol seated, game started, Alice to act."""
    for identity in ("alice", "bob", "carol"):
        lobby.join(identity)
    lobby.start("alice")
    return game_state
