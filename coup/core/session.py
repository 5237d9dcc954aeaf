"""
The shared game session: one GameState behind one lock.
"""

from contextlib import contextmanager
from threading import Lock
from typing import Iterator

from .game_engine import GameState


class GameSession:
    """
    Exclusive owner of a GameState.

    Every read or write happens inside ``with session.access() as state:``.
    Never keep the yielded state past the block, and never wait while
    holding it.
    """

    def __init__(self, state: GameState):
        self._state = state
        self._lock = Lock()

    @contextmanager
    def access(self) -> Iterator[GameState]:
        """Hold the session lock for the duration of the block."""
        with self._lock:
            yield self._state

    @property
    def locked(self) -> bool:
        """Check if some thread is inside access()."""
        return self._lock.locked()
