"""
Core game engine components: deck, players, rounds, and the shared session.
"""

from .game_engine import GameState
from .player import Player
from .roles import Role, Card, CardStatus, Action, ActionKind, get_role_distribution
from .deck import Deck
from .round_state import RoundState, CounterClaim
from .session import GameSession
from .judge import Judge
from .exceptions import CoupError

__all__ = [
    'GameState',
    'Player',
    'Role',
    'Card',
    'CardStatus',
    'Action',
    'ActionKind',
    'get_role_distribution',
    'Deck',
    'RoundState',
    'CounterClaim',
    'GameSession',
    'Judge',
    'CoupError',
]
