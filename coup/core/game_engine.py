"""
Core game engine: seats, deck, turn order and the current round.
"""

import logging
from typing import List, Optional, Dict, Any, TYPE_CHECKING
from dataclasses import dataclass, field

from .deck import Deck
from .exceptions import (
    AlreadyStarted,
    AlreadyJoined,
    SeatsFull,
    DeckExhausted,
    NotEnoughPlayers,
    NotStarted,
)
from .judge import Judge
from .player import Player
from .roles import Card
from .round_state import RoundState
from ..config.game_config import GameConfig, default_config

if TYPE_CHECKING:
    from ..recording.event_emitter import EventEmitter

logger = logging.getLogger(__name__)


@dataclass
class GameState:
    """
    Complete game state for one table.

    Not thread safe: reach it only through GameSession.access().
    """
    config: GameConfig = field(default_factory=lambda: default_config)
    judge: Optional[Judge] = None
    players: List[Player] = field(default_factory=list)
    deck: Optional[Deck] = None
    started: bool = False
    turn: int = 0
    generation: int = 0  # bumped every time the turn advances
    round: RoundState = field(default_factory=RoundState)

    # Event emitter for structured recording (optional)
    event_emitter: Optional['EventEmitter'] = None

    def __post_init__(self):
        """Build and shuffle the deck."""
        if self.deck is None:
            self.deck = Deck(random_seed=self.config.random_seed)
        if self.judge is None:
            self.judge = Judge(config=self.config, event_emitter=self.event_emitter)

    def find_player(self, identity: str) -> Optional[Player]:
        """Get player by identity."""
        for player in self.players:
            if player.identity == identity:
                return player
        return None

    def current_player(self) -> Player:
        """
        Get the player whose turn it is.

        Raises:
            NotStarted: If the game has not started
        """
        if not self.started:
            raise NotStarted()
        return self.players[self.turn]

    def join(self, identity: str) -> Player:
        """
        Seat a new player and deal them two cards.

        Raises:
            AlreadyStarted, AlreadyJoined, SeatsFull, DeckExhausted
        """
        if self.started:
            raise AlreadyStarted()
        if self.find_player(identity):
            raise AlreadyJoined(identity)
        if len(self.players) >= self.config.max_players:
            raise SeatsFull()
        # Check before drawing so a failed join leaves the deck untouched
        if len(self.deck) < 2:
            raise DeckExhausted(f"Not enough cards left to seat {identity}")

        cards = [Card(self.deck.draw()), Card(self.deck.draw())]
        player = Player(identity=identity, cards=cards, coins=self.config.starting_coins)
        self.players.append(player)
        logger.info("%s joined (seat %d, deck %d)", identity, len(self.players), len(self.deck))

        self.judge.whisper(identity, f"Your cards are: {player.reveal()}")
        self.judge.announce(f"{identity} has joined the game ({len(self.players)} seated)")
        if self.event_emitter:
            self.event_emitter.emit_join(identity, len(self.players) - 1, len(self.deck))
        return player

    def start(self) -> Player:
        """
        Start the game. The first player to join moves first.

        Raises:
            AlreadyStarted, NotEnoughPlayers
        """
        if self.started:
            raise AlreadyStarted()
        if len(self.players) < self.config.min_players:
            raise NotEnoughPlayers(len(self.players), self.config.min_players)

        self.started = True
        self.turn = 0
        logger.info("Game started with %d players", len(self.players))

        if self.event_emitter:
            self.event_emitter.emit_game_start([p.identity for p in self.players])
        self.judge.announce("Starting the game!")
        self._announce_turn()
        return self.players[self.turn]

    def advance_turn(self) -> Player:
        """Pass the turn to the next seat and open a fresh round."""
        self.turn = (self.turn + 1) % len(self.players)
        self.generation += 1
        self.round = RoundState(generation=self.generation)
        self._announce_turn()
        return self.players[self.turn]

    def _announce_turn(self) -> None:
        player = self.players[self.turn]
        if self.event_emitter:
            self.event_emitter.emit_turn(player.identity, self.turn, self.generation)
        self.judge.announce(f"It's {player.identity}'s turn ({player.coins} coins)")

    def coin_balances(self) -> Dict[str, int]:
        """Map each identity to its coin balance."""
        return {p.identity: p.coins for p in self.players}

    def summary(self) -> Dict[str, Any]:
        """Get a summary of the current game state. Roles stay hidden."""
        pending = None
        if self.round.action is not None:
            pending = {
                "actor": self.round.actor,
                "action": str(self.round.action),
                "bullshit": self.round.bullshit,
                "counter": self.round.counter.claimant if self.round.counter else None,
                "awaiting_adjudication": self.round.awaiting_adjudication,
            }
        return {
            "started": self.started,
            "turn": self.players[self.turn].identity if self.started else None,
            "deck": len(self.deck),
            "players": [p.get_public_info() for p in self.players],
            "pending": pending,
        }
