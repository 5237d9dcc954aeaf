"""
Tests for seating, starting and turn order.
"""

import pytest

from coup.config.game_config import GameConfig
from coup.core import GameState, Judge, RoundState
from coup.core.exceptions import (
    AlreadyStarted,
    AlreadyJoined,
    SeatsFull,
    DeckExhausted,
    NotEnoughPlayers,
    NotStarted,
)


def test_join_deals_two_cards(game_state, channel):
    """Test that each join takes two cards and starts with two coins."""
    alice = game_state.join("alice")
    assert len(game_state.deck) == 8

    bob = game_state.join("bob")
    assert len(game_state.deck) == 6

    for player in (alice, bob):
        assert len(player.cards) == 2
        assert all(card.is_alive for card in player.cards)
        assert player.coins == 2
    assert [p.identity for p in game_state.players] == ["alice", "bob"]


def test_join_discloses_cards_privately(game_state, channel):
    alice = game_state.join("alice")

    assert channel.whispers_to("alice") == [f"Your cards are: {alice.reveal()}"]
    assert all(alice.reveal() not in message for message in channel.public)


def test_duplicate_join_does_not_draw(game_state):
    game_state.join("alice")

    with pytest.raises(AlreadyJoined):
        game_state.join("alice")

    assert len(game_state.deck) == 8
    assert len(game_state.players) == 1


def test_join_after_start(two_player_game):
    with pytest.raises(AlreadyStarted):
        two_player_game.join("carol")
    assert len(two_player_game.players) == 2


def test_seats_full(channel):
    """Test the seat limit independently of deck size."""
    config = GameConfig(max_players=2, random_seed=1)
    state = GameState(config=config, judge=Judge(channel, config))
    state.join("alice")
    state.join("bob")

    with pytest.raises(SeatsFull):
        state.join("carol")
    assert len(state.deck) == 6


def test_sixth_player_exhausts_deck(game_state):
    """Test that running out of cards is a rejection, not a crash."""
    for identity in ("a", "b", "c", "d", "e"):
        game_state.join(identity)
    assert len(game_state.deck) == 0

    with pytest.raises(DeckExhausted):
        game_state.join("f")
    assert len(game_state.players) == 5


@pytest.mark.parametrize("seated", [0, 1])
def test_start_needs_two_players(game_state, seated):
    for i in range(seated):
        game_state.join(f"player{i}")

    with pytest.raises(NotEnoughPlayers):
        game_state.start()
    assert not game_state.started


def test_start(game_state, channel):
    game_state.join("alice")
    game_state.join("bob")

    first = game_state.start()

    assert game_state.started
    assert game_state.turn == 0
    assert first.identity == "alice"
    assert channel.last == "It's alice's turn (2 coins)"

    with pytest.raises(AlreadyStarted):
        game_state.start()


def test_turn_cycles(three_player_game):
    """Test the sequence 0,1,2,0,1,2 with one advance per round."""
    turns = [three_player_game.turn]
    for _ in range(5):
        three_player_game.advance_turn()
        turns.append(three_player_game.turn)

    assert turns == [0, 1, 2, 0, 1, 2]


def test_advance_replaces_round(two_player_game):
    old_round = two_player_game.round
    old_round.bullshit = "bob"

    two_player_game.advance_turn()

    assert two_player_game.round is not old_round
    assert two_player_game.round == RoundState(generation=1)
    assert two_player_game.generation == 1


def test_current_player_requires_start(game_state):
    game_state.join("alice")
    with pytest.raises(NotStarted):
        game_state.current_player()


def test_find_player(two_player_game):
    assert two_player_game.find_player("bob").identity == "bob"
    assert two_player_game.find_player("mallory") is None


def test_summary_hides_roles(two_player_game):
    summary = two_player_game.summary()

    assert summary["started"]
    assert summary["turn"] == "alice"
    assert summary["deck"] == 6
    assert summary["pending"] is None
    assert summary["players"][0] == {"identity": "alice", "coins": 2, "influence": 2, "dead": []}
