"""
Tests for Judge announcements and private messages.
"""

import logging

from coup.config.game_config import GameConfig
from coup.core import Judge
from coup.recording import EventEmitter
from coup.transport import Channel, RecordingChannel


class BrokenChannel(Channel):
    """A transport that has lost its connection."""

    def say(self, message: str) -> None:
        raise ConnectionError("gone")

    def whisper(self, identity: str, message: str) -> None:
        raise ConnectionError("gone")


def test_announce_reaches_channel_and_record():
    channel = RecordingChannel()
    emitter = EventEmitter()
    seen = []
    emitter.register_listener(lambda event_type, data: seen.append((event_type, data)))
    judge = Judge(channel, GameConfig(), event_emitter=emitter)

    judge.announce("Starting the game!")

    assert channel.public == ["Starting the game!"]
    assert seen == [("announcement", {"message": "Starting the game!"})]


def test_announcements_are_not_kept_by_judge():
    """Test that history lives in the channel and recorder only."""
    judge = Judge(RecordingChannel(), GameConfig())
    for i in range(100):
        judge.announce(f"message {i}")
    assert not hasattr(judge, "announcements")


def test_announcements_can_be_muted():
    channel = RecordingChannel()
    judge = Judge(channel, GameConfig(use_judge_announcements=False))

    judge.announce("quiet")
    judge.reply("alice", "Game already started")

    assert channel.public == ["alice: Game already started"]


def test_delivery_failures_are_logged(caplog):
    judge = Judge(BrokenChannel(), GameConfig())

    with caplog.at_level(logging.ERROR):
        judge.announce("It's alice's turn")
        judge.whisper("alice", "Your cards are: Duke, Duke")
        judge.reply("bob", "The table is full")

    assert "Failed to deliver announcement" in caplog.text
    assert "Failed to deliver whisper to alice" in caplog.text
    assert "Failed to deliver reply to bob" in caplog.text
    # Private content never reaches the log
    assert "Duke" not in caplog.text


def test_failing_listener_does_not_stop_others(caplog):
    emitter = EventEmitter()
    seen = []

    def broken(event_type, data):
        raise ValueError("listener bug")

    emitter.register_listener(broken)
    emitter.register_listener(lambda event_type, data: seen.append(event_type))

    emitter.emit_announcement("hello")

    assert seen == ["announcement"]
    assert "Listener failed on announcement event" in caplog.text
