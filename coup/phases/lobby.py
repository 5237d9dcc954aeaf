"""
Lobby commands: taking a seat, starting the game, reading the table.
"""

import logging

from .outcome import Outcome
from ..core.exceptions import CoupError
from ..core.session import GameSession

logger = logging.getLogger(__name__)


class LobbyHandler:
    """Handles join, start and status requests."""

    def __init__(self, session: GameSession):
        self.session = session

    def join(self, identity: str) -> Outcome:
        """Seat `identity` and deal them two cards."""
        try:
            with self.session.access() as state:
                player = state.join(identity)
                return Outcome(success=True, message=f"{player.identity} joined")
        except CoupError as e:
            logger.info("Rejected join from %s: %s", identity, e)
            return Outcome.rejected(e)

    def start(self, identity: str) -> Outcome:
        """Start the game on behalf of `identity`."""
        try:
            with self.session.access() as state:
                first = state.start()
                return Outcome(success=True, message=f"Game started, {first.identity} to act")
        except CoupError as e:
            logger.info("Rejected start from %s: %s", identity, e)
            return Outcome.rejected(e)

    def status(self, identity: str) -> Outcome:
        """Whisper the public table summary to `identity`."""
        with self.session.access() as state:
            summary = state.summary()
            text = self.format_summary(summary)
            state.judge.whisper(identity, text)
        return Outcome(success=True, message=text)

    @staticmethod
    def format_summary(summary: dict) -> str:
        """Render a table summary as one line of chat."""
        if not summary["players"]:
            return "Nobody has joined yet"
        seats = "; ".join(
            f"{p['identity']}: {p['coins']} coins, {p['influence']} cards"
            for p in summary["players"]
        )
        if not summary["started"]:
            return f"Waiting to start. {seats}"
        text = f"{summary['turn']} to act. {seats}"
        pending = summary["pending"]
        if pending:
            text += f". Pending: {pending['actor']} {pending['action']}"
            if pending["awaiting_adjudication"]:
                text += " (held for adjudication)"
        return text
