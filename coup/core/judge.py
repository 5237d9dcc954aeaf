"""
Judge/Moderator that speaks for the game at the table.
"""

import logging
from typing import Callable, Optional, TYPE_CHECKING

from ..config.game_config import GameConfig, default_config

if TYPE_CHECKING:
    from ..transport.channel import Channel
    from ..recording.event_emitter import EventEmitter

logger = logging.getLogger(__name__)


class Judge:
    """
    Announces game outcomes publicly and deals private information.

    Delivery never raises: a failing transport or listener is logged and the
    game carries on, so a state transition is never cut short by a message.
    """

    def __init__(self, channel: Optional['Channel'] = None, config: GameConfig = default_config,
                 event_emitter: Optional['EventEmitter'] = None):
        self.channel = channel
        self.config = config
        self.event_emitter = event_emitter

    def announce(self, message: str) -> None:
        """Make a public announcement."""
        logger.info("[JUDGE] %s", message)
        if self.config.use_judge_announcements and self.channel:
            self._deliver("announcement", self.channel.say, message)
        if self.event_emitter:
            self._deliver("announcement event", self.event_emitter.emit_announcement, message)

    def whisper(self, identity: str, message: str) -> None:
        """Tell one player something nobody else may see."""
        # Private messages never go to the log or the event record
        if self.channel:
            self._deliver(f"whisper to {identity}", self.channel.whisper, identity, message)

    def reply(self, identity: str, message: str) -> None:
        """Answer one player's command in the channel."""
        if self.channel:
            self._deliver(f"reply to {identity}", self.channel.say, f"{identity}: {message}")

    @staticmethod
    def _deliver(what: str, send: Callable[..., None], *args) -> None:
        try:
            send(*args)
        except Exception:
            logger.exception("Failed to deliver %s", what)
