"""
Event emitter for recording game events.
"""

import logging
from typing import Callable, Dict, Any, Optional, List

from .run_recorder import RunRecorder

logger = logging.getLogger(__name__)

Listener = Callable[[str, Dict[str, Any]], None]


class EventEmitter:
    """Fans game events out to a run recorder and any registered listeners."""

    def __init__(self, run_recorder: Optional[RunRecorder] = None):
        self.run_recorder = run_recorder
        self._listeners: List[Listener] = []

    def register_listener(self, listener: Listener) -> None:
        """Call `listener(event_type, data)` for every emitted event."""
        self._listeners.append(listener)

    def _emit(self, event_type: str, data: Dict[str, Any]) -> None:
        """Emit an event by recording it and notifying listeners."""
        # Don't let recording or listener errors break the game
        if self.run_recorder:
            try:
                self.run_recorder.record_event(event_type, data)
            except Exception:
                logger.exception("Error recording %s event", event_type)
        for listener in self._listeners:
            try:
                listener(event_type, data)
            except Exception:
                logger.exception("Listener failed on %s event", event_type)

    def emit_join(self, identity: str, seat: int, deck_size: int) -> None:
        """Emit player join event. Roles stay private."""
        self._emit("join", {
            "identity": identity,
            "seat": seat,
            "deck_size": deck_size
        })

    def emit_game_start(self, players: List[str]) -> None:
        """Emit game start event."""
        self._emit("game_start", {
            "players": players
        })

    def emit_turn(self, identity: str, turn: int, generation: int) -> None:
        """Emit turn change event."""
        self._emit("turn", {
            "identity": identity,
            "turn": turn,
            "generation": generation
        })

    def emit_proposal(self, actor: str, action: str, target: Optional[str], generation: int) -> None:
        """Emit action proposal event."""
        self._emit("proposal", {
            "actor": actor,
            "action": action,
            "target": target,
            "generation": generation
        })

    def emit_challenge(self, challenger: str, against: str, generation: int) -> None:
        """Emit bullshit call event. `against` is the identity whose claim is doubted."""
        self._emit("challenge", {
            "challenger": challenger,
            "against": against,
            "generation": generation
        })

    def emit_block(self, claimant: str, role: str, generation: int) -> None:
        """Emit block claim event."""
        self._emit("block", {
            "claimant": claimant,
            "role": role,
            "generation": generation
        })

    def emit_resolution(self, outcome: str, actor: str, action: str,
                        coins: Dict[str, int], generation: int) -> None:
        """Emit window resolution event (committed or aborted)."""
        self._emit("resolution", {
            "outcome": outcome,
            "actor": actor,
            "action": action,
            "coins": coins,
            "generation": generation
        })

    def emit_announcement(self, message: str) -> None:
        """Emit judge announcement event."""
        self._emit("announcement", {
            "message": message
        })
