"""
State of the action currently under consideration.
"""

from dataclasses import dataclass
from typing import Optional

from .roles import Action, Role


@dataclass(frozen=True)
class CounterClaim:
    """A block: another player claims a role that cancels the action."""
    claimant: str
    role: Role


@dataclass
class RoundState:
    """
    The proposed action and any contest against it.

    Replaced wholesale whenever the turn advances; mutated in place only while
    its own objection window is open.
    """
    generation: int = 0
    action: Optional[Action] = None
    actor: Optional[str] = None
    bullshit: Optional[str] = None  # who challenged the action
    counter: Optional[CounterClaim] = None
    counter_bullshit: Optional[str] = None  # who challenged the block
    window_open: bool = False
    awaiting_adjudication: bool = False

    @property
    def is_idle(self) -> bool:
        """Check if no action has been proposed this round."""
        return self.action is None

    @property
    def is_contested(self) -> bool:
        """Check if anyone objected to the action."""
        return self.bullshit is not None or self.counter is not None
