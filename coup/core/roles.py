"""
Role, card and action definitions for Coup.
"""

from enum import Enum
from typing import List, Optional
from dataclasses import dataclass


class Role(Enum):
    """Character roles held face down by players."""
    AMBASSADOR = "ambassador"
    ASSASSIN = "assassin"
    CAPTAIN = "captain"
    CONTESSA = "contessa"
    DUKE = "duke"

    def __str__(self) -> str:
        return self.value.title()

    @classmethod
    def parse(cls, name: str) -> Optional['Role']:
        """Look up a role by case-insensitive name, or None."""
        try:
            return cls(name.strip().lower())
        except ValueError:
            return None


class CardStatus(Enum):
    """Whether a card can still be used."""
    ALIVE = "alive"
    DEAD = "dead"


@dataclass
class Card:
    """A role token held by a player."""
    role: Role
    status: CardStatus = CardStatus.ALIVE

    def __str__(self) -> str:
        if self.is_alive:
            return str(self.role)
        return f"{self.role} (dead)"

    @property
    def is_alive(self) -> bool:
        """Check if card is still usable."""
        return self.status == CardStatus.ALIVE

    def kill(self) -> None:
        """Turn the card face up. Dead cards never come back."""
        self.status = CardStatus.DEAD


class ActionKind(Enum):
    """Actions a player may declare on their turn."""
    TAX = "tax"
    DUKE = "duke"
    STEAL = "steal"

    @classmethod
    def parse(cls, name: str) -> Optional['ActionKind']:
        """Look up an action by case-insensitive name, or None."""
        try:
            return cls(name.strip().lower())
        except ValueError:
            return None


# Coin movement for each action: (actor delta, target delta)
ACTION_EFFECTS = {
    ActionKind.TAX: (1, 0),
    ActionKind.DUKE: (3, 0),
    ActionKind.STEAL: (2, -2),
}

# Actions resolved immediately, without an objection window
INSTANT_ACTIONS = (ActionKind.TAX,)


@dataclass(frozen=True)
class Action:
    """A declared action, optionally aimed at another player."""
    kind: ActionKind
    target: Optional[str] = None

    def __str__(self) -> str:
        if self.target:
            return f"{self.kind.value} {self.target}"
        return self.kind.value

    @property
    def is_instant(self) -> bool:
        """Check if the action resolves without a window."""
        return self.kind in INSTANT_ACTIONS

    @property
    def needs_target(self) -> bool:
        """Check if the action must name a target."""
        return self.kind == ActionKind.STEAL

    @property
    def actor_delta(self) -> int:
        return ACTION_EFFECTS[self.kind][0]

    @property
    def target_delta(self) -> int:
        return ACTION_EFFECTS[self.kind][1]


def get_role_distribution() -> List[Role]:
    """
    Get the court deck used at session start.
    Returns: 2 copies of each of the 5 roles.
    """
    return [role for role in Role for _ in range(2)]
