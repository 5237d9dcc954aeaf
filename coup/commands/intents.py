"""
Structured intents produced by the command parser.
"""

from dataclasses import dataclass
from typing import Union

from ..core.roles import Action, Role


@dataclass(frozen=True)
class Join:
    """Take a seat before the game starts."""


@dataclass(frozen=True)
class Start:
    """Start the game."""


@dataclass(frozen=True)
class Propose:
    """Declare an action on your turn."""
    action: Action


@dataclass(frozen=True)
class ReactBullshit:
    """Challenge the pending claim."""


@dataclass(frozen=True)
class ReactBlock:
    """Claim a role that blocks the pending action."""
    role: Role


@dataclass(frozen=True)
class Status:
    """Ask for the table summary."""


Intent = Union[Join, Start, Propose, ReactBullshit, ReactBlock, Status]
