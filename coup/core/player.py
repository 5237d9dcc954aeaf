"""
Player class representing a seat at the table.
"""

from dataclasses import dataclass, field
from typing import List, Dict, Any

from .roles import Card, Role


@dataclass
class Player:
    """Represents a seated player."""
    identity: str
    cards: List[Card] = field(default_factory=list)
    coins: int = 0

    def __str__(self) -> str:
        return self.identity

    @property
    def is_alive(self) -> bool:
        """Check if player still has an influence card."""
        return any(card.is_alive for card in self.cards)

    @property
    def alive_roles(self) -> List[Role]:
        """Roles of the cards still face down."""
        return [card.role for card in self.cards if card.is_alive]

    def adjust_coins(self, delta: int) -> int:
        """
        Apply a signed change to the coin balance.

        The balance never goes below zero; there is no upper bound.

        Returns:
            The new balance
        """
        self.coins = max(0, self.coins + delta)
        return self.coins

    def reveal(self) -> str:
        """Describe this player's hand (private information)."""
        return ", ".join(str(card) for card in self.cards)

    def get_public_info(self) -> Dict[str, Any]:
        """Get what every player at the table may see."""
        return {
            "identity": self.identity,
            "coins": self.coins,
            "influence": len(self.alive_roles),
            "dead": [str(card.role) for card in self.cards if not card.is_alive],
        }
