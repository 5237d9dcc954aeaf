"""
The court deck: a shuffled bag of role tokens.
"""

import random
from typing import List, Optional

from .roles import Role, get_role_distribution
from .exceptions import DeckExhausted


class Deck:
    """Shuffled role tokens. Only ever shrinks."""

    def __init__(self, roles: Optional[List[Role]] = None, random_seed: Optional[int] = None):
        self._roles: List[Role] = list(roles) if roles is not None else get_role_distribution()
        # Use seeded random if seed is provided
        self._rng = random.Random(random_seed) if random_seed is not None else random.Random()
        self.shuffle()

    def __len__(self) -> int:
        return len(self._roles)

    def shuffle(self) -> None:
        """Randomize the order of the remaining tokens."""
        self._rng.shuffle(self._roles)

    def draw(self) -> Role:
        """
        Remove and return the top token.

        Raises:
            DeckExhausted: If no tokens remain
        """
        if not self._roles:
            raise DeckExhausted()
        return self._roles.pop()
