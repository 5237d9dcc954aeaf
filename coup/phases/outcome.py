"""
Result type returned by every entry point.
"""

from dataclasses import dataclass

from ..core.exceptions import CoupError


@dataclass
class Outcome:
    """Result of a player command."""
    success: bool
    message: str = ""
    silent: bool = False  # rejected without answering in the channel

    @classmethod
    def rejected(cls, error: CoupError) -> 'Outcome':
        """Build a failed outcome from a rule violation."""
        return cls(success=False, message=error.message, silent=error.silent)
