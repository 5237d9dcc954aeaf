"""
Reply channels supplied by the transport.
"""

from abc import ABC, abstractmethod
from typing import List, Tuple, Optional


class Channel(ABC):
    """
    Abstract reply channel for one table.

    The engine only ever announces through this interface and never depends on
    how the transport frames messages.
    """

    @abstractmethod
    def say(self, message: str) -> None:
        """Send a message everyone at the table can read."""
        pass

    @abstractmethod
    def whisper(self, identity: str, message: str) -> None:
        """Send a message only `identity` can read."""
        pass


class ConsoleChannel(Channel):
    """Prints public and private messages to stdout."""

    def say(self, message: str) -> None:
        print(f"[TABLE] {message}")

    def whisper(self, identity: str, message: str) -> None:
        print(f"[to {identity}] {message}")


class RecordingChannel(Channel):
    """Keeps every message in memory. Handy for tests and replays."""

    def __init__(self):
        self.public: List[str] = []
        self.private: List[Tuple[str, str]] = []

    def say(self, message: str) -> None:
        self.public.append(message)

    def whisper(self, identity: str, message: str) -> None:
        self.private.append((identity, message))

    def whispers_to(self, identity: str) -> List[str]:
        """All private messages sent to one identity."""
        return [message for to, message in self.private if to == identity]

    @property
    def last(self) -> Optional[str]:
        """The most recent public message."""
        return self.public[-1] if self.public else None
