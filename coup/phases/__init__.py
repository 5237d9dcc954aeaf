"""
Handlers for lobby commands and action resolution.
"""

from .action_resolver import ActionResolver
from .lobby import LobbyHandler
from .outcome import Outcome
from .scheduler import Scheduler, TimerScheduler

__all__ = ['ActionResolver', 'LobbyHandler', 'Outcome', 'Scheduler', 'TimerScheduler']
