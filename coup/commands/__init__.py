"""
Text commands: parsing chat lines into intents.
"""

from .intents import Intent, Join, Start, Propose, ReactBullshit, ReactBlock, Status
from .parser import parse_command

__all__ = ['Intent', 'Join', 'Start', 'Propose', 'ReactBullshit', 'ReactBlock', 'Status', 'parse_command']
