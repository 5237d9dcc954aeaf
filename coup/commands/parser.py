"""
Parser for chat commands.

Commands start with ``!`` and take at most one argument:

    !join  !start  !status
    !tax  !duke  !steal <nick>
    !bullshit (or !bs)  !block <role>
"""

import re
from typing import Optional

from .intents import Intent, Join, Start, Propose, ReactBullshit, ReactBlock, Status
from ..core.roles import Action, ActionKind, Role

COMMAND_PATTERN = re.compile(r"^\s*!(?P<command>[a-z]+)(?:\s+(?P<argument>\S+))?\s*$", re.IGNORECASE)

# Commands that take no argument
SIMPLE_COMMANDS = {
    "join": Join,
    "start": Start,
    "status": Status,
    "bullshit": ReactBullshit,
    "bs": ReactBullshit,
}


def parse_command(text: str) -> Optional[Intent]:
    """
    Parse one chat line into an intent.

    Returns None for anything that is not a well-formed command, including
    unknown commands, missing targets and unknown role names.
    """
    match = COMMAND_PATTERN.match(text)
    if not match:
        return None

    command = match.group("command").lower()
    argument = match.group("argument")

    if command in SIMPLE_COMMANDS:
        if argument is not None:
            return None
        return SIMPLE_COMMANDS[command]()

    if command == "block":
        role = Role.parse(argument) if argument else None
        if role is None:
            return None
        return ReactBlock(role=role)

    kind = ActionKind.parse(command)
    if kind is None:
        return None
    action = Action(kind=kind, target=argument)
    # Targets are required where the action needs one and refused elsewhere
    if action.needs_target != (argument is not None):
        return None
    return Propose(action=action)
