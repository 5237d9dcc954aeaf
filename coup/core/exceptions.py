"""
Exceptions for game rule violations.

Every rejection is recoverable: it is raised before any state is mutated and
caught at the handler entry point, where it becomes a failed Outcome.
"""


class CoupError(Exception):
    """Base class for all game rejections."""

    # Silent rejections are logged but never answered in the channel
    silent = False
    default_message = "That is not allowed right now"

    def __init__(self, message: str = ""):
        self.message = message or self.default_message
        super().__init__(self.message)


# ============ Deck ============

class DeckExhausted(CoupError):
    """Raised when drawing from an empty deck."""
    default_message = "The deck is empty"


# ============ Lobby ============

class AlreadyStarted(CoupError):
    default_message = "Game already started"


class AlreadyJoined(CoupError):
    """Raised when an identity tries to take a second seat."""

    def __init__(self, identity: str):
        self.identity = identity
        super().__init__(f"{identity} has already joined")


class SeatsFull(CoupError):
    default_message = "The table is full"


class NotEnoughPlayers(CoupError):
    """Raised when starting with fewer than the minimum seats."""

    def __init__(self, seated: int, required: int):
        self.seated = seated
        self.required = required
        super().__init__(f"Need at least {required} players to start, have {seated}")


# ============ Turn ============

class NotStarted(CoupError):
    silent = True
    default_message = "Game has not started"


class NotYourTurn(CoupError):
    silent = True

    def __init__(self, identity: str, current: str):
        self.identity = identity
        self.current = current
        super().__init__(f"It is {current}'s turn, not {identity}'s")


class NotSeated(CoupError):
    silent = True

    def __init__(self, identity: str):
        self.identity = identity
        super().__init__(f"{identity} is not playing")


# ============ Actions ============

class ActionAlreadyPending(CoupError):
    default_message = "An action is already pending"


class UnknownTarget(CoupError):
    def __init__(self, target: str, reason: str = ""):
        self.target = target
        super().__init__(reason or f"{target} is not at the table")


class NoPendingAction(CoupError):
    default_message = "There is no action to react to"


class InvalidReaction(CoupError):
    """Raised when a player reacts to their own claim."""
    default_message = "You cannot react to your own claim"


class AlreadyChallenged(CoupError):
    def __init__(self, challenger: str):
        self.challenger = challenger
        super().__init__(f"{challenger} already called bullshit")


class AlreadyBlocked(CoupError):
    def __init__(self, claimant: str):
        self.claimant = claimant
        super().__init__(f"{claimant} already blocked")


class ChallengeUnresolved(CoupError, NotImplementedError):
    """Raised by the challenge adjudication hook until reveal rules exist."""
    default_message = "Challenge adjudication is not supported yet"
