"""
Action resolution: propose, object, then commit or abort.

A windowed action moves the round from idle to pending. While the objection
window is open anyone at the table may call bullshit or claim a block. When
the window closes the resolver re-reads the round under the session lock and
either applies the action's coin effect and passes the turn, or aborts and
holds the round until the contest is adjudicated.
"""

import logging
from typing import Optional

from .outcome import Outcome
from .scheduler import Scheduler, TimerScheduler
from ..core.exceptions import (
    CoupError,
    NotStarted,
    NotYourTurn,
    NotSeated,
    ActionAlreadyPending,
    UnknownTarget,
    NoPendingAction,
    InvalidReaction,
    AlreadyChallenged,
    AlreadyBlocked,
    ChallengeUnresolved,
)
from ..core.game_engine import GameState
from ..core.player import Player
from ..core.roles import Action, Role
from ..core.round_state import CounterClaim, RoundState
from ..core.session import GameSession

logger = logging.getLogger(__name__)


class ActionResolver:
    """Drives the propose / objection window / resolve protocol."""

    def __init__(self, session: GameSession, scheduler: Optional[Scheduler] = None):
        self.session = session
        self.scheduler = scheduler or TimerScheduler()

    # ============ Proposals ============

    def propose(self, identity: str, action: Action) -> Outcome:
        """
        Declare an action on behalf of the current player.

        Instant actions resolve at once. Windowed actions open an objection
        window and schedule its resolution.
        """
        try:
            with self.session.access() as state:
                return self._propose(state, identity, action)
        except CoupError as e:
            logger.info("Rejected %s from %s: %s", action, identity, e)
            return Outcome.rejected(e)

    def _propose(self, state: GameState, identity: str, action: Action) -> Outcome:
        if not state.started:
            raise NotStarted()
        actor = state.current_player()
        if actor.identity != identity:
            raise NotYourTurn(identity, actor.identity)
        if not state.round.is_idle:
            raise ActionAlreadyPending()
        self._validate_target(state, actor, action)

        if action.is_instant:
            actor.adjust_coins(action.actor_delta)
            state.judge.announce(f"{identity} takes {action.kind.value} ({actor.coins} coins)")
            self._emit_resolution(state, "committed", identity, action)
            state.advance_turn()
            return Outcome(success=True, message=f"{identity} resolved {action}")

        round_state = state.round
        window = state.config.objection_window_seconds
        # Arm the window before touching the round; the timer thread blocks on
        # the session lock until we release it
        self.scheduler.call_later(window, self.resolve_window, round_state.generation)
        round_state.action = action
        round_state.actor = identity
        round_state.window_open = True

        if state.event_emitter:
            state.event_emitter.emit_proposal(identity, action.kind.value, action.target,
                                              round_state.generation)
        state.judge.announce(
            f"{identity} claims {self._describe(action)}. "
            f"Call !bullshit or !block within {window:g} seconds"
        )
        return Outcome(success=True, message=f"{identity} proposed {action}")

    @staticmethod
    def _validate_target(state: GameState, actor: Player, action: Action) -> None:
        if not action.needs_target:
            return
        if not action.target:
            raise UnknownTarget("", f"{action.kind.value} needs a target")
        target = state.find_player(action.target)
        if target is None:
            raise UnknownTarget(action.target)
        if target is actor:
            raise UnknownTarget(action.target, "You cannot target yourself")

    # ============ Reactions ============

    def react_bullshit(self, identity: str) -> Outcome:
        """
        Challenge the pending claim.

        If a block has been claimed the challenge is against the block,
        otherwise against the action. Resolution waits for the window to close.
        """
        try:
            with self.session.access() as state:
                round_state = self._open_round(state, identity)
                if round_state.counter is not None:
                    against = round_state.counter.claimant
                    if identity == against:
                        raise InvalidReaction()
                    if round_state.counter_bullshit:
                        raise AlreadyChallenged(round_state.counter_bullshit)
                    round_state.counter_bullshit = identity
                    claim = f"{round_state.counter.role} block"
                else:
                    against = round_state.actor
                    if identity == against:
                        raise InvalidReaction()
                    if round_state.bullshit:
                        raise AlreadyChallenged(round_state.bullshit)
                    round_state.bullshit = identity
                    claim = self._describe(round_state.action)

                if state.event_emitter:
                    state.event_emitter.emit_challenge(identity, against, round_state.generation)
                state.judge.announce(f"{identity} calls bullshit on {against}'s {claim}!")
                return Outcome(success=True, message=f"{identity} challenged {against}")
        except CoupError as e:
            logger.info("Rejected bullshit from %s: %s", identity, e)
            return Outcome.rejected(e)

    def react_block(self, identity: str, claimed_role: Role) -> Outcome:
        """
        Claim a role that blocks the pending action.

        Only records the claim; what a block does to the action is not
        decided yet, so a recorded block holds the round at window close.
        """
        try:
            with self.session.access() as state:
                round_state = self._open_round(state, identity)
                if identity == round_state.actor:
                    raise InvalidReaction("You cannot block your own action")
                if round_state.counter is not None:
                    raise AlreadyBlocked(round_state.counter.claimant)
                if round_state.bullshit:
                    raise AlreadyChallenged(round_state.bullshit)
                round_state.counter = CounterClaim(claimant=identity, role=claimed_role)

                if state.event_emitter:
                    state.event_emitter.emit_block(identity, claimed_role.value, round_state.generation)
                state.judge.announce(
                    f"{identity} claims {claimed_role} to block {round_state.actor}'s "
                    f"{self._describe(round_state.action)}"
                )
                return Outcome(success=True, message=f"{identity} blocked with {claimed_role}")
        except CoupError as e:
            logger.info("Rejected block from %s: %s", identity, e)
            return Outcome.rejected(e)

    @staticmethod
    def _open_round(state: GameState, identity: str) -> RoundState:
        """Return the round if `identity` may react to it right now."""
        if not state.started:
            raise NotStarted()
        if state.find_player(identity) is None:
            raise NotSeated(identity)
        round_state = state.round
        if round_state.action is None or not round_state.window_open:
            raise NoPendingAction()
        return round_state

    # ============ Window expiry ============

    def resolve_window(self, generation: int) -> None:
        """
        Close the objection window opened for round `generation`.

        Runs on the scheduler's thread. Re-reads the round under the lock, so
        reactions recorded while the window was open are always seen.
        """
        try:
            self._resolve_window(generation)
        except Exception:
            # Nothing above the timer thread would report this
            logger.exception("Objection window for round %d failed", generation)

    def _resolve_window(self, generation: int) -> None:
        with self.session.access() as state:
            round_state = state.round
            if (round_state.generation != generation or round_state.action is None
                    or not round_state.window_open):
                logger.debug("Ignoring stale objection window for round %d", generation)
                return
            round_state.window_open = False

            if round_state.is_contested:
                self._abort(state, round_state)
            else:
                self._commit(state, round_state)

    def _commit(self, state: GameState, round_state: RoundState) -> None:
        action = round_state.action
        actor = state.find_player(round_state.actor)
        actor.adjust_coins(action.actor_delta)
        if action.target:
            state.find_player(action.target).adjust_coins(action.target_delta)

        logger.info("Committed %s by %s", action, actor.identity)
        state.judge.announce(f"No objections. {self._effect(state, actor, action)}")
        self._emit_resolution(state, "committed", actor.identity, action)
        state.advance_turn()

    def _abort(self, state: GameState, round_state: RoundState) -> None:
        round_state.awaiting_adjudication = True
        action = round_state.action

        logger.info("Aborted %s by %s pending adjudication", action, round_state.actor)
        if round_state.bullshit:
            state.judge.announce(
                f"{round_state.actor}'s {self._describe(action)} is on hold: "
                f"{round_state.bullshit}'s challenge must be adjudicated"
            )
        else:
            counter = round_state.counter
            message = (f"{round_state.actor}'s {self._describe(action)} is on hold: "
                       f"{counter.claimant}'s {counter.role} block is unresolved")
            if round_state.counter_bullshit:
                message += f" and challenged by {round_state.counter_bullshit}"
            state.judge.announce(message)
        self._emit_resolution(state, "aborted", round_state.actor, action)

    def adjudicate_challenge(self, challenger: str, revealed: Role) -> Outcome:
        """
        Settle a challenge by having the challenged player reveal a card.

        Extension point: who reveals, and whether a mismatch kills a card or
        forces a redeal, is not decided yet.

        Raises:
            ChallengeUnresolved: Always, until reveal rules are defined
        """
        raise ChallengeUnresolved()

    # ============ Helpers ============

    @staticmethod
    def _describe(action: Action) -> str:
        if action.target:
            return f"{action.kind.value} from {action.target}"
        return action.kind.value

    @staticmethod
    def _effect(state: GameState, actor: Player, action: Action) -> str:
        text = f"{actor.identity} now has {actor.coins} coins"
        if action.target:
            target = state.find_player(action.target)
            text += f", {target.identity} has {target.coins}"
        return text

    @staticmethod
    def _emit_resolution(state: GameState, outcome: str, actor: str, action: Action) -> None:
        if state.event_emitter:
            state.event_emitter.emit_resolution(outcome, actor, action.kind.value,
                                                state.coin_balances(), state.round.generation)
