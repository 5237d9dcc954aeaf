"""
Console front end for a Coup table.

Reads chat lines of the form ``nick: text`` from stdin and prints the table's
replies, so the engine can be played without a chat network.
"""

import argparse
import logging
import os
import sys
import time
from dataclasses import asdict
from typing import Optional, TextIO

from dotenv import load_dotenv

from coup.commands import parse_command, Intent, Join, Start, Propose, ReactBullshit, ReactBlock, Status
from coup.config import GameConfig, load_config
from coup.core import GameState, GameSession, Judge
from coup.phases import ActionResolver, LobbyHandler, Outcome, Scheduler
from coup.recording import EventEmitter, RunRecorder
from coup.transport import Channel, ConsoleChannel

logger = logging.getLogger(__name__)


class CoupGame:
    """Main game controller: one table, one session."""

    def __init__(self, config: Optional[GameConfig] = None, channel: Optional[Channel] = None,
                 scheduler: Optional[Scheduler] = None, event_emitter: Optional[EventEmitter] = None,
                 run_name: Optional[str] = None):
        self.config = config or load_config()
        self.channel = channel or ConsoleChannel()
        self.run_recorder: Optional[RunRecorder] = None

        # Create run recorder and event emitter
        if event_emitter is None and self.config.record_events:
            run_recorder = RunRecorder(self.config.runs_dir)
            run_name = run_recorder.create_run(run_name)
            event_emitter = EventEmitter(run_recorder)
            self.run_recorder = run_recorder
            logger.info("Recording game to: %s", run_recorder.get_run_path())
        self.event_emitter = event_emitter

        judge = Judge(self.channel, self.config, event_emitter=self.event_emitter)
        self.session = GameSession(GameState(
            config=self.config,
            judge=judge,
            event_emitter=self.event_emitter
        ))
        self.judge = judge

        self.lobby = LobbyHandler(self.session)
        self.resolver = ActionResolver(self.session, scheduler)

        if self.run_recorder:
            self.run_recorder.save_metadata({"config": asdict(self.config)})

    def handle(self, identity: str, text: str) -> Optional[Outcome]:
        """
        Handle one chat line from `identity`.

        Returns None when the line is not a command. Rejections are answered
        in the channel unless they are silent.
        """
        logger.debug("<- %s: %s", identity, text)
        intent = parse_command(text)
        if intent is None:
            return None

        outcome = self.dispatch(identity, intent)
        if not outcome.success and not outcome.silent:
            self.judge.reply(identity, outcome.message)
        return outcome

    def dispatch(self, identity: str, intent: Intent) -> Outcome:
        """Route an intent to its handler."""
        if isinstance(intent, Join):
            return self.lobby.join(identity)
        elif isinstance(intent, Start):
            return self.lobby.start(identity)
        elif isinstance(intent, Status):
            return self.lobby.status(identity)
        elif isinstance(intent, Propose):
            return self.resolver.propose(identity, intent.action)
        elif isinstance(intent, ReactBullshit):
            return self.resolver.react_bullshit(identity)
        elif isinstance(intent, ReactBlock):
            return self.resolver.react_block(identity, intent.role)
        raise ValueError(f"Unknown intent: {intent!r}")

    def window_open(self) -> bool:
        """Check if an objection window is currently running."""
        with self.session.access() as state:
            return state.round.window_open

    def run_console(self, stream: TextIO) -> None:
        """Feed `nick: text` lines from `stream` until it ends."""
        for line in stream:
            line = line.strip()
            if not line:
                continue
            identity, sep, text = line.partition(":")
            if not sep or not identity.strip():
                logger.warning("Ignoring line without a nick: %r", line)
                continue
            self.handle(identity.strip(), text.strip())

        # Let a window opened by the last lines close before exiting
        if self.window_open():
            time.sleep(self.config.objection_window_seconds + 0.5)

    def finish_recording(self) -> None:
        """Write the table's final state into the run metadata."""
        if not self.run_recorder:
            return
        with self.session.access() as state:
            summary = state.summary()
        self.run_recorder.finish_run(summary)


def main():
    """Main entry point."""
    load_dotenv()

    parser = argparse.ArgumentParser(description="Play Coup from the console")
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=None,
        help="Path to YAML config file (default: $COUP_CONFIG, else built-in defaults)"
    )
    parser.add_argument(
        "--seed",
        "-s",
        type=int,
        default=None,
        help="Random seed for a reproducible deck order"
    )
    parser.add_argument(
        "--window",
        "-w",
        type=float,
        default=None,
        help="Objection window in seconds. Overrides config file setting."
    )
    parser.add_argument(
        "--run-name",
        "-r",
        type=str,
        default=None,
        help="Custom name for this run (default: auto-generated timestamp)"
    )
    parser.add_argument(
        "--no-record",
        action="store_true",
        help="Don't record game events to the runs directory"
    )

    args = parser.parse_args()

    config = load_config(args.config or os.environ.get("COUP_CONFIG"))
    if args.seed is not None:
        config.random_seed = args.seed
    if args.window is not None:
        config.objection_window_seconds = args.window
    if args.no_record:
        config.record_events = False

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    game = CoupGame(config=config, run_name=args.run_name)
    game.run_console(sys.stdin)
    game.finish_recording()

    if game.run_recorder:
        run_path = game.run_recorder.get_run_path()
        if run_path:
            print(f"\nGame events saved to: {run_path}")


if __name__ == "__main__":
    main()
