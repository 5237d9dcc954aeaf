"""
Run recorder that keeps one table's audit log on disk.

Each run gets ``<runs_dir>/<run>/events.jsonl`` (one event per line, numbered
in the order the table produced them) and ``metadata.json``, which is
rewritten whenever the run's metadata grows.
"""

import json
from datetime import datetime
from pathlib import Path
from typing import Dict, Any, Optional
from threading import Lock


class RunRecorder:
    """Records a table's events and metadata to a run directory."""

    def __init__(self, runs_dir: str = "runs"):
        self.runs_dir = Path(runs_dir)
        self.current_run_dir: Optional[Path] = None
        # Timer threads and the command loop record concurrently
        self._lock = Lock()
        self._sequence = 0
        self._metadata: Dict[str, Any] = {}

    @property
    def event_count(self) -> int:
        return self._sequence

    def create_run(self, run_name: Optional[str] = None) -> str:
        """
        Create a new run directory and start its metadata.

        Args:
            run_name: Optional custom run name. If None, generates timestamp-based name.

        Returns:
            The run name (directory name)
        """
        started = datetime.now()
        if run_name is None:
            run_name = f"run_{started:%Y%m%d_%H%M%S}"

        run_dir = self.runs_dir / run_name
        run_dir.mkdir(parents=True, exist_ok=True)

        with self._lock:
            self.current_run_dir = run_dir
            self._sequence = 0
            self._metadata = {"run": run_name, "started_at": started.isoformat()}
            self._write_metadata()
        return run_name

    def record_event(self, event_type: str, data: Dict[str, Any]) -> None:
        """
        Append an event to events.jsonl. Does nothing before `create_run`.

        The sequence number only advances once the line is written, so the
        file never skips a number.
        """
        if self.current_run_dir is None:
            return

        with self._lock:
            line = json.dumps({
                "sequence": self._sequence,
                "timestamp": datetime.now().isoformat(),
                "event_type": event_type,
                "data": data,
            })
            with open(self.current_run_dir / "events.jsonl", 'a') as f:
                f.write(line + '\n')
            self._sequence += 1

    def save_metadata(self, metadata: Dict[str, Any]) -> None:
        """Merge `metadata` into the run's metadata.json."""
        if self.current_run_dir is None:
            return

        with self._lock:
            self._metadata.update(metadata)
            self._write_metadata()

    def finish_run(self, final_state: Dict[str, Any]) -> None:
        """Close the run: note when it ended, how many events it has, and the table's last state."""
        self.save_metadata({
            "finished_at": datetime.now().isoformat(),
            "events": self._sequence,
            "final_state": final_state,
        })

    def get_run_path(self) -> Optional[Path]:
        """Get the current run directory path."""
        return self.current_run_dir

    def _write_metadata(self) -> None:
        with open(self.current_run_dir / "metadata.json", 'w') as f:
            json.dump(self._metadata, f, indent=2)
