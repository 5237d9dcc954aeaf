"""
Deferred callbacks for objection windows.
"""

import threading
from abc import ABC, abstractmethod
from typing import Any, Callable


class Scheduler(ABC):
    """Runs a callback once after a delay, off the calling thread."""

    @abstractmethod
    def call_later(self, delay: float, callback: Callable[..., Any], *args: Any) -> None:
        pass


class TimerScheduler(Scheduler):
    """Runs each callback on its own daemon ``threading.Timer``."""

    def call_later(self, delay: float, callback: Callable[..., Any], *args: Any) -> None:
        timer = threading.Timer(delay, callback, args=args)
        timer.daemon = True
        timer.start()
