"""
scheduler.py: The "call me before the next paint" primitive the engine runs on.
"""

from typing import Callable, Optional


class FrameQueue:
    """
    Holds at most one callback for the next frame.

    Requesting a frame while one is pending replaces it, so there is never
    more than one loop driving the engine.
    """

    def __init__(self):
        self._pending: Optional[Callable[[], None]] = None

    def request_frame(self, callback: Callable[[], None]):
        self._pending = callback

    @property
    def pending(self) -> bool:
        return self._pending is not None

    def run_pending(self) -> bool:
        """Runs the pending callback, if any. Returns whether one ran."""
        callback = self._pending
        self._pending = None
        if callback is None:
            return False
        callback()
        return True
