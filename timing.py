# =========  timing.py  =========
"""
Level clock helpers.
Everything that waits on "time since the current scene was loaded" reads
it from a LevelClock, so a scene reload restarts every pending timer.
"""

import time
from typing import Callable


class LevelClock:
    """Monotonic seconds since the last `reset()`."""

    def __init__(self, now: Callable[[], float] = time.monotonic):
        self._now   = now
        self._start = now()

    def reset(self) -> None:
        self._start = self._now()

    def since_load(self) -> float:
        return self._now() - self._start
