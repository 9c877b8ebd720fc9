"""
scene_selector.py

Picks the configured scene for this machine and fires its load once.

* `find_match()` – first `Setting` whose address is bound locally.
* `DelayedDispatcher` – armed with that match, polled every frame, calls
  its `on_fire` callback exactly once when the delay has elapsed.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import AbstractSet, Callable, Iterable, Optional


# ── Data structures ─────────────────────────────────────────────────────────
@dataclass(frozen=True)
class Setting:
    address: str
    scene: Optional[str] = None        # scene path, None = unassigned


class DispatchState(enum.Enum):
    IDLE  = "idle"
    ARMED = "armed"
    FIRED = "fired"


# ── Matching ────────────────────────────────────────────────────────────────
def find_match(settings: Iterable[Setting],
               local_addresses: AbstractSet[str]) -> Optional[Setting]:
    """Return the first setting (config order) whose address is local."""
    for setting in settings:
        if setting.address in local_addresses:
            return setting
    return None


# ── Dispatch ────────────────────────────────────────────────────────────────
class DelayedDispatcher:
    """IDLE → ARMED → FIRED, driven by `arm()` and `poll()`."""

    def __init__(self, delay_seconds: float,
                 on_fire: Callable[[Setting], None]) -> None:
        if delay_seconds < 0:
            raise ValueError(f"delay_seconds must be >= 0, got {delay_seconds}")
        self.delay_seconds = float(delay_seconds)
        self._on_fire = on_fire

        self.state: DispatchState = DispatchState.IDLE
        self.matched_setting: Optional[Setting] = None
        self.start_time: Optional[float] = None
        self._decided = False            # arm() runs once, match or not

    def arm(self, setting: Optional[Setting], now: float) -> None:
        """
        Start the timer for *setting*. `None` (nothing matched) leaves the
        dispatcher idle for good.
        """
        if self._decided:
            raise RuntimeError("dispatcher already armed")
        self._decided = True
        if setting is None:
            return
        self.matched_setting = setting
        self.start_time      = now
        self.state           = DispatchState.ARMED

    def poll(self, now: float) -> bool:
        """Fire if due. Returns True only on the call that fired."""
        if self.state is not DispatchState.ARMED:
            return False
        if now - self.start_time < self.delay_seconds:
            return False

        # state flips first so a raising callback is never re-run
        self.state = DispatchState.FIRED
        self._on_fire(self.matched_setting)
        return True

    def remaining(self, now: float) -> Optional[float]:
        """Seconds until firing (0.0 once due or fired), None while idle."""
        if self.start_time is None:
            return None
        return max(0.0, self.delay_seconds - (now - self.start_time))
