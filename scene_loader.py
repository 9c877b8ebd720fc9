"""
scene_loader.py

The loader component hosted by the boot scene: matches this machine's
addresses against the configured settings on `start()`, then loads the
matched scene from `update()` once the delay has passed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import AbstractSet, Callable, Optional, Sequence

from addresses      import local_addresses
from scene_manager  import LoadSceneParameters, SceneManager
from scene_selector import DelayedDispatcher, DispatchState, Setting, find_match


@dataclass(frozen=True)
class LoaderStatus:
    state: DispatchState
    matched: Optional[Setting]
    remaining: Optional[float]


class IPAddressSceneLoader:
    def __init__(self,
                 settings: Sequence[Setting],
                 scene_manager: SceneManager,
                 delay: float = 10.0,
                 parameters: Optional[LoadSceneParameters] = None,
                 address_source: Callable[[], AbstractSet[str]] = local_addresses):
        self.settings      = list(settings)
        self.scene_manager = scene_manager
        self.parameters    = parameters or LoadSceneParameters()
        self.address_source = address_source
        self.dispatcher    = DelayedDispatcher(delay, self._load)
        self.started       = False

    # ── lifecycle ──────────────────────────────────────────────────────────
    def start(self) -> Optional[Setting]:
        if self.started:
            return self.dispatcher.matched_setting
        self.started = True

        match = find_match(self.settings, self.address_source())
        self.dispatcher.arm(match, self.scene_manager.time_since_level_load())
        if match is None:
            print("[scene_loader] no setting matches a local address")
        else:
            print(f"[scene_loader] {match.address} matched → {match.scene} "
                  f"in {self.dispatcher.delay_seconds:.1f}s")
        return match

    def update(self) -> bool:
        return self.dispatcher.poll(self.scene_manager.time_since_level_load())

    def _load(self, setting: Setting) -> None:
        self.scene_manager.load_scene(setting.scene, self.parameters)

    # ── read-only view ─────────────────────────────────────────────────────
    def status(self) -> LoaderStatus:
        d = self.dispatcher
        if d.state is DispatchState.ARMED:
            remaining = d.remaining(self.scene_manager.time_since_level_load())
        elif d.state is DispatchState.FIRED:
            remaining = 0.0
        else:
            remaining = None
        return LoaderStatus(d.state, d.matched_setting, remaining)
