"""
scene_manager.py

Scene registry for the loader host.

A scene is a small JSON file describing a title card:

    {"name": "Lobby", "background": [0, 0, 0], "color": [0, 255, 0],
     "lines": ["Welcome"]}

Every key is optional; `name` falls back to the file stem.
`load_scene()` honours the build list written by build_settings.py and
restarts the level clock on a SINGLE load.
"""

from __future__ import annotations

import enum
import json
import os
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence, Tuple

from timing import LevelClock

RGB = Tuple[int, int, int]


class SceneLoadError(Exception):
    """Raised when a scene reference cannot be loaded."""


class LoadSceneMode(enum.Enum):
    SINGLE   = "single"
    ADDITIVE = "additive"


@dataclass(frozen=True)
class LoadSceneParameters:
    mode: LoadSceneMode = LoadSceneMode.SINGLE


# ── Data structures ─────────────────────────────────────────────────────────
@dataclass
class Scene:
    path: str
    name: str = ""
    background: RGB = (0, 0, 0)
    color: RGB = (0, 255, 0)
    lines: List[str] = field(default_factory=list)


def _rgb(value, default: RGB) -> RGB:
    if value is None:
        return default
    r, g, b = value
    return int(r), int(g), int(b)


def read_scene(path: str) -> Scene:
    """Parse a scene file. Errors surface as SceneLoadError."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as exc:
        raise SceneLoadError(f"cannot read scene {path!r}: {exc}") from exc

    if not isinstance(data, dict):
        raise SceneLoadError(f"scene {path!r} is not a JSON object")

    stem = os.path.splitext(os.path.basename(path))[0]
    try:
        return Scene(
            path=path,
            name=str(data.get("name") or stem),
            background=_rgb(data.get("background"), (0, 0, 0)),
            color=_rgb(data.get("color"), (0, 255, 0)),
            lines=[str(ln) for ln in data.get("lines", [])],
        )
    except (TypeError, ValueError) as exc:
        raise SceneLoadError(f"scene {path!r} is malformed: {exc}") from exc


# ── Scene manager ───────────────────────────────────────────────────────────
class SceneManager:
    """Tracks loaded scenes and the time since the last SINGLE load."""

    # ---------------------------------------------------------------- init
    def __init__(self,
                 build_scenes: Optional[Sequence[str]] = None,
                 clock: Optional[LevelClock] = None) -> None:
        # None = no build list, every readable file may load
        self.build_scenes: Optional[List[str]] = (
            [os.path.normpath(p) for p in build_scenes]
            if build_scenes is not None else None
        )
        self.clock = clock or LevelClock()
        self.loaded_scenes: List[Scene] = []
        self.active_scene: Optional[Scene] = None
        self._listeners: List[Callable[[Scene, LoadSceneParameters], None]] = []

    # ------------------------------------------------------------- queries
    def time_since_level_load(self) -> float:
        return self.clock.since_load()

    def add_listener(self,
                     fn: Callable[[Scene, LoadSceneParameters], None]) -> None:
        self._listeners.append(fn)

    # ------------------------------------------------------------- loading
    def set_active(self, path: str) -> Scene:
        """Mark *path* as the running scene without reading it from disk."""
        stem = os.path.splitext(os.path.basename(path))[0]
        scene = Scene(path=path, name=stem)
        self.loaded_scenes = [scene]
        self.active_scene = scene
        self.clock.reset()
        return scene

    def load_scene(self, path: Optional[str],
                   parameters: Optional[LoadSceneParameters] = None) -> Scene:
        parameters = parameters or LoadSceneParameters()
        if not path:
            raise SceneLoadError("scene reference is not assigned")
        if (self.build_scenes is not None
                and os.path.normpath(path) not in self.build_scenes):
            raise SceneLoadError(
                f"scene {path!r} is not in the build settings; "
                f"run build_settings.py first"
            )

        scene = read_scene(path)

        if parameters.mode is LoadSceneMode.SINGLE:
            self.loaded_scenes = [scene]
            self.active_scene = scene
            self.clock.reset()
        else:
            self.loaded_scenes.append(scene)

        print(f"[scene_manager] loaded {path} ({parameters.mode.value})")
        for fn in list(self._listeners):
            fn(scene, parameters)
        return scene
