"""
build_settings.py  – one-shot build list writer
Registers every scene referenced by config.SETTINGS, behind the active
(boot) scene, so SceneManager will agree to load them.
"""
from __future__ import annotations
import os, json, time, pathlib, typing as _t

from scene_selector import Setting


class BuildSettingsError(Exception):
    """Raised when the build settings file cannot be read."""


# ---------- collect -------------------------------------------------------
def collect_build_scenes(settings: _t.Iterable[Setting],
                         active_scene: str) -> list[str]:
    """
    Active scene first, then each referenced scene path once, in the order
    it first appears. Unassigned scenes are skipped.
    """
    paths: list[str] = []
    for s in settings:
        if s.scene is None or s.scene in paths:
            continue
        paths.append(s.scene)
    paths.insert(0, active_scene)
    return paths


# ---------- read / write --------------------------------------------------
def write_build_settings(paths: _t.Sequence[str], out_path: str) -> dict:
    data = {
        "generated": time.time(),
        "scenes": [{"path": p, "enabled": True} for p in paths],
    }
    pathlib.Path(out_path).write_text(json.dumps(data, indent=2))
    print(f"[build_settings] {len(paths)} scene(s) written → {out_path}")
    return data


def load_build_settings(path: str | None) -> list[str] | None:
    """Enabled scene paths, or None when there is no build settings file."""
    if not path or not os.path.isfile(path):
        return None
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        return [str(rec["path"]) for rec in data.get("scenes", [])
                if rec.get("enabled", True)]
    except (OSError, ValueError, KeyError, TypeError, AttributeError) as exc:
        raise BuildSettingsError(f"malformed build settings {path!r}: {exc!r}") from exc


def setup_build_settings(settings: _t.Iterable[Setting],
                         active_scene: str,
                         out_path: str) -> list[str]:
    paths = collect_build_scenes(settings, active_scene)
    write_build_settings(paths, out_path)
    return paths


# -------------------------------------------------------------------------
if __name__ == "__main__":
    import argparse
    import config
    ap = argparse.ArgumentParser(description="Register configured scenes in the build settings")
    ap.add_argument("--out", default=config.BUILD_SETTINGS_PATH or "build_settings.json",
                    help="build settings file (default: %(default)s)")
    ap.add_argument("--active", default=config.ACTIVE_SCENE,
                    help="scene placed first in the list (default: %(default)s)")
    args = ap.parse_args()

    setup_build_settings([Setting(a, s) for a, s in config.SETTINGS],
                         args.active, args.out)
