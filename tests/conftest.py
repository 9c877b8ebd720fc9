import os

# headless pygame for every test module
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import json

import pytest

from events import EventManager


class FakeTime:
    """Manually advanced clock for LevelClock / AddressCache."""

    def __init__(self, t: float = 0.0):
        self.t = t

    def __call__(self) -> float:
        return self.t


@pytest.fixture
def fake_time():
    return FakeTime()


@pytest.fixture
def scene_file(tmp_path):
    def _make(stem: str, **data) -> str:
        path = tmp_path / f"{stem}.json"
        path.write_text(json.dumps(data))
        return str(path)
    return _make


@pytest.fixture(autouse=True)
def _empty_event_queue():
    EventManager.clear()
    yield
    EventManager.clear()
