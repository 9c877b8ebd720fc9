import pygame

from overlays import TITLE, AddressCache, draw_status, status_lines
from scene_loader import LoaderStatus
from scene_selector import DispatchState, Setting

S1 = Setting("10.0.0.1", "scenes/lobby.json")


def test_not_found_with_everything_shown():
    st = LoaderStatus(DispatchState.IDLE, None, None)
    lines = status_lines(st, [S1], ["127.0.0.1"])
    assert lines == [
        TITLE,
        "Setting Not Found.",
        "Settings",
        " - 10.0.0.1 : scenes/lobby.json",
        "Addresses",
        " - 127.0.0.1",
    ]


def test_armed_shows_match_and_countdown():
    st = LoaderStatus(DispatchState.ARMED, S1, 7.3)
    lines = status_lines(st, [S1], ["10.0.0.1"], show_settings=False,
                         show_addresses=False)
    assert lines == [
        TITLE,
        "10.0.0.1 : scenes/lobby.json",
        "This will be loading after 7.3 seconds.",
    ]


def test_empty_lists_say_no_definitions():
    st = LoaderStatus(DispatchState.IDLE, None, None)
    lines = status_lines(st, [], [])
    assert lines.count(" - No Definitions") == 2


def test_unassigned_scene_is_printed_as_none():
    st = LoaderStatus(DispatchState.IDLE, None, None)
    lines = status_lines(st, [Setting("10.0.0.9")], [], show_addresses=False)
    assert " - 10.0.0.9 : None" in lines


def test_address_cache_refreshes_on_interval(fake_time):
    reads = []

    def source():
        reads.append(fake_time.t)
        return {"b", "a"}

    cache = AddressCache(source, interval=1.0, now=fake_time)
    assert cache.get() == ["a", "b"]
    fake_time.t = 0.5
    cache.get()
    fake_time.t = 1.0
    cache.get()
    assert reads == [0.0, 1.0]


def test_draw_status_blits_panel():
    surface = pygame.Surface((640, 480))
    rect = draw_status(surface, [TITLE, "Setting Not Found."], scale=1.25)
    assert rect.width > 0 and rect.height > 0
    assert rect.topleft == (12, 12)
