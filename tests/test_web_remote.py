import json
import threading
import urllib.error
import urllib.request
from types import SimpleNamespace

import pytest

import web_remote
from events import EventManager
from scene_loader import IPAddressSceneLoader
from scene_manager import SceneManager
from scene_selector import Setting
from timing import LevelClock


class _App:
    """Just enough of SceneLoaderApp for the remote."""

    def __init__(self, loader, mgr):
        self.loader = loader
        self.scene_manager = mgr

    def current_status_lines(self):
        return ["IPAddressSceneLoader"] if self.loader else []


@pytest.fixture
def app(fake_time):
    mgr = SceneManager(clock=LevelClock(fake_time))
    mgr.set_active("scenes/boot.json")
    loader = IPAddressSceneLoader([Setting("10.0.0.1", "scenes/lobby.json")], mgr,
                                  delay=10.0, address_source=lambda: {"10.0.0.1"})
    loader.start()
    fake_time.t = 3.0
    return _App(loader, mgr)


@pytest.fixture
def server(app):
    httpd = web_remote.ReusableTCPServer(("127.0.0.1", 0), web_remote.RemoteHandler)
    httpd.app = app
    t = threading.Thread(target=httpd.serve_forever, daemon=True)
    t.start()
    yield f"http://127.0.0.1:{httpd.server_address[1]}"
    httpd.shutdown()
    httpd.server_close()


def test_status_payload(app):
    payload = web_remote.status_payload(app)
    assert payload["active_scene"] == "scenes/boot.json"
    assert payload["state"] == "armed"
    assert payload["matched"] == {"address": "10.0.0.1", "scene": "scenes/lobby.json"}
    assert payload["remaining"] == pytest.approx(7.0)


def test_status_payload_after_loader_torn_down(app):
    app.loader = None
    payload = web_remote.status_payload(app)
    assert payload["state"] == "unloaded"
    assert payload["lines"] == []


def test_status_endpoint(server):
    with urllib.request.urlopen(server + "/status") as resp:
        data = json.loads(resp.read())
    assert data["state"] == "armed"


def test_diag_endpoint(server):
    with urllib.request.urlopen(server + "/diag") as resp:
        data = json.loads(resp.read())
    assert isinstance(data["local_addresses"], list)
    assert "interfaces_up" in data and "script_uptime" in data


def test_action_endpoint_posts_event(server):
    with urllib.request.urlopen(server + "/action?cmd=settings") as resp:
        assert resp.status == 204
    assert EventManager.poll() == {"type": "toggle_settings"}


def test_unknown_action_rejected(server):
    with pytest.raises(urllib.error.HTTPError) as err:
        urllib.request.urlopen(server + "/action?cmd=reboot")
    assert err.value.code == 400


def test_diagnostics_report_interfaces_and_addresses(monkeypatch):
    stats = {"eth0": SimpleNamespace(isup=True), "wlan0": SimpleNamespace(isup=False),
             "lo": SimpleNamespace(isup=True)}
    monkeypatch.setattr(web_remote.psutil, "net_if_stats", lambda: stats)
    monkeypatch.setattr(web_remote, "local_addresses", lambda: {"10.0.0.1", "127.0.0.1"})

    web_remote._update_diagnostics()
    assert web_remote.monitor_data["interfaces_up"] == ["eth0", "lo"]
    assert web_remote.monitor_data["local_addresses"] == ["10.0.0.1", "127.0.0.1"]
