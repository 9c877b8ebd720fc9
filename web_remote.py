#!/usr/bin/env python3
"""
web_remote.py  –  status page + diagnostics + remote control

Endpoints
---------
/               → HTML page with buttons, status text and diagnostics
/status         → JSON object: loader state, matched setting, status lines
/diag, /data    → JSON object of diagnostic metrics
/action?cmd=…   → inject control commands (settings, addresses, quit)
"""

from __future__ import annotations
import http.server
import socketserver
import threading
import urllib.parse
import json
import time
import traceback
import psutil
import platform
from typing import TYPE_CHECKING, Any

from addresses import local_addresses
from events    import EventManager
import config

if TYPE_CHECKING:                       # avoid circular import at runtime
    from app import SceneLoaderApp

# ── diagnostics refresh cadence ───────────────────────────────────────────
_last_diag_time = 0.0
_diag_interval  = getattr(config, "DIAG_REFRESH_INTERVAL", 1.0)

# ── global diagnostic store ───────────────────────────────────────────────
monitor_data: dict[str, Any] = {
    "interfaces_up":     [],
    "local_addresses":   [],
    "script_uptime":     "0d 00:00:00",
    "last_http_crash":   "",
    "python_version":    platform.python_version(),
}

_script_start = time.monotonic()

_ACTIONS = {
    "settings":  {"type": "toggle_settings"},
    "addresses": {"type": "toggle_addresses"},
    "quit":      {"type": "quit"},
}


# ── helpers ────────────────────────────────────────────────────────────────
def _fmt_duration(secs: float) -> str:
    d, rem = divmod(int(secs), 86400)
    h, rem = divmod(rem, 3600)
    m, s   = divmod(rem, 60)
    return f"{d}d {h:02}:{m:02}:{s:02}"


def _maybe_update_diagnostics() -> None:
    global _last_diag_time
    now = time.monotonic()
    if now - _last_diag_time >= _diag_interval:
        _last_diag_time = now
        _update_diagnostics()


def _update_diagnostics() -> None:
    """Refresh interface state and the address list in `monitor_data`."""
    monitor_data["interfaces_up"] = sorted(
        nic for nic, st in psutil.net_if_stats().items() if st.isup)
    monitor_data["local_addresses"] = sorted(local_addresses())
    monitor_data["script_uptime"] = _fmt_duration(time.monotonic() - _script_start)


def status_payload(app: "SceneLoaderApp") -> dict[str, Any]:
    """Read-only snapshot of the loader for /status."""
    active = app.scene_manager.active_scene
    payload: dict[str, Any] = {
        "active_scene": active.path if active else None,
        "state":        "unloaded",
        "matched":      None,
        "remaining":    None,
        "lines":        app.current_status_lines(),
    }
    loader = app.loader
    if loader:
        st = loader.status()
        payload["state"]     = st.state.value
        payload["remaining"] = st.remaining
        if st.matched:
            payload["matched"] = {"address": st.matched.address,
                                  "scene":   st.matched.scene}
    return payload


# ── reusable threaded HTTP server ──────────────────────────────────────────
class ReusableTCPServer(socketserver.ThreadingMixIn, http.server.HTTPServer):
    daemon_threads      = True
    allow_reuse_address = True


# ── request handler ────────────────────────────────────────────────────────
class RemoteHandler(http.server.BaseHTTPRequestHandler):
    def log_message(self, *args):
        return  # silence default logging

    def do_GET(self):
        parsed = urllib.parse.urlparse(self.path)
        path, qs = parsed.path, parsed.query

        if path == "/":
            return self._serve_html()
        if path == "/status":
            return self._serve_json(status_payload(self.server.app))   # type: ignore
        if path in ("/diag", "/data"):
            _maybe_update_diagnostics()
            return self._serve_json(monitor_data)
        if path == "/action":
            return self._serve_action(qs)

        self.send_error(404, "Not found")

    # ── helpers for each route ───────────────────────────────────────────
    def _serve_html(self):
        b = HTML_PAGE.encode("utf-8")
        self.send_response(200)
        self.send_header("Content-Type", "text/html")
        self.send_header("Content-Length", str(len(b)))
        self.end_headers()
        self.wfile.write(b)

    def _serve_json(self, obj: Any):
        b = json.dumps(obj).encode("utf-8")
        self.send_response(200)
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(b)))
        self.end_headers()
        self.wfile.write(b)

    def _serve_action(self, query: str):
        qs = urllib.parse.parse_qs(query)
        cmd = qs.get("cmd", [""])[0]

        action = _ACTIONS.get(cmd)
        if action is None:
            return self.send_error(400, "Unknown cmd")
        EventManager.post(dict(action))

        self.send_response(204)
        self.end_headers()


# ── simple HTML UI ─────────────────────────────────────────────────────────
HTML_PAGE = """
<!doctype html><html><head><meta charset="utf-8">
<title>Scene Loader Status</title>
<style>
 body{background:#000;color:#0f0;font-family:monospace;padding:1em;}
 a.button{display:inline-block;margin:4px;padding:6px 12px;border:1px solid #0f0;
          text-decoration:none;color:#0f0;}
 pre{margin:0.5em 0;font-family:monospace;}
</style></head><body>
<h2>IP Scene Loader</h2>
<a class="button" href="/action?cmd=settings">Toggle settings</a>
<a class="button" href="/action?cmd=addresses">Toggle addresses</a>
<a class="button" href="/action?cmd=quit">Quit</a>

<div><h3>Status</h3><pre id="status"></pre></div>
<div><h3>Diagnostics</h3><pre id="diag"></pre></div>

<script>
 async function refreshUI(){
   try {
     let s  = await fetch('/status'); let st = await s.json();
     document.getElementById('status').textContent =
       'active scene  ' + st.active_scene + '\\n' + st.lines.join('\\n');
     let d  = await fetch('/diag');    let dg = await d.json();
     let txt = '';
     for (let [k,v] of Object.entries(dg)){
       txt += k.padEnd(20,' ') + v + '\\n';
     }
     document.getElementById('diag').textContent = txt;
   } catch(e){
     console.error(e);
   }
 }
 setInterval(refreshUI, 500);
 refreshUI();
</script>
</body></html>
"""


# ── server bootstrap with auto-restart ────────────────────────────────────
def start(app: "SceneLoaderApp", port: int = getattr(config, "WEB_PORT", 8080)):
    def _serve_loop():
        while True:
            try:
                with ReusableTCPServer(("", port), RemoteHandler) as httpd:
                    httpd.app = app
                    httpd.serve_forever()
            except Exception:
                monitor_data["last_http_crash"] = traceback.format_exc()
                time.sleep(1)

    threading.Thread(target=_serve_loop, daemon=True).start()
    print(f"[web_remote] status & diagnostics listening on port {port}")
