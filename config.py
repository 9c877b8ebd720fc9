# config.py
"""
Configuration settings for the IP-address based scene loader.
"""

FPS = 30

# ── Scene selection ─────────────────────────────────────────────────────────

# Ordered (ip address, scene path) pairs. The first address bound to one of
# this machine's interfaces wins. A scene of None means "not assigned yet".
SETTINGS = [
    ("192.168.0.101", "scenes/lobby.json"),
    ("192.168.0.102", "scenes/stage.json"),
    ("192.168.0.103", "scenes/lobby.json"),
    ("127.0.0.1",     "scenes/stage.json"),
]

# Seconds to wait after a match before the scene is loaded
LOAD_DELAY_SEC = 10.0

# "single" replaces the running scene, "additive" loads on top of it
LOAD_SCENE_MODE = "single"

# Scene that hosts the loader (first entry of the build settings)
ACTIVE_SCENE = "scenes/boot.json"

# Written by build_settings.py; scenes missing from it refuse to load.
# Set to None to allow any scene file.
BUILD_SETTINGS_PATH = "build_settings.json"

# ── Status display ──────────────────────────────────────────────────────────

GUI_SCALE      = 1.25
SHOW_SETTINGS  = True
SHOW_ADDRESSES = True

# Seconds between re-reads of the interface list for the status display
ADDRESS_REFRESH_INTERVAL = 1.0

# Display settings
FULLSCREEN = False
WINDOWED_SIZE = (800, 600)

# ── Web remote ──────────────────────────────────────────────────────────────

WEB_REMOTE = True
WEB_PORT   = 8080
DIAG_REFRESH_INTERVAL = 1.0
