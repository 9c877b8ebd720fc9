"""
overlays.py

Pygame status panel for the scene loader.
"""

from __future__ import annotations

import time
from typing import AbstractSet, Sequence

import pygame

import config
from scene_loader   import LoaderStatus
from scene_selector import Setting

# ── colours ────────────────────────────────────────────────────────────────
WHITE = (255, 255, 255)
GREEN = (0, 255, 0)
BG    = (0, 0, 0, 180)

TITLE = "IPAddressSceneLoader"

pygame.font.init()


# ── helpers ────────────────────────────────────────────────────────────────
def _fmt_setting(s: Setting) -> str:
    return f"{s.address} : {s.scene}"


class AddressCache:
    """Interface list for display, re-read at most every *interval* s."""

    def __init__(self, source, interval: float = 1.0, now=time.monotonic):
        self._source   = source
        self._interval = interval
        self._now      = now
        self._last     = None
        self._value: list[str] = []

    def get(self) -> list[str]:
        t = self._now()
        if self._last is None or t - self._last >= self._interval:
            self._last  = t
            self._value = sorted(self._source())
        return self._value


# ── text ───────────────────────────────────────────────────────────────────
def status_lines(status: LoaderStatus,
                 settings: Sequence[Setting],
                 addresses: Sequence[str] | AbstractSet[str],
                 show_settings: bool = True,
                 show_addresses: bool = True) -> list[str]:
    lines = [TITLE]

    if status.matched is None:
        lines.append("Setting Not Found.")
    else:
        lines.append(_fmt_setting(status.matched))
        lines.append(f"This will be loading after {status.remaining:.1f} seconds.")

    if show_settings:
        lines.append("Settings")
        if not settings:
            lines.append(" - No Definitions")
        for s in settings:
            lines.append(f" - {_fmt_setting(s)}")

    if show_addresses:
        lines.append("Addresses")
        if not addresses:
            lines.append(" - No Definitions")
        for a in addresses:
            lines.append(f" - {a}")

    return lines


# ── main entry point ───────────────────────────────────────────────────────
def draw_status(surface: pygame.Surface,
                lines: Sequence[str],
                scale: float = getattr(config, "GUI_SCALE", 1.0)) -> pygame.Rect:
    """Blit *lines* top-left on a translucent panel, scaled by *scale*."""
    sh  = surface.get_height()
    pt  = max(12, int(max(12, sh // 40) * scale))
    pad = int(10 * scale)
    FT  = pygame.font.SysFont("monospace", pt)

    widest = max(FT.size(t)[0] for t in lines)
    pbg = pygame.Surface(
        (widest + 2 * pad, len(lines) * (FT.get_linesize() + 2) + pad),
        pygame.SRCALPHA,
    )
    pbg.fill(BG)
    y = pad // 2
    for i, t in enumerate(lines):
        pbg.blit(FT.render(t, True, GREEN if i == 0 else WHITE), (pad, y))
        y += FT.get_linesize() + 2
    return surface.blit(pbg, (pad, pad))
