#!/usr/bin/env python3
"""
app.py – pygame host for the IP-address based scene loader

Boots into config.ACTIVE_SCENE with an IPAddressSceneLoader attached,
runs its start hook once and its update hook every frame, and draws the
status panel until the matched scene replaces the boot scene.
Input is dispatched by events.py.
"""
from __future__ import annotations

from typing import AbstractSet, Callable, Optional, Sequence

import pygame

import config
from addresses      import local_addresses
from build_settings import load_build_settings
from events         import EventManager
from overlays       import AddressCache, draw_status, status_lines
from renderer       import render_scene
from scene_loader   import IPAddressSceneLoader
from scene_manager  import (LoadSceneMode, LoadSceneParameters, Scene,
                            SceneManager)
from scene_selector import Setting


def settings_from_config() -> list[Setting]:
    return [Setting(address, scene) for address, scene in config.SETTINGS]


# ── main application ───────────────────────────────────────────────────────
class SceneLoaderApp:
    def __init__(self,
                 settings: Optional[Sequence[Setting]] = None,
                 scene_manager: Optional[SceneManager] = None,
                 address_source: Callable[[], AbstractSet[str]] = local_addresses,
                 delay: Optional[float] = None,
                 parameters: Optional[LoadSceneParameters] = None):
        # window ----------------------------------------------------------
        pygame.init()
        self.screen = pygame.display.set_mode(
            (0, 0) if config.FULLSCREEN else config.WINDOWED_SIZE,
            pygame.FULLSCREEN if config.FULLSCREEN else 0,
        )
        pygame.display.set_caption("IP Scene Loader")
        self.clock = pygame.time.Clock()

        # core state ------------------------------------------------------
        self.settings = list(settings if settings is not None
                             else settings_from_config())
        if scene_manager is None:
            scene_manager = SceneManager(
                build_scenes=load_build_settings(config.BUILD_SETTINGS_PATH))
        self.scene_manager = scene_manager
        self.scene_manager.set_active(config.ACTIVE_SCENE)
        self.scene_manager.add_listener(self._on_scene_loaded)

        self.loader: Optional[IPAddressSceneLoader] = IPAddressSceneLoader(
            self.settings,
            self.scene_manager,
            delay=config.LOAD_DELAY_SEC if delay is None else delay,
            parameters=parameters or LoadSceneParameters(
                LoadSceneMode(config.LOAD_SCENE_MODE)),
            address_source=address_source,
        )
        self.shown_scene: Optional[Scene] = None

        # status display --------------------------------------------------
        self.show_settings  = config.SHOW_SETTINGS
        self.show_addresses = config.SHOW_ADDRESSES
        self.addresses = AddressCache(
            address_source, getattr(config, "ADDRESS_REFRESH_INTERVAL", 1.0))
        self.running = False

    # ── scene callbacks ----------------------------------------------------
    def _on_scene_loaded(self, scene: Scene, params: LoadSceneParameters):
        self.shown_scene = scene
        if params.mode is LoadSceneMode.SINGLE:
            # the boot scene and its loader are gone
            self.loader = None

    # ── per-frame pieces ---------------------------------------------------
    def start(self):
        self.running = True
        if self.loader:
            self.loader.start()

    def _handle_action(self, act: dict):
        t = act["type"]
        if t == "quit":
            self.running = False
        elif t == "toggle_settings":
            self.show_settings ^= True
        elif t == "toggle_addresses":
            self.show_addresses ^= True
        elif t == "toggle_fullscreen":
            config.FULLSCREEN ^= True
            self.screen = pygame.display.set_mode(
                (0, 0) if config.FULLSCREEN else config.WINDOWED_SIZE,
                pygame.FULLSCREEN if config.FULLSCREEN else 0)

    def current_status_lines(self) -> list[str]:
        loader = self.loader             # cleared by the main thread on load
        if not loader:
            return []
        return status_lines(
            loader.status(),
            self.settings,
            self.addresses.get(),
            self.show_settings,
            self.show_addresses,
        )

    def draw(self):
        if self.shown_scene is not None:
            render_scene(self.screen, self.shown_scene)
        else:
            self.screen.fill((0, 0, 0))

        lines = self.current_status_lines()
        if lines:
            draw_status(self.screen, lines, config.GUI_SCALE)

    def step(self):
        for e in pygame.event.get():
            EventManager.handle(e)

        # drain external queue (non-blocking)
        while (act := EventManager.poll()):
            self._handle_action(act)

        if self.loader:
            self.loader.update()

        self.draw()
        pygame.display.flip()

    # ── main loop ---------------------------------------------------------
    def run(self):
        self.start()
        try:
            while self.running:
                self.step()
                self.clock.tick(config.FPS)
        finally:
            pygame.quit()


if __name__ == "__main__":
    SceneLoaderApp().run()
