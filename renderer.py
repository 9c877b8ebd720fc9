import pygame

from scene_manager import Scene


def render_scene(surface: pygame.Surface, scene: Scene) -> None:
    """Full-screen background with the scene's title and lines centred."""
    w, h = surface.get_size()
    surface.fill(scene.background)

    font  = pygame.font.SysFont("monospace", max(12, h // 24))
    lines = [scene.name, ""] + scene.lines
    total = len(lines) * font.get_linesize()
    y     = (h - total) // 2
    for ln in lines:
        txt = font.render(ln, True, scene.color)
        x   = (w - txt.get_width()) // 2
        surface.blit(txt, (x, y))
        y += font.get_linesize()
