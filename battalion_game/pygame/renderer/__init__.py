"""Rendering helpers for the pygame front-end."""

from battalion_game.pygame.renderer.scene import (
    draw_background,
    draw_bullets,
    draw_grid,
    draw_scene,
    draw_tanks,
)

__all__ = [
    "draw_background",
    "draw_bullets",
    "draw_grid",
    "draw_scene",
    "draw_tanks",
]
