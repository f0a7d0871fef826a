"""Window management for the pygame client."""

from __future__ import annotations

from typing import Tuple

import pygame


class DisplayManager:
    """Own the pygame window sized to the battlefield plus the HUD strip."""

    def __init__(self, *, cell_size: int, hud_height: int, caption: str) -> None:
        self.caption = caption
        self.cell_size = cell_size
        self.hud_height = hud_height
        self.grid_size = 0
        self.screen: pygame.Surface = pygame.display.set_mode((640, 480))
        pygame.display.set_caption(self.caption)

    @property
    def playfield_size(self) -> int:
        return self.grid_size * self.cell_size

    @property
    def window_size(self) -> Tuple[int, int]:
        return (self.playfield_size, self.playfield_size + self.hud_height)

    def configure_grid(self, grid_size: int) -> None:
        """Resize the window for a ``grid_size`` x ``grid_size`` map."""
        self.grid_size = grid_size
        if self.screen.get_size() != self.window_size:
            self.screen = pygame.display.set_mode(self.window_size)
            pygame.display.set_caption(self.caption)


__all__ = ["DisplayManager"]
