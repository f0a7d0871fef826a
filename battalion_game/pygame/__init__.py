"""Pygame front-end for Tank Battalion."""

from battalion_game.pygame.app import PygameBattalion, run_pygame

__all__ = ["PygameBattalion", "run_pygame"]
