"""Menu and HUD rendering helpers for the pygame client."""

from __future__ import annotations

import pygame

TEXT = pygame.Color(230, 230, 230)
TEXT_MUTED = pygame.Color(160, 168, 182)
ACCENT = pygame.Color("#fbbf24")
DANGER = pygame.Color("#dc2626")


def draw_hud(app) -> None:
    surface = app.screen
    width = surface.get_width()
    panel = pygame.Rect(0, 0, width, app.hud_height)
    pygame.draw.rect(surface, pygame.Color(17, 24, 39), panel)
    pygame.draw.line(surface, pygame.Color(55, 65, 81), panel.bottomleft, panel.bottomright, 2)

    score_surface = app.font_regular.render(f"SCORE: {app.score}", True, ACCENT)
    surface.blit(score_surface, (12, (app.hud_height - score_surface.get_height()) // 2))

    if app.message:
        message_surface = app.font_small.render(app.message, True, TEXT_MUTED)
        rect = message_surface.get_rect()
        rect.midright = (width - 12, app.hud_height // 2)
        surface.blit(message_surface, rect)


def draw_menu_overlay(app) -> None:
    surface = app.screen
    width, height = surface.get_size()
    overlay = pygame.Surface((width, height), pygame.SRCALPHA)
    overlay.fill((5, 8, 15, 215))
    surface.blit(overlay, (0, 0))

    menu = app.menu
    title_color = DANGER if menu.state == "game_over_menu" else ACCENT
    title_surface = app.font_large.render(menu.title, True, title_color)
    title_rect = title_surface.get_rect(center=(width // 2, height // 4))
    surface.blit(title_surface, title_rect)

    y = title_rect.bottom + 40
    if menu.accepts_text:
        box = pygame.Rect(width // 10, y, width * 8 // 10, app.font_regular.get_height() + 16)
        pygame.draw.rect(surface, pygame.Color(31, 41, 55), box)
        pygame.draw.rect(surface, ACCENT, box, 2)
        caret = "_" if int(app.time_elapsed * 2) % 2 == 0 else " "
        text = menu.text + caret
        text_surface = app.font_regular.render(text, True, TEXT)
        # Show the tail of long prompts.
        visible = pygame.Rect(0, 0, box.width - 16, text_surface.get_height())
        visible.right = max(visible.width, text_surface.get_width())
        surface.blit(text_surface, (box.left + 8, box.top + 8), visible)
        y = box.bottom + 24
    else:
        for index, option in enumerate(menu.options):
            selected = index == menu.selection
            label = f"> {option.label} <" if selected else option.label
            option_surface = app.font_regular.render(label, True, ACCENT if selected else TEXT)
            option_rect = option_surface.get_rect(center=(width // 2, y))
            surface.blit(option_surface, option_rect)
            y += option_surface.get_height() + 14

    if menu.message:
        message_surface = app.font_small.render(menu.message, True, TEXT_MUTED)
        message_rect = message_surface.get_rect(center=(width // 2, y + 24))
        surface.blit(message_surface, message_rect)


__all__ = ["draw_hud", "draw_menu_overlay"]
