"""Input handling for the pygame client."""

from __future__ import annotations

import pygame

_CONFIRM_KEYS = {pygame.K_RETURN, pygame.K_SPACE, pygame.K_KP_ENTER}


class InputHandler:
    """Translate pygame events into held keys or menu actions."""

    def __init__(self, app) -> None:
        self.app = app

    # ------------------------------------------------------------------
    # Event entry point
    def process_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.KEYDOWN:
            self._handle_key_down(event.key)
        elif event.type == pygame.KEYUP:
            self.app.input_state.release(pygame.key.name(event.key))
        elif event.type == pygame.TEXTINPUT:
            if self.app.menu.accepts_text:
                self.app.menu.type_text(event.text)

    # ------------------------------------------------------------------
    # Internal helpers
    def _handle_key_down(self, key: int) -> None:
        app = self.app
        if app.state != "playing":
            self._handle_menu_key(key)
            return
        if key == pygame.K_ESCAPE:
            app._activate_menu("pause_menu")
            return
        app.input_state.press(pygame.key.name(key))

    def _handle_menu_key(self, key: int) -> None:
        app = self.app
        menu = app.menu

        if menu.accepts_text:
            if key == pygame.K_ESCAPE:
                app._activate_menu("main_menu")
            elif key in {pygame.K_RETURN, pygame.K_KP_ENTER}:
                menu.submit_text()
            elif key == pygame.K_BACKSPACE:
                menu.backspace()
            return

        if key == pygame.K_ESCAPE:
            if app.state == "main_menu":
                app._action_exit_game()
            elif app.state == "pause_menu":
                app._action_resume_game()
            elif app.state == "game_over_menu":
                app._action_return_to_base()
            return

        if key in {pygame.K_UP, pygame.K_w}:
            menu.change_selection(-1)
        elif key in {pygame.K_DOWN, pygame.K_s}:
            menu.change_selection(1)
        elif key in _CONFIRM_KEYS:
            menu.execute_current()


__all__ = ["InputHandler"]
