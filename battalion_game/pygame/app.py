"""Pygame-powered presentation layer for Tank Battalion."""

from __future__ import annotations

import logging
import random
from typing import List, Optional, Sequence

try:
    import pygame
except ImportError as exc:  # pragma: no cover - depends on runtime environment
    raise RuntimeError(
        "The pygame package is required to run the graphical version of Tank Battalion."
    ) from exc

from battalion_game.core.controls import InputState
from battalion_game.core.levels import LevelSettings, create_classic_level
from battalion_game.core.session import GameSession
from battalion_game.core.settings import SessionSettings
from battalion_game.level_generator import LevelGenerator
from battalion_game.pygame.config import load_user_settings, save_user_settings
from battalion_game.pygame.display import DisplayManager
from battalion_game.pygame.input import InputHandler
from battalion_game.pygame.menu_controller import MenuController, MenuDefinition, MenuOption
from battalion_game.pygame.menus import draw_hud, draw_menu_overlay
from battalion_game.pygame.renderer import draw_scene

logger = logging.getLogger(__name__)

FRAME_RATE = 60
MENU_STATES = {"main_menu", "prompt_menu", "pause_menu", "game_over_menu"}


class PygameBattalion:
    """Graphical client that drives a :class:`GameSession` once per frame."""

    def __init__(
        self,
        level: Optional[Sequence[Sequence[int]]] = None,
        level_prompt: Optional[str] = None,
        settings: Optional[SessionSettings] = None,
        seed: Optional[int] = None,
        cell_size: Optional[int] = None,
        hud_height: int = 48,
        level_generator: Optional[LevelGenerator] = None,
        start_in_menu: bool = True,
        debug: bool = False,
    ) -> None:
        pygame.init()
        pygame.font.init()

        self.debug = debug
        if debug:
            logging.getLogger("battalion_game").setLevel(logging.DEBUG)
        self.settings = settings or SessionSettings()
        self._user_settings = load_user_settings()
        if cell_size is None:
            cell_size = int(self._user_settings["cell_size"])

        self.display = DisplayManager(
            cell_size=cell_size,
            hud_height=hud_height,
            caption="Tank Battalion AI",
        )
        self.display.configure_grid(self.settings.grid_size)

        self.font_small = pygame.font.SysFont("consolas", 16)
        self.font_regular = pygame.font.SysFont("consolas", 22)
        self.font_large = pygame.font.SysFont(None, 56)

        self.clock = pygame.time.Clock()
        self.running = True
        self._time_elapsed = 0.0
        self._rng = random.Random(seed)

        self.level_generator = level_generator or LevelGenerator(
            size=self.settings.grid_size,
            model=str(self._user_settings["model"]),
        )
        self.input_state = InputState()
        self.input = InputHandler(self)
        self.menu = MenuController()
        self._register_menus()

        self.session: Optional[GameSession] = None
        self.level: List[List[int]] = []
        self.score = 0
        self.final_score: Optional[int] = None
        self.message = ""
        self.state = "main_menu"

        if level_prompt:
            self._start_match(self._generate_level(level_prompt))
        elif level is not None:
            self._start_match([list(row) for row in level])
        elif start_in_menu:
            self._activate_menu("main_menu")
        else:
            self._action_play_classic()

    # ------------------------------------------------------------------
    # Properties
    @property
    def cell_size(self) -> int:
        return self.display.cell_size

    @property
    def hud_height(self) -> int:
        return self.display.hud_height

    @property
    def screen(self) -> pygame.Surface:
        return self.display.screen

    @property
    def time_elapsed(self) -> float:
        return self._time_elapsed

    # ------------------------------------------------------------------
    # Menus
    def _register_menus(self) -> None:
        self.menu.register(
            "main_menu",
            MenuDefinition(
                title="TANK BATTALION AI",
                build_options=lambda: [
                    MenuOption("Play Classic Mode", self._action_play_classic),
                    MenuOption("Generate Level", self._action_open_prompt),
                    MenuOption("Exit Game", self._action_exit_game),
                ],
                message="WASD or arrows to move, SPACE to fire. Defend the eagle base.",
            ),
        )
        self.menu.register(
            "prompt_menu",
            MenuDefinition(
                title="Describe Your Battlefield",
                build_options=list,
                message="Type a description and press Enter (Esc to go back).",
                accepts_text=True,
                on_submit=self._submit_prompt,
            ),
        )
        self.menu.register(
            "pause_menu",
            MenuDefinition(
                title="Paused",
                build_options=lambda: [
                    MenuOption("Resume Game", self._action_resume_game),
                    MenuOption("Abort Mission", self._action_abort_mission),
                ],
            ),
        )
        self.menu.register(
            "game_over_menu",
            MenuDefinition(
                title="GAME OVER",
                build_options=lambda: [
                    MenuOption("Play Again", self._action_play_again),
                    MenuOption("Return to Base", self._action_return_to_base),
                ],
            ),
        )

    def _activate_menu(self, name: str, message: Optional[str] = None) -> None:
        self.input_state.clear()
        self.menu.activate(name, message=message)
        self.state = name
        if self.menu.accepts_text:
            pygame.key.start_text_input()
        else:
            pygame.key.stop_text_input()
        self._debug(f"Menu activated: {name}")

    def _close_menu(self) -> None:
        self.menu.close()
        self.state = "playing"
        pygame.key.stop_text_input()

    # ------------------------------------------------------------------
    # Actions
    def _action_play_classic(self) -> None:
        level_settings = LevelSettings(
            size=self.settings.grid_size,
            seed=self._rng.randrange(1 << 30),
        )
        self.message = "Classic mode"
        self._start_match(create_classic_level(level_settings))

    def _action_open_prompt(self) -> None:
        self._activate_menu("prompt_menu")

    def _submit_prompt(self, text: str) -> None:
        if not text.strip():
            self.menu.message = "Describe the battlefield first."
            return
        self.menu.message = "Generating level..."
        self._draw()
        self._start_match(self._generate_level(text))

    def _generate_level(self, prompt: str) -> List[List[int]]:
        grid = self.level_generator.generate(prompt)
        if self.level_generator.last_error:
            self.message = "Level service unavailable, using default map"
        else:
            self.message = "Generated level"
        return grid

    def _action_resume_game(self) -> None:
        self._close_menu()

    def _action_abort_mission(self) -> None:
        if self.session is not None:
            self.session.stop()
        self._activate_menu("main_menu")

    def _action_play_again(self) -> None:
        self._start_match(self.level)

    def _action_return_to_base(self) -> None:
        self._activate_menu("main_menu")

    def _action_exit_game(self) -> None:
        if self.session is not None:
            self.session.stop()
        self._persist_user_settings()
        self.running = False

    def _persist_user_settings(self) -> None:
        data = dict(self._user_settings)
        data["cell_size"] = self.cell_size
        save_user_settings(data)
        self._user_settings = data

    def _debug(self, message: str) -> None:
        if self.debug:
            logger.debug(message)

    # ------------------------------------------------------------------
    # Session lifecycle
    def _start_match(self, level: List[List[int]]) -> None:
        if self.session is not None:
            self.session.stop()
        self.level = level
        self.score = 0
        self.final_score = None
        self.input_state.clear()
        self.session = GameSession(
            level,
            self.settings,
            rng=random.Random(self._rng.randrange(1 << 30)),
            input_state=self.input_state,
            on_game_over=self._on_game_over,
            on_score_change=self._on_score_change,
        )
        self._close_menu()
        self._debug(f"Match started with {len(self.session.enemies)} enemies")

    def _on_score_change(self, score: int) -> None:
        self.score = score

    def _on_game_over(self, score: int, won: bool) -> None:
        self.final_score = score
        self._activate_menu("game_over_menu", message=f"FINAL SCORE: {score}")
        self.menu.title = "VICTORY" if won else "GAME OVER"

    # ------------------------------------------------------------------
    # Game loop
    def run(self) -> None:
        """Main pygame loop."""

        while self.running:
            dt = self.clock.tick(FRAME_RATE) / 1000.0
            self._handle_events()
            self._update(dt)
            self._draw()
        if self.session is not None:
            self.session.stop()
        pygame.quit()

    def _handle_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._action_exit_game()
            else:
                self.input.process_event(event)

    def _update(self, dt: float) -> None:
        self._time_elapsed += dt
        if self.state != "playing" or self.session is None:
            return
        if self.session.running:
            self.session.step()

    def _draw(self) -> None:
        self.screen.fill((0, 0, 0))
        if self.session is not None:
            draw_scene(self, self.session.snapshot())
        draw_hud(self)
        if self.state in MENU_STATES:
            draw_menu_overlay(self)
        pygame.display.flip()


def run_pygame(**kwargs: object) -> None:
    """Convenience helper for launching the pygame client."""

    app = PygameBattalion(**kwargs)
    app.run()
