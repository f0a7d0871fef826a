import json

import pygame
import pytest

from battalion_game import PygameBattalion
from battalion_game.core.levels import create_default_level
from battalion_game.level_generator import LevelGenerator
from battalion_game.pygame import config


class CannedClient:
    def __init__(self, response):
        self.response = response
        self.prompts = []

    def request_layout(self, prompt):
        self.prompts.append(prompt)
        return self.response


@pytest.fixture
def headless(monkeypatch, tmp_path):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    monkeypatch.setattr(config, "_SETTINGS_PATH", tmp_path / "user_settings.json", raising=False)
    yield tmp_path
    pygame.quit()


def _key(key: int) -> pygame.event.Event:
    return pygame.event.Event(pygame.KEYDOWN, key=key)


def _choose(app, label: str) -> None:
    for option in app.menu.options:
        if option.label == label:
            option.action()
            return
    raise AssertionError(f"{label!r} not offered in {app.state}")


@pytest.mark.smoke
def test_pygame_client_initialises(headless) -> None:
    """Ensure the graphical client can boot in a headless environment."""

    app = PygameBattalion(start_in_menu=True, debug=False)
    try:
        assert app.state == "main_menu"
        assert app.menu.state == "main_menu"
        assert [option.label for option in app.menu.options] == [
            "Play Classic Mode",
            "Generate Level",
            "Exit Game",
        ]
        assert app.session is None
        assert app.screen.get_size() == (26 * 24, 26 * 24 + 48)
        app._draw()
    finally:
        app.running = False


@pytest.mark.smoke
def test_classic_mode_runs_and_pauses(headless) -> None:
    app = PygameBattalion(start_in_menu=True, seed=3)
    try:
        _choose(app, "Play Classic Mode")
        assert app.state == "playing"
        session = app.session
        assert session is not None and session.running

        app.input.process_event(_key(pygame.K_LEFT))
        assert app.input_state.is_held("left")
        app._update(1 / 60)
        app._draw()
        assert session.tick == 1

        app.input.process_event(_key(pygame.K_ESCAPE))
        assert app.state == "pause_menu"
        assert not app.input_state.is_held("left")
        app._update(1 / 60)
        assert session.tick == 1

        app.input.process_event(_key(pygame.K_DOWN))
        app.input.process_event(_key(pygame.K_RETURN))
        assert app.state == "main_menu"
        assert session.running is False
    finally:
        app.running = False


@pytest.mark.smoke
def test_prompt_menu_generates_a_level(headless) -> None:
    layout = create_default_level()
    layout[10][10] = 3
    client = CannedClient(json.dumps({"layout": layout}))
    app = PygameBattalion(level_generator=LevelGenerator(client))
    try:
        _choose(app, "Generate Level")
        assert app.state == "prompt_menu"
        assert app.menu.accepts_text

        app.input.process_event(pygame.event.Event(pygame.TEXTINPUT, text="lakes"))
        app.input.process_event(_key(pygame.K_BACKSPACE))
        app.input.process_event(pygame.event.Event(pygame.TEXTINPUT, text="s!"))
        app.input.process_event(_key(pygame.K_RETURN))

        assert client.prompts == ["lakes!"]
        assert app.state == "playing"
        assert app.session.grid.tile_at(10, 10) == 3
        assert app.message == "Generated level"
    finally:
        app.running = False


@pytest.mark.smoke
def test_failed_generation_plays_the_default_map(headless) -> None:
    app = PygameBattalion(
        level_prompt="volcano",
        level_generator=LevelGenerator(CannedClient("not json")),
    )
    try:
        assert app.state == "playing"
        assert app.level == create_default_level()
        assert "unavailable" in app.message
    finally:
        app.running = False


@pytest.mark.smoke
def test_base_loss_opens_game_over_menu(headless) -> None:
    app = PygameBattalion(level=create_default_level(), seed=1)
    try:
        assert app.state == "playing"
        app.session.base_destroyed = True
        app._update(1 / 60)

        assert app.state == "game_over_menu"
        assert app.menu.title == "GAME OVER"
        assert app.menu.message == "FINAL SCORE: 0"
        assert app.final_score == 0

        _choose(app, "Play Again")
        assert app.state == "playing"
        assert app.session.running
    finally:
        app.running = False


@pytest.mark.smoke
def test_user_settings_round_trip(headless) -> None:
    config.save_user_settings({"cell_size": 16, "model": "custom-model"})
    stored = json.loads((headless / "user_settings.json").read_text(encoding="utf-8"))
    assert stored["cell_size"] == 16

    app = PygameBattalion()
    try:
        assert app.cell_size == 16
        assert app.level_generator.client.model == "custom-model"
        assert app.screen.get_size() == (26 * 16, 26 * 16 + 48)
    finally:
        app.running = False


@pytest.mark.smoke
def test_escape_on_main_menu_exits_and_saves_settings(headless) -> None:
    app = PygameBattalion(cell_size=20)
    app.input.process_event(_key(pygame.K_ESCAPE))

    assert app.running is False
    stored = json.loads((headless / "user_settings.json").read_text(encoding="utf-8"))
    assert stored["cell_size"] == 20
    assert stored["model"] == config.DEFAULT_USER_SETTINGS["model"]
