import random
from typing import List

import pytest

from battalion_game.core.grid import TileType
from battalion_game.core.session import GameSession
from battalion_game.core.settings import SessionSettings

GRID_SIZE = 26


def empty_level(size: int = GRID_SIZE) -> List[List[int]]:
    return [[int(TileType.EMPTY)] * size for _ in range(size)]


def bordered_level(size: int = GRID_SIZE) -> List[List[int]]:
    """Steel border with a lone base at the bottom center."""
    grid = empty_level(size)
    for i in range(size):
        grid[0][i] = grid[size - 1][i] = int(TileType.STEEL)
        grid[i][0] = grid[i][size - 1] = int(TileType.STEEL)
    grid[size - 2][size // 2] = int(TileType.BASE)
    return grid


@pytest.fixture
def quiet_settings() -> SessionSettings:
    """Settings with every random enemy behaviour switched off."""

    return SessionSettings(
        enemy_turn_chance=0.0,
        enemy_fire_chance=0.0,
        enemy_spawn_chance=0.0,
    )


@pytest.fixture
def open_session(quiet_settings: SessionSettings) -> GameSession:
    return GameSession(
        empty_level(),
        quiet_settings,
        rng=random.Random(1234),
        spawn_initial_enemies=False,
    )


def run_until(session: GameSession, predicate, max_ticks: int = 500):
    """Step ``session`` until ``predicate(report)`` holds; return the report."""
    for _ in range(max_ticks):
        report = session.step()
        if predicate(report):
            return report
    raise AssertionError(f"condition not reached within {max_ticks} ticks")


def fire_once(session: GameSession):
    """Hold the fire key for a single tick."""
    session.input.press("space")
    report = session.step()
    session.input.release("space")
    return report
