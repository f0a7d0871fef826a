"""Core game logic for Tank Battalion, independent of rendering."""

from battalion_game.core.collision import (
    bullet_tile_hit,
    grid_blocks_movement,
    intersects,
)
from battalion_game.core.controller import MovementController
from battalion_game.core.controls import InputState, fire_requested, player_direction
from battalion_game.core.entities import Bullet, Direction, Entity, Tank, TankRole
from battalion_game.core.grid import Grid, TileType, blocks_bullets, is_blocking
from battalion_game.core.levels import (
    LevelSettings,
    create_classic_level,
    create_default_level,
    normalize_level,
)
from battalion_game.core.session import (
    BulletOutcome,
    GameSession,
    SessionSnapshot,
    TickReport,
)
from battalion_game.core.settings import SessionSettings

__all__ = [
    "Bullet",
    "BulletOutcome",
    "Direction",
    "Entity",
    "GameSession",
    "Grid",
    "InputState",
    "LevelSettings",
    "MovementController",
    "SessionSettings",
    "SessionSnapshot",
    "Tank",
    "TankRole",
    "TickReport",
    "TileType",
    "blocks_bullets",
    "bullet_tile_hit",
    "create_classic_level",
    "create_default_level",
    "fire_requested",
    "grid_blocks_movement",
    "intersects",
    "is_blocking",
    "normalize_level",
    "player_direction",
]
