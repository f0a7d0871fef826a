"""Top-level package for the Tank Battalion arcade game."""

__version__ = "1.0.0"

from battalion_game.core import (
    Bullet,
    Direction,
    GameSession,
    Grid,
    InputState,
    SessionSettings,
    SessionSnapshot,
    Tank,
    TileType,
    create_classic_level,
    create_default_level,
    normalize_level,
)
from battalion_game.level_generator import LevelGenerator

__all__ = [
    "Bullet",
    "Direction",
    "GameSession",
    "Grid",
    "InputState",
    "LevelGenerator",
    "SessionSettings",
    "SessionSnapshot",
    "Tank",
    "TileType",
    "create_classic_level",
    "create_default_level",
    "normalize_level",
]

__all__.append("__version__")

try:
    from battalion_game.pygame import PygameBattalion, run_pygame  # type: ignore[misc]
except (ImportError, RuntimeError):
    PygameBattalion = None

    def run_pygame(*_args, **_kwargs):  # type: ignore[override]
        raise RuntimeError(
            "The pygame front-end requires the optional pygame dependency. "
            "Install pygame to enable graphical gameplay."
        )

__all__.extend(["PygameBattalion", "run_pygame"])
