"""Level grids: repair of externally supplied layouts and built-in maps."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Any, List, Optional

from battalion_game.core.grid import TileType

DEFAULT_GRID_SIZE = 26

_VALID_CODES = frozenset(int(code) for code in TileType)


@dataclass
class LevelSettings:
    """Configuration options for the classic level builder."""

    size: int = DEFAULT_GRID_SIZE
    obstacle_attempts: int = 50
    steel_ratio: float = 0.2
    seed: Optional[int] = None


def _coerce_code(value: Any) -> int:
    if isinstance(value, bool):
        return int(TileType.EMPTY)
    try:
        code = int(value)
    except (TypeError, ValueError, OverflowError):
        return int(TileType.EMPTY)
    if code != value or code not in _VALID_CODES:
        return int(TileType.EMPTY)
    return code


def normalize_level(raw: Any, size: int = DEFAULT_GRID_SIZE) -> List[List[int]]:
    """Crop or pad ``raw`` into a fresh ``size`` x ``size`` grid.

    Missing cells are filled with EMPTY and unknown codes are replaced by
    EMPTY. Input that is not a list of rows produces an empty grid.
    """
    grid = [[int(TileType.EMPTY)] * size for _ in range(size)]
    if not isinstance(raw, (list, tuple)):
        return grid
    for row_idx, row in enumerate(raw[:size]):
        if not isinstance(row, (list, tuple)):
            continue
        for col_idx, value in enumerate(row[:size]):
            grid[row_idx][col_idx] = _coerce_code(value)
    return grid


def create_default_level(size: int = DEFAULT_GRID_SIZE) -> List[List[int]]:
    """Steel-bordered arena with the base at the bottom center behind bricks."""
    grid = [[int(TileType.EMPTY)] * size for _ in range(size)]
    for i in range(size):
        grid[0][i] = int(TileType.STEEL)
        grid[size - 1][i] = int(TileType.STEEL)
        grid[i][0] = int(TileType.STEEL)
        grid[i][size - 1] = int(TileType.STEEL)

    mid = size // 2
    grid[size - 2][mid] = int(TileType.BASE)
    grid[size - 2][mid - 1] = int(TileType.BRICK)
    grid[size - 2][mid + 1] = int(TileType.BRICK)
    grid[size - 3][mid] = int(TileType.BRICK)
    grid[size - 3][mid - 1] = int(TileType.BRICK)
    grid[size - 3][mid + 1] = int(TileType.BRICK)
    return grid


def create_classic_level(settings: Optional[LevelSettings] = None) -> List[List[int]]:
    """Default arena scattered with random brick and steel obstacles."""
    settings = settings or LevelSettings()
    size = settings.size
    rng = random.Random(settings.seed)
    grid = create_default_level(size)
    mid = size // 2
    for _ in range(settings.obstacle_attempts):
        col = rng.randint(1, size - 2)
        row = rng.randint(2, size - 3)
        # Keep the approach to the base open.
        if abs(col - mid) < 3 and row > size - 5:
            continue
        grid[row][col] = int(
            TileType.STEEL if rng.random() < settings.steel_ratio else TileType.BRICK
        )
    return grid


__all__ = [
    "DEFAULT_GRID_SIZE",
    "LevelSettings",
    "create_classic_level",
    "create_default_level",
    "normalize_level",
]
