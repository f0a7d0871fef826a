"""Rectangle and tile-grid intersection tests."""

from __future__ import annotations

import math
from typing import Protocol, Tuple

from battalion_game.core.grid import Grid


class Box(Protocol):
    x: float
    y: float
    width: float
    height: float


def intersects(a: Box, b: Box) -> bool:
    """Strict overlap of two axis-aligned boxes; shared edges do not count."""
    return (
        a.x < b.x + b.width
        and a.x + a.width > b.x
        and a.y < b.y + b.height
        and a.y + a.height > b.y
    )


def intersects_at(a: Box, x: float, y: float, b: Box) -> bool:
    """``intersects`` for ``a`` translated to ``(x, y)``."""
    return (
        x < b.x + b.width
        and x + a.width > b.x
        and y < b.y + b.height
        and y + a.height > b.y
    )


def point_to_cell(x: float, y: float, tile_size: float) -> Tuple[int, int]:
    return (math.floor(y / tile_size), math.floor(x / tile_size))


def box_corners(
    x: float, y: float, width: float, height: float
) -> Tuple[Tuple[float, float], ...]:
    return (
        (x, y),
        (x + width, y),
        (x, y + height),
        (x + width, y + height),
    )


def grid_blocks_movement(
    grid: Grid, entity: Box, next_x: float, next_y: float, tile_size: float
) -> bool:
    """Return True if any corner of the candidate box lands on a blocker.

    Only the four corners are sampled. Steps longer than half the box can
    slip past a thin wall between two corners.
    """
    for cx, cy in box_corners(next_x, next_y, entity.width, entity.height):
        row, col = point_to_cell(cx, cy, tile_size)
        if grid.blocks_movement_at(row, col):
            return True
    return False


def bullet_tile_hit(bullet: Box, tile_size: float) -> Tuple[int, int]:
    """Cell ``(row, col)`` under the bullet's center point."""
    cx = bullet.x + bullet.width / 2
    cy = bullet.y + bullet.height / 2
    return point_to_cell(cx, cy, tile_size)


def cells_under(box: Box, tile_size: float) -> Tuple[Tuple[int, int], ...]:
    """Every cell the box strictly overlaps."""
    first_row, first_col = point_to_cell(box.x, box.y, tile_size)
    # Edges that sit exactly on a tile boundary do not reach into the next tile.
    last_row = math.ceil((box.y + box.height) / tile_size) - 1
    last_col = math.ceil((box.x + box.width) / tile_size) - 1
    return tuple(
        (row, col)
        for row in range(first_row, last_row + 1)
        for col in range(first_col, last_col + 1)
    )


__all__ = [
    "Box",
    "box_corners",
    "bullet_tile_hit",
    "cells_under",
    "grid_blocks_movement",
    "intersects",
    "intersects_at",
    "point_to_cell",
]
