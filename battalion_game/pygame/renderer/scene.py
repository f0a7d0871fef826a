"""Rendering helpers for the Tank Battalion pygame client.

Every function here only reads a :class:`SessionSnapshot`.
"""

from __future__ import annotations

from typing import Tuple

import pygame

from battalion_game.core.entities import Direction, Tank
from battalion_game.core.grid import TileType
from battalion_game.core.session import SessionSnapshot

BACKGROUND = pygame.Color("#000000")
BULLET = pygame.Color("#ffffff")
BRICK = pygame.Color("#92400e")
BRICK_HIGHLIGHT = pygame.Color("#b45309")
STEEL = pygame.Color("#9ca3af")
STEEL_HIGHLIGHT = pygame.Color("#d1d5db")
WATER = pygame.Color("#2563eb")
GRASS = pygame.Color("#166534")
BASE = pygame.Color("#8b5cf6")
BARREL = pygame.Color("#000000")
TRACKS = pygame.Color("#333333")


def _origin(app) -> Tuple[int, int]:
    return (0, app.hud_height)


def _scale(app, snapshot: SessionSnapshot) -> float:
    return app.cell_size / snapshot.tile_size


def _rect(app, snapshot: SessionSnapshot, x: float, y: float, w: float, h: float) -> pygame.Rect:
    ox, oy = _origin(app)
    k = _scale(app, snapshot)
    return pygame.Rect(
        int(round(ox + x * k)),
        int(round(oy + y * k)),
        max(1, int(round(w * k))),
        max(1, int(round(h * k))),
    )


def draw_background(app, snapshot: SessionSnapshot) -> None:
    ox, oy = _origin(app)
    size = len(snapshot.grid) * app.cell_size
    pygame.draw.rect(app.screen, BACKGROUND, pygame.Rect(ox, oy, size, size))


def draw_grid(app, snapshot: SessionSnapshot) -> None:
    surface = app.screen
    tile = snapshot.tile_size
    for row_idx, row in enumerate(snapshot.grid):
        for col_idx, code in enumerate(row):
            x = col_idx * tile
            y = row_idx * tile
            if code == TileType.BRICK:
                pygame.draw.rect(surface, BRICK, _rect(app, snapshot, x + 1, y + 1, tile - 2, tile - 2))
                pygame.draw.rect(
                    surface, BRICK_HIGHLIGHT, _rect(app, snapshot, x + 4, y + 4, tile / 2, tile / 2)
                )
            elif code == TileType.STEEL:
                pygame.draw.rect(surface, STEEL, _rect(app, snapshot, x, y, tile, tile))
                pygame.draw.rect(
                    surface, STEEL_HIGHLIGHT, _rect(app, snapshot, x + 4, y + 4, tile - 8, tile - 8)
                )
            elif code == TileType.WATER:
                pygame.draw.rect(surface, WATER, _rect(app, snapshot, x, y, tile, tile))
            elif code == TileType.GRASS:
                pygame.draw.rect(surface, GRASS, _rect(app, snapshot, x, y, tile, tile))
            elif code == TileType.BASE:
                cell = _rect(app, snapshot, x, y, tile, tile)
                eagle = [
                    (cell.centerx, cell.top),
                    (cell.right, cell.bottom),
                    (cell.left, cell.bottom),
                ]
                pygame.draw.polygon(surface, BASE, eagle)


def _draw_tank(app, snapshot: SessionSnapshot, tank: Tank) -> None:
    surface = app.screen
    pygame.draw.rect(
        surface,
        pygame.Color(tank.color),
        _rect(app, snapshot, tank.x, tank.y, tank.width, tank.height),
    )

    # Barrel
    bx = tank.x + tank.width / 2 - 2
    by = tank.y + tank.height / 2 - 2
    bw, bh = 4.0, 4.0
    if tank.direction is Direction.UP:
        by -= 8
        bh = 10
    elif tank.direction is Direction.DOWN:
        bh = 10
    elif tank.direction is Direction.LEFT:
        bx -= 8
        bw = 10
    else:
        bw = 10
    pygame.draw.rect(surface, BARREL, _rect(app, snapshot, bx, by, bw, bh))

    # Tracks run along the direction of travel
    if tank.direction in (Direction.UP, Direction.DOWN):
        tracks = [
            (tank.x, tank.y, 4, tank.height),
            (tank.x + tank.width - 4, tank.y, 4, tank.height),
        ]
    else:
        tracks = [
            (tank.x, tank.y, tank.width, 4),
            (tank.x, tank.y + tank.height - 4, tank.width, 4),
        ]
    for x, y, w, h in tracks:
        pygame.draw.rect(surface, TRACKS, _rect(app, snapshot, x, y, w, h))


def draw_tanks(app, snapshot: SessionSnapshot) -> None:
    if snapshot.player.alive:
        _draw_tank(app, snapshot, snapshot.player)
    for enemy in snapshot.enemies:
        _draw_tank(app, snapshot, enemy)


def draw_bullets(app, snapshot: SessionSnapshot) -> None:
    for bullet in snapshot.bullets:
        pygame.draw.rect(
            app.screen,
            BULLET,
            _rect(app, snapshot, bullet.x, bullet.y, bullet.width, bullet.height),
        )


def draw_scene(app, snapshot: SessionSnapshot) -> None:
    draw_background(app, snapshot)
    draw_grid(app, snapshot)
    draw_tanks(app, snapshot)
    draw_bullets(app, snapshot)
