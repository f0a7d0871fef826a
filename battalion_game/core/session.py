"""Game session management decoupled from rendering concerns."""

from __future__ import annotations

import dataclasses
import itertools
import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from battalion_game.core.collision import (
    bullet_tile_hit,
    cells_under,
    intersects,
)
from battalion_game.core.controller import MovementController
from battalion_game.core.controls import InputState, fire_requested, player_direction
from battalion_game.core.entities import Bullet, Direction, Tank, TankRole
from battalion_game.core.grid import Grid, TileType
from battalion_game.core.levels import normalize_level
from battalion_game.core.settings import Point, SessionSettings

logger = logging.getLogger(__name__)

GameOverCallback = Callable[[int, bool], None]
ScoreCallback = Callable[[int], None]


class BulletOutcome(Enum):
    FLYING = "flying"
    WALL = "wall"
    OUT_OF_BOUNDS = "out_of_bounds"
    TANK = "tank"


@dataclass
class TickReport:
    """What happened during a single call to ``GameSession.step``."""

    tick: int = 0
    bullet_outcomes: Dict[str, BulletOutcome] = field(default_factory=dict)
    destroyed_tiles: List[Tuple[int, int]] = field(default_factory=list)
    killed_enemies: List[str] = field(default_factory=list)
    spawned_enemies: List[str] = field(default_factory=list)
    game_over: bool = False


@dataclass(frozen=True)
class SessionSnapshot:
    """Read-only copy of the session handed to renderers."""

    tick: int
    grid: Tuple[Tuple[int, ...], ...]
    player: Tank
    enemies: Tuple[Tank, ...]
    bullets: Tuple[Bullet, ...]
    score: int
    base_destroyed: bool
    game_over: bool
    won: bool
    tile_size: int

    def render_text(self) -> str:
        """Plain-text picture of the board, one character per tile."""
        glyphs = {
            TileType.EMPTY: ".",
            TileType.BRICK: "#",
            TileType.STEEL: "@",
            TileType.WATER: "~",
            TileType.GRASS: '"',
            TileType.BASE: "E",
        }
        rows = [[glyphs.get(TileType(code), "?") for code in row] for row in self.grid]

        def mark(x: float, y: float, char: str) -> None:
            row, col = int(y // self.tile_size), int(x // self.tile_size)
            if 0 <= row < len(rows) and 0 <= col < len(rows[row]):
                rows[row][col] = char

        for enemy in self.enemies:
            mark(*enemy.center, "X")
        if self.player.alive:
            mark(*self.player.center, "P")
        for bullet in self.bullets:
            mark(*bullet.center, "*")
        return "\n".join("".join(row) for row in rows)


class GameSession:
    """Own the mutable state of an active battle.

    The host loop holds the only reference and calls :meth:`step` once per
    frame, then :meth:`snapshot` to draw.
    """

    def __init__(
        self,
        level: Sequence[Sequence[int]],
        settings: Optional[SessionSettings] = None,
        *,
        rng: Optional[random.Random] = None,
        input_state: Optional[InputState] = None,
        on_game_over: Optional[GameOverCallback] = None,
        on_score_change: Optional[ScoreCallback] = None,
        spawn_initial_enemies: bool = True,
    ) -> None:
        self.settings = settings or SessionSettings()
        self.rng = rng or random.Random()
        self.input = input_state or InputState()
        self.on_game_over = on_game_over
        self.on_score_change = on_score_change

        self.grid = Grid.from_rows(normalize_level(level, self.settings.grid_size))
        self.controller = MovementController(self.grid, self.settings, self.rng)
        self._enemy_ids = itertools.count(1)

        self.player = self._make_player()
        self.enemies: List[Tank] = []
        self.bullets: List[Bullet] = []

        self.score = 0
        self.kills = 0
        self.tick = 0
        self.base_destroyed = False
        self.game_over = False
        self.won = False
        self.stopped = False

        self._clear_spawn_areas()
        if spawn_initial_enemies:
            for x, y in self.settings.initial_spawn_points:
                self.spawn_enemy(x, y)

    # ------------------------------------------------------------------
    # Properties
    @property
    def running(self) -> bool:
        return not (self.game_over or self.stopped)

    @property
    def tanks(self) -> List[Tank]:
        return [self.player, *self.enemies]

    @property
    def live_enemies(self) -> List[Tank]:
        return [enemy for enemy in self.enemies if enemy.alive]

    # ------------------------------------------------------------------
    # Setup helpers
    def _make_player(self) -> Tank:
        x, y = self.settings.player_start
        size = self.settings.tank_size
        return Tank(
            id="player",
            x=x,
            y=y,
            width=size,
            height=size,
            direction=Direction.UP,
            speed=self.settings.player_speed,
            role=TankRole.PLAYER,
            color=self.settings.player_color,
        )

    def _spawn_box(self, point: Point) -> Tank:
        size = self.settings.tank_size
        return Tank(
            id="spawn",
            x=point[0],
            y=point[1],
            width=size,
            height=size,
            direction=Direction.DOWN,
            speed=0.0,
        )

    def _clear_spawn_areas(self) -> None:
        tile = self.settings.tile_size
        # Under the player start the base is cleared as well.
        player_cells = cells_under(self._spawn_box(self.settings.player_start), tile)
        if self.grid.clear_blocking(player_cells, keep_base=False):
            logger.warning("Level placed the base under the player start; base removed")
        for point in (*self.settings.initial_spawn_points, *self.settings.spawn_points):
            self.grid.clear_blocking(cells_under(self._spawn_box(point), tile))

    def spawn_enemy(self, x: float, y: float) -> Optional[Tank]:
        """Place a new enemy at ``(x, y)`` unless a tank or a blocking tile occupies the spot."""
        size = self.settings.tank_size
        footprint = self._spawn_box((x, y))
        for row, col in cells_under(footprint, self.settings.tile_size):
            if self.grid.blocks_movement_at(row, col):
                logger.debug("Spawn at (%.0f, %.0f) blocked by tile %s", x, y, (row, col))
                return None
        for tank in self.tanks:
            if tank.alive and intersects(footprint, tank):
                logger.debug("Spawn at (%.0f, %.0f) blocked by %s", x, y, tank.id)
                return None
        enemy = Tank(
            id=f"enemy_{next(self._enemy_ids)}",
            x=x,
            y=y,
            width=size,
            height=size,
            direction=Direction.DOWN,
            speed=self.settings.enemy_speed,
            role=TankRole.ENEMY,
            color=self.rng.choice(self.settings.enemy_colors),
        )
        self.enemies.append(enemy)
        logger.debug("Spawned %s at (%.0f, %.0f)", enemy.id, x, y)
        return enemy

    # ------------------------------------------------------------------
    # Simulation
    def step(self) -> TickReport:
        """Advance the battle by one tick."""
        report = TickReport(tick=self.tick)
        if not self.running:
            return report
        if self._check_terminal():
            report.game_over = True
            return report

        self._replenish_enemies(report)
        self.tick += 1
        report.tick = self.tick

        direction = player_direction(self.input)
        wants_fire = fire_requested(self.input)

        tanks = self.tanks
        bullet = self.controller.update_player(self.player, direction, wants_fire, tanks)
        if bullet is not None:
            self.bullets.append(bullet)
        for enemy in self.enemies:
            bullet = self.controller.update_enemy(enemy, tanks)
            if bullet is not None:
                self.bullets.append(bullet)

        for bullet in self.bullets:
            if bullet.destroyed:
                continue
            report.bullet_outcomes[bullet.id] = self._advance_bullet(bullet, report)

        self.bullets = [b for b in self.bullets if not b.destroyed]
        self.enemies = [e for e in self.enemies if not e.destroyed]
        return report

    def _check_terminal(self) -> bool:
        if self.base_destroyed or self.player.destroyed:
            self._finish(won=False)
            return True
        target = self.settings.kills_to_win
        if target is not None and self.kills >= target:
            self._finish(won=True)
            return True
        return False

    def _finish(self, *, won: bool) -> None:
        self.game_over = True
        self.won = won
        logger.info(
            "Game over after %d ticks: score=%d won=%s", self.tick, self.score, won
        )
        if self.on_game_over is not None:
            self.on_game_over(self.score, won)

    def _replenish_enemies(self, report: TickReport) -> None:
        if len(self.live_enemies) >= self.settings.max_enemies:
            return
        if self.rng.random() >= self.settings.enemy_spawn_chance:
            return
        x, y = self.rng.choice(self.settings.spawn_points)
        enemy = self.spawn_enemy(x, y)
        if enemy is not None:
            report.spawned_enemies.append(enemy.id)

    def _advance_bullet(self, bullet: Bullet, report: TickReport) -> BulletOutcome:
        bullet.advance()

        row, col = bullet_tile_hit(bullet, self.settings.tile_size)
        if not self.grid.in_bounds(row, col):
            bullet.destroyed = True
            return BulletOutcome.OUT_OF_BOUNDS
        if self.grid.blocks_bullet_at(row, col):
            bullet.destroyed = True
            tile = self.grid.tile_at(row, col)
            if self.grid.destroy(row, col):
                self.base_destroyed = True
                logger.debug("Base destroyed by %s", bullet.owner_id)
            if tile != TileType.STEEL:
                report.destroyed_tiles.append((row, col))
            return BulletOutcome.WALL

        player = self.player
        if bullet.owner_id != player.id:
            if player.alive and intersects(bullet, player):
                player.destroy()
                bullet.destroyed = True
                return BulletOutcome.TANK
            return BulletOutcome.FLYING

        for enemy in self.enemies:
            if enemy.alive and intersects(bullet, enemy):
                enemy.destroy()
                bullet.destroyed = True
                self.kills += 1
                self._add_score(self.settings.kill_score)
                report.killed_enemies.append(enemy.id)
                return BulletOutcome.TANK
        return BulletOutcome.FLYING

    def _add_score(self, amount: int) -> None:
        self.score += amount
        if self.on_score_change is not None:
            self.on_score_change(self.score)

    # ------------------------------------------------------------------
    # Host helpers
    def stop(self) -> None:
        """Halt the session without reporting game over (teardown, level change)."""
        self.stopped = True

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            tick=self.tick,
            grid=tuple(tuple(int(code) for code in row) for row in self.grid.rows()),
            player=dataclasses.replace(self.player),
            enemies=tuple(dataclasses.replace(enemy) for enemy in self.enemies),
            bullets=tuple(dataclasses.replace(bullet) for bullet in self.bullets),
            score=self.score,
            base_destroyed=self.base_destroyed,
            game_over=self.game_over,
            won=self.won,
            tile_size=self.settings.tile_size,
        )


__all__ = [
    "BulletOutcome",
    "GameSession",
    "SessionSnapshot",
    "TickReport",
]
