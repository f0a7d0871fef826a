"""Per-tick movement, firing and enemy AI decisions."""

from __future__ import annotations

import itertools
import random
from typing import Iterable, Optional

from battalion_game.core.collision import grid_blocks_movement, intersects_at
from battalion_game.core.entities import DIRECTIONS, Bullet, Direction, Tank
from battalion_game.core.grid import Grid
from battalion_game.core.settings import SessionSettings


class MovementController:
    """Apply movement rules to tanks and decide what the enemies do.

    All randomness comes from ``rng`` so a seeded generator replays a match
    exactly.
    """

    def __init__(
        self,
        grid: Grid,
        settings: SessionSettings,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.grid = grid
        self.settings = settings
        self._rng = rng or random.Random()
        self._bullet_ids = itertools.count(1)

    # ------------------------------------------------------------------
    # Movement
    def try_move(self, tank: Tank, direction: Direction, tanks: Iterable[Tank]) -> bool:
        """Step ``tank`` once along ``direction`` unless a wall or tank is in the way."""
        next_x, next_y = tank.next_position(direction)
        if grid_blocks_movement(
            self.grid, tank, next_x, next_y, self.settings.tile_size
        ):
            return False
        for other in tanks:
            if other is tank or other.destroyed:
                continue
            if intersects_at(tank, next_x, next_y, other):
                return False
        tank.x = next_x
        tank.y = next_y
        return True

    def update_player(
        self,
        player: Tank,
        direction: Optional[Direction],
        wants_fire: bool,
        tanks: Iterable[Tank],
    ) -> Optional[Bullet]:
        if player.destroyed:
            return None
        if direction is not None:
            player.direction = direction
            self.try_move(player, direction, tanks)
        player.tick_cooldown()
        if wants_fire and player.ready_to_fire:
            return self.fire(player)
        return None

    def update_enemy(self, enemy: Tank, tanks: Iterable[Tank]) -> Optional[Bullet]:
        if enemy.destroyed:
            return None
        if self._rng.random() < self.settings.enemy_turn_chance:
            enemy.direction = self.random_direction()
        if not self.try_move(enemy, enemy.direction, tanks):
            enemy.direction = self.random_direction()
        enemy.tick_cooldown()
        wants_fire = self._rng.random() < self.settings.enemy_fire_chance
        if wants_fire and enemy.ready_to_fire:
            return self.fire(enemy)
        return None

    def random_direction(self) -> Direction:
        return self._rng.choice(DIRECTIONS)

    # ------------------------------------------------------------------
    # Firing
    def fire(self, tank: Tank) -> Bullet:
        """Spawn a bullet from the middle of ``tank`` and restart its cooldown."""
        size = self.settings.bullet_size
        cx, cy = tank.center
        tank.cooldown = self.settings.shoot_cooldown
        return Bullet(
            id=f"bullet_{next(self._bullet_ids)}",
            x=cx - size / 2,
            y=cy - size / 2,
            width=size,
            height=size,
            direction=tank.direction,
            speed=self.settings.bullet_speed,
            owner_id=tank.id,
        )


__all__ = ["MovementController"]
