"""Tunable constants for a Tank Battalion session."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

Point = Tuple[float, float]


@dataclass(frozen=True)
class SessionSettings:
    """Configuration options for the simulation.

    Positions and speeds are expressed in pixels; speeds are per tick.
    """

    grid_size: int = 26
    tile_size: int = 24

    player_speed: float = 2.0
    enemy_speed: float = 1.5
    bullet_speed: float = 6.0
    shoot_cooldown: int = 30  # ticks

    enemy_turn_chance: float = 0.02
    enemy_fire_chance: float = 0.02
    enemy_spawn_chance: float = 0.01
    max_enemies: int = 3

    kill_score: int = 100
    kills_to_win: Optional[int] = None

    player_start: Point = (216.0, 528.0)
    initial_spawn_points: Tuple[Point, ...] = field(
        default=((48.0, 48.0), (552.0, 48.0), (312.0, 48.0))
    )
    spawn_points: Tuple[Point, ...] = field(
        default=((24.0, 24.0), (576.0, 24.0), (312.0, 24.0))
    )

    player_color: str = "#fbbf24"
    enemy_colors: Tuple[str, ...] = ("#ef4444", "#3b82f6")

    @property
    def tank_size(self) -> float:
        return float(self.tile_size - 2)

    @property
    def bullet_size(self) -> float:
        return 4.0

    @property
    def canvas_size(self) -> int:
        return self.tile_size * self.grid_size


__all__ = ["Point", "SessionSettings"]
