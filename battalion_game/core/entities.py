"""Tank and bullet entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class Direction(Enum):
    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"

    @property
    def delta(self) -> Tuple[int, int]:
        return _DELTAS[self]


_DELTAS = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

DIRECTIONS: Tuple[Direction, ...] = (
    Direction.UP,
    Direction.DOWN,
    Direction.LEFT,
    Direction.RIGHT,
)


class TankRole(Enum):
    PLAYER = "player"
    ENEMY = "enemy"


@dataclass
class Entity:
    """Axis-aligned box moving across the battlefield."""

    id: str
    x: float
    y: float
    width: float
    height: float
    direction: Direction
    speed: float
    destroyed: bool = False

    @property
    def center(self) -> Tuple[float, float]:
        return (self.x + self.width / 2, self.y + self.height / 2)

    def next_position(self, direction: Direction) -> Tuple[float, float]:
        """Where one step of ``speed`` along ``direction`` would land."""
        dx, dy = direction.delta
        return (self.x + dx * self.speed, self.y + dy * self.speed)


@dataclass
class Tank(Entity):
    role: TankRole = TankRole.ENEMY
    cooldown: int = 0
    health: int = 1
    color: str = "#ffffff"

    @property
    def alive(self) -> bool:
        return not self.destroyed

    @property
    def ready_to_fire(self) -> bool:
        return self.cooldown <= 0

    def tick_cooldown(self) -> None:
        if self.cooldown > 0:
            self.cooldown -= 1

    def destroy(self) -> None:
        self.health = 0
        self.destroyed = True


@dataclass
class Bullet(Entity):
    owner_id: str = ""

    def advance(self) -> None:
        self.x, self.y = self.next_position(self.direction)


__all__ = ["Bullet", "DIRECTIONS", "Direction", "Entity", "Tank", "TankRole"]
