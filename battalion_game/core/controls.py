"""Held-key state shared between the platform input layer and the session."""

from __future__ import annotations

from typing import Optional, Set, Tuple

from battalion_game.core.entities import Direction

# Checked in this order, so UP wins over DOWN, DOWN over LEFT, and so on.
DIRECTION_KEYS: Tuple[Tuple[Direction, Tuple[str, ...]], ...] = (
    (Direction.UP, ("up", "w")),
    (Direction.DOWN, ("down", "s")),
    (Direction.LEFT, ("left", "a")),
    (Direction.RIGHT, ("right", "d")),
)
FIRE_KEYS: Tuple[str, ...] = ("space",)


class InputState:
    """Set of keys currently held down.

    Written by event handlers, read once per tick by the session. Everything
    runs on the same thread, so no locking is involved.
    """

    def __init__(self) -> None:
        self._held: Set[str] = set()

    @staticmethod
    def _normalise(key: str) -> str:
        return key.lower()

    def press(self, key: str) -> None:
        self._held.add(self._normalise(key))

    def release(self, key: str) -> None:
        self._held.discard(self._normalise(key))

    def is_held(self, key: str) -> bool:
        return self._normalise(key) in self._held

    def clear(self) -> None:
        self._held.clear()


def player_direction(state: InputState) -> Optional[Direction]:
    for direction, keys in DIRECTION_KEYS:
        if any(state.is_held(key) for key in keys):
            return direction
    return None


def fire_requested(state: InputState) -> bool:
    return any(state.is_held(key) for key in FIRE_KEYS)


__all__ = [
    "DIRECTION_KEYS",
    "FIRE_KEYS",
    "InputState",
    "fire_requested",
    "player_direction",
]
