"""Destructible tile map the battle takes place on."""

from __future__ import annotations

from enum import IntEnum
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple


class TileType(IntEnum):
    """Terrain code stored in every grid cell."""

    EMPTY = 0
    BRICK = 1
    STEEL = 2
    WATER = 3
    GRASS = 4
    BASE = 9


_MOVEMENT_BLOCKERS = frozenset(
    {TileType.BRICK, TileType.STEEL, TileType.WATER, TileType.BASE}
)
_BULLET_BLOCKERS = frozenset({TileType.BRICK, TileType.STEEL, TileType.BASE})
_DESTRUCTIBLE = frozenset({TileType.BRICK, TileType.BASE})


def is_blocking(code: int) -> bool:
    """Return True if tanks cannot drive over ``code``."""
    return code in _MOVEMENT_BLOCKERS


def blocks_bullets(code: int) -> bool:
    """Return True if bullets stop on ``code``. Water lets them pass."""
    return code in _BULLET_BLOCKERS


class Grid:
    """Square matrix of tile codes, mutated in place as walls are shot away."""

    def __init__(self, size: int, cells: Optional[List[List[TileType]]] = None) -> None:
        self.size = size
        if cells is None:
            cells = [[TileType.EMPTY for _ in range(size)] for _ in range(size)]
        self._cells = cells

    # ------------------------------------------------------------------
    # Construction
    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "Grid":
        """Build a grid from a square list of integer codes.

        The rows are copied, so later mutation never leaks back into the
        caller's level data.
        """
        size = len(rows)
        cells = [[TileType(int(code)) for code in row] for row in rows]
        for row in cells:
            if len(row) != size:
                raise ValueError("level rows must form a square matrix")
        return cls(size, cells)

    def copy(self) -> "Grid":
        return Grid(self.size, [list(row) for row in self._cells])

    def to_rows(self) -> List[List[int]]:
        return [[int(code) for code in row] for row in self._cells]

    # ------------------------------------------------------------------
    # Queries
    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def tile_at(self, row: int, col: int) -> TileType:
        """Return the code at ``(row, col)``; outside the map reads as steel."""
        if not self.in_bounds(row, col):
            return TileType.STEEL
        return self._cells[row][col]

    def blocks_movement_at(self, row: int, col: int) -> bool:
        return is_blocking(self.tile_at(row, col))

    def blocks_bullet_at(self, row: int, col: int) -> bool:
        return blocks_bullets(self.tile_at(row, col))

    def find(self, code: TileType) -> List[Tuple[int, int]]:
        return [
            (row_idx, col_idx)
            for row_idx, row in enumerate(self._cells)
            for col_idx, value in enumerate(row)
            if value == code
        ]

    def rows(self) -> Iterator[Tuple[TileType, ...]]:
        for row in self._cells:
            yield tuple(row)

    # ------------------------------------------------------------------
    # Mutation
    def destroy(self, row: int, col: int) -> bool:
        """Blow away a brick or the base at ``(row, col)``.

        Returns True when the destroyed cell was the base. Other tiles and
        cells outside the map are left untouched.
        """
        if not self.in_bounds(row, col):
            return False
        code = self._cells[row][col]
        if code not in _DESTRUCTIBLE:
            return False
        self._cells[row][col] = TileType.EMPTY
        return code == TileType.BASE

    def clear_blocking(
        self, cells: Iterable[Tuple[int, int]], *, keep_base: bool = True
    ) -> bool:
        """Empty every wall or water tile among ``cells``.

        The base survives unless ``keep_base`` is False. Returns True if a base
        was removed.
        """
        removed_base = False
        for row, col in cells:
            if not self.in_bounds(row, col):
                continue
            code = self._cells[row][col]
            if not is_blocking(code) or (keep_base and code == TileType.BASE):
                continue
            removed_base = removed_base or code == TileType.BASE
            self._cells[row][col] = TileType.EMPTY
        return removed_base


__all__ = ["Grid", "TileType", "blocks_bullets", "is_blocking"]
