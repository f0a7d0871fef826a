import pytest

from battalion_game.core.grid import Grid, TileType, blocks_bullets, is_blocking
from battalion_game.core.settings import SessionSettings

from conftest import bordered_level, empty_level


@pytest.mark.parametrize(
    "code, tank_blocked, bullet_blocked",
    [
        (TileType.EMPTY, False, False),
        (TileType.BRICK, True, True),
        (TileType.STEEL, True, True),
        (TileType.WATER, True, False),
        (TileType.GRASS, False, False),
        (TileType.BASE, True, True),
    ],
)
def test_tile_blocking_rules(code, tank_blocked, bullet_blocked):
    assert is_blocking(code) is tank_blocked
    assert blocks_bullets(code) is bullet_blocked


def test_outside_the_map_reads_as_steel():
    grid = Grid.from_rows(empty_level())

    assert grid.tile_at(-1, 0) == TileType.STEEL
    assert grid.tile_at(0, 26) == TileType.STEEL
    assert grid.blocks_movement_at(26, 26) is True
    assert grid.blocks_bullet_at(5, -3) is True
    assert grid.tile_at(5, 5) == TileType.EMPTY


def test_destroying_brick_is_idempotent():
    level = empty_level()
    level[4][7] = int(TileType.BRICK)
    grid = Grid.from_rows(level)

    assert grid.destroy(4, 7) is False
    assert grid.tile_at(4, 7) == TileType.EMPTY
    assert grid.destroy(4, 7) is False
    assert grid.tile_at(4, 7) == TileType.EMPTY


def test_destroying_base_signals_and_empties_cell():
    grid = Grid.from_rows(bordered_level())

    assert grid.find(TileType.BASE) == [(24, 13)]
    assert grid.destroy(24, 13) is True
    assert grid.tile_at(24, 13) == TileType.EMPTY
    assert grid.find(TileType.BASE) == []


@pytest.mark.parametrize("code", [TileType.STEEL, TileType.WATER, TileType.GRASS])
def test_indestructible_tiles_survive(code):
    level = empty_level()
    level[3][3] = int(code)
    grid = Grid.from_rows(level)

    assert grid.destroy(3, 3) is False
    assert grid.tile_at(3, 3) == code


def test_destroy_outside_map_is_ignored():
    grid = Grid.from_rows(empty_level())

    assert grid.destroy(-1, 40) is False


def test_from_rows_copies_level_data():
    level = empty_level()
    level[2][2] = int(TileType.BRICK)
    grid = Grid.from_rows(level)

    grid.destroy(2, 2)

    assert level[2][2] == int(TileType.BRICK)
    assert grid.to_rows()[2][2] == int(TileType.EMPTY)


def test_from_rows_rejects_ragged_rows():
    level = empty_level(4)
    level[1] = level[1][:3]

    with pytest.raises(ValueError):
        Grid.from_rows(level)


def test_clear_blocking_keeps_the_base():
    level = empty_level()
    level[1][1] = int(TileType.BRICK)
    level[1][2] = int(TileType.WATER)
    level[2][1] = int(TileType.BASE)
    level[2][2] = int(TileType.GRASS)
    grid = Grid.from_rows(level)

    grid.clear_blocking([(1, 1), (1, 2), (2, 1), (2, 2), (-1, -1)])

    assert grid.tile_at(1, 1) == TileType.EMPTY
    assert grid.tile_at(1, 2) == TileType.EMPTY
    assert grid.tile_at(2, 1) == TileType.BASE
    assert grid.tile_at(2, 2) == TileType.GRASS


def test_copy_is_independent():
    level = empty_level()
    level[6][6] = int(TileType.BRICK)
    grid = Grid.from_rows(level)
    clone = grid.copy()

    clone.destroy(6, 6)

    assert grid.tile_at(6, 6) == TileType.BRICK
    assert clone.tile_at(6, 6) == TileType.EMPTY


def test_derived_sizes_follow_the_tile_size():
    settings = SessionSettings(tile_size=32, grid_size=13)

    assert settings.tank_size == 30.0
    assert settings.bullet_size == 4.0
    assert settings.canvas_size == 416


def test_clear_blocking_can_remove_the_base():
    grid = Grid.from_rows(bordered_level())

    assert grid.clear_blocking([(24, 13)], keep_base=False) is True
    assert grid.tile_at(24, 13) == TileType.EMPTY
    assert grid.clear_blocking([(24, 13)], keep_base=False) is False
