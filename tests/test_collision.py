from battalion_game.core.collision import (
    bullet_tile_hit,
    cells_under,
    grid_blocks_movement,
    intersects,
)
from battalion_game.core.entities import Bullet, Direction, Tank
from battalion_game.core.grid import Grid, TileType

from conftest import empty_level

TILE = 24


def _tank(x: float, y: float, size: float = 22.0, speed: float = 2.0) -> Tank:
    return Tank(id="t", x=x, y=y, width=size, height=size, direction=Direction.UP, speed=speed)


def test_touching_edges_do_not_intersect():
    a = _tank(0, 0)
    b = _tank(22, 0)

    assert intersects(a, b) is False
    assert intersects(b, a) is False


def test_overlap_intersects():
    a = _tank(0, 0)
    b = _tank(21.5, 10)

    assert intersects(a, b) is True


def test_corner_on_wall_blocks_movement():
    level = empty_level()
    level[5][5] = int(TileType.BRICK)
    grid = Grid.from_rows(level)
    tank = _tank(96, 120)

    # Right edge at x=120 lands in column 5, row 5.
    assert grid_blocks_movement(grid, tank, 98, 120, TILE) is True
    assert grid_blocks_movement(grid, tank, 96, 120, TILE) is False


def test_water_blocks_tanks_and_grass_does_not():
    level = empty_level()
    level[10][10] = int(TileType.WATER)
    level[10][12] = int(TileType.GRASS)
    grid = Grid.from_rows(level)
    tank = _tank(0, 0)

    assert grid_blocks_movement(grid, tank, 10 * TILE + 1, 10 * TILE + 1, TILE) is True
    assert grid_blocks_movement(grid, tank, 12 * TILE + 1, 10 * TILE + 1, TILE) is False


def test_leaving_the_map_is_blocked():
    grid = Grid.from_rows(empty_level())
    tank = _tank(0, 0)

    assert grid_blocks_movement(grid, tank, -1, 0, TILE) is True
    assert grid_blocks_movement(grid, tank, 0, 26 * TILE - 20, TILE) is True


def test_corner_sampling_lets_large_steps_skip_thin_walls():
    level = empty_level()
    level[5][2] = int(TileType.STEEL)
    grid = Grid.from_rows(level)
    tank = _tank(20, 121, speed=60)

    next_x, next_y = tank.next_position(Direction.RIGHT)

    # Corners land in columns 3 and 4, so the steel in column 2 is never sampled.
    assert grid_blocks_movement(grid, tank, next_x, next_y, TILE) is False


def test_bullet_tile_hit_uses_center_point():
    bullet = Bullet(
        id="b", x=46, y=22, width=4, height=4, direction=Direction.UP, speed=6
    )

    assert bullet_tile_hit(bullet, TILE) == (1, 2)


def test_cells_under_ignores_shared_edges():
    tank = _tank(24, 24, size=24)

    assert cells_under(tank, TILE) == ((1, 1),)
    assert set(cells_under(_tank(30, 30), TILE)) == {(1, 1), (1, 2), (2, 1), (2, 2)}
