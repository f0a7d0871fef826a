import pytest

from battalion_game.core.grid import Grid, TileType
from battalion_game.core.levels import (
    LevelSettings,
    create_classic_level,
    create_default_level,
    normalize_level,
)


def test_short_levels_are_padded_with_empty_tiles():
    grid = normalize_level([[1, 2], [3]], size=4)

    assert grid == [
        [1, 2, 0, 0],
        [3, 0, 0, 0],
        [0, 0, 0, 0],
        [0, 0, 0, 0],
    ]


def test_large_levels_are_cropped():
    raw = [[2] * 40 for _ in range(40)]

    grid = normalize_level(raw, size=26)

    assert len(grid) == 26
    assert all(row == [2] * 26 for row in grid)


@pytest.mark.parametrize("value", [5, -1, 9.5, "1", None, True, [1]])
def test_unknown_codes_become_empty(value):
    assert normalize_level([[value, 9]], size=2) == [[0, 9], [0, 0]]


@pytest.mark.parametrize("raw", [None, "layout", 42, {"layout": []}])
def test_non_grid_input_gives_an_empty_level(raw):
    assert normalize_level(raw, size=3) == [[0] * 3 for _ in range(3)]


def test_normalize_returns_a_fresh_copy():
    raw = [[1, 1], [1, 1]]

    grid = normalize_level(raw, size=2)
    grid[0][0] = 0

    assert raw[0][0] == 1


def test_default_level_layout():
    level = create_default_level()
    grid = Grid.from_rows(level)

    assert len(level) == 26
    assert grid.find(TileType.BASE) == [(24, 13)]
    for i in range(26):
        assert level[0][i] == level[25][i] == int(TileType.STEEL)
        assert level[i][0] == level[i][25] == int(TileType.STEEL)
    for row, col in [(24, 12), (24, 14), (23, 12), (23, 13), (23, 14)]:
        assert level[row][col] == int(TileType.BRICK)


def test_classic_level_is_reproducible_for_a_seed():
    first = create_classic_level(LevelSettings(seed=11))
    second = create_classic_level(LevelSettings(seed=11))
    other = create_classic_level(LevelSettings(seed=12))

    assert first == second
    assert first != other


def test_classic_level_keeps_base_approach_and_border():
    default = create_default_level()
    for seed in range(20):
        level = create_classic_level(LevelSettings(seed=seed))
        assert Grid.from_rows(level).find(TileType.BASE) == [(24, 13)]
        assert level[0] == default[0]
        assert level[25] == default[25]
        for row in range(22, 25):
            for col in range(11, 16):
                assert level[row][col] == default[row][col]


def test_non_finite_codes_become_empty():
    grid = normalize_level([[float("inf"), 1], [2, float("nan")], [float("-inf"), 4.0]], size=3)

    assert grid == [[0, 1, 0], [2, 0, 0], [0, 4, 0]]
