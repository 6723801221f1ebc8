from jps_lab.map.grid_map import GridMap
from jps_lab.planning.path_utils import (
    interpolate, expand_path, compress_path, count_turns, path_length, path_cost, is_path_walkable
)


def test_interpolate_orthogonal():
    assert interpolate(0, 0, 3, 0) == [(0, 0), (1, 0), (2, 0), (3, 0)]
    assert interpolate(2, 3, 2, 1) == [(2, 3), (2, 2), (2, 1)]
    assert interpolate(1, 1, 1, 1) == [(1, 1)]


def test_interpolate_diagonal():
    assert interpolate(0, 0, 2, 2) == [(0, 0), (1, 1), (2, 2)]


def test_expand_path():
    assert expand_path([(0, 0), (2, 0), (2, 2)]) == [(0, 0), (1, 0), (2, 0), (2, 1), (2, 2)]
    assert expand_path([(3, 3)]) == [(3, 3)]
    assert expand_path([]) == []


def test_compress_path():
    cells = [(0, 0), (1, 0), (2, 0), (2, 1), (2, 2), (3, 2)]
    assert compress_path(cells) == [(0, 0), (2, 0), (2, 2), (3, 2)]
    assert compress_path(expand_path([(0, 0), (0, 5)])) == [(0, 0), (0, 5)]


def test_count_turns():
    assert count_turns([(0, 0), (4, 0), (4, 4)]) == 1
    assert count_turns([(0, 0), (2, 0), (4, 0)]) == 0
    assert count_turns(expand_path([(0, 0), (1, 0), (1, 1), (2, 1), (2, 2)])) == 3
    assert count_turns([(0, 0)]) == 0


def test_length_and_cost():
    grid_map = GridMap(5, 5)
    grid_map.set_weight_at(4, 4, 2.0)
    path = [(0, 0), (4, 0), (4, 4)]
    assert path_length(path) == 8
    assert path_cost(path, grid_map) == 4.0 + 8.0
    assert path_cost(path, grid_map, turn_penalty=0.5) == 12.5


def test_is_path_walkable():
    grid_map = GridMap.from_strings([
        "...",
        ".#.",
        "...",
    ])
    assert is_path_walkable([(0, 0), (2, 0), (2, 2)], grid_map)
    assert not is_path_walkable([(1, 0), (1, 2)], grid_map)
    # 斜线不是正交路径
    assert not is_path_walkable([(0, 0), (2, 2)], grid_map)
