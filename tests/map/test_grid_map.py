# tests/map/test_grid_map.py
import numpy as np
import pytest

from jps_lab.map import GridMap, MapGenerator, DiagonalMovement


def test_defaults():
    grid_map = GridMap(4, 3)
    assert grid_map.data.shape == (3, 4)
    assert grid_map.data.dtype == np.int8
    assert grid_map.weights.shape == (3, 4)
    assert grid_map.get_weight_at(3, 2) == 1.0
    assert grid_map.is_walkable_at(3, 2)


@pytest.mark.parametrize("cell", [(-1, 0), (0, -1), (4, 0), (0, 3), (100, 100)])
def test_out_of_bounds_is_blocked(cell):
    grid_map = GridMap(4, 3)
    assert grid_map.is_walkable_at(*cell) is False
    assert grid_map.get_weight_at(*cell) == float("inf")


def test_invalid_construction():
    with pytest.raises(ValueError):
        GridMap(0, 3)
    with pytest.raises(ValueError):
        GridMap(2, 2, matrix=[[0, 0, 0]])
    with pytest.raises(ValueError):
        GridMap(2, 1, weights=[[1.0, 0.5]])
    with pytest.raises(ValueError):
        GridMap.from_strings(["..", "..."])


def test_from_strings_and_matrix():
    rows = [
        "..#",
        "#..",
    ]
    grid_map = GridMap.from_strings(rows)
    assert (grid_map.width, grid_map.height) == (3, 2)
    assert not grid_map.is_walkable_at(2, 0)
    assert not grid_map.is_walkable_at(0, 1)
    assert grid_map.is_walkable_at(1, 1)

    same = GridMap.from_matrix([[0, 0, 1], [1, 0, 0]])
    assert np.array_equal(same.data, grid_map.data)


def test_setters():
    grid_map = GridMap(3, 3)
    grid_map.set_walkable_at(1, 1, False)
    assert not grid_map.is_walkable_at(1, 1)
    grid_map.set_weight_at(2, 2, 4.0)
    assert grid_map.get_weight_at(2, 2) == 4.0

    with pytest.raises(IndexError):
        grid_map.set_walkable_at(3, 0, False)
    with pytest.raises(ValueError):
        grid_map.set_weight_at(0, 0, 0.5)


def test_neighbor_order():
    grid_map = GridMap(3, 3)
    # 上、右、下、左
    assert grid_map.get_neighbors(1, 1) == [(1, 0), (2, 1), (1, 2), (0, 1)]
    assert grid_map.get_neighbors(0, 0) == [(1, 0), (0, 1)]

    grid_map.set_walkable_at(2, 1, False)
    assert grid_map.get_neighbors(1, 1, DiagonalMovement.NEVER) == [(1, 0), (1, 2), (0, 1)]

    with pytest.raises(ValueError):
        grid_map.get_neighbors(1, 1, DiagonalMovement.ALWAYS)


def test_regions():
    grid_map = GridMap.from_strings([
        "..#..",
        "..#..",
        "..#..",
    ])
    assert grid_map.same_region((0, 0), (1, 2))
    assert not grid_map.same_region((0, 0), (4, 0))
    assert not grid_map.same_region((0, 0), (2, 0))

    # 修改地图后缓存失效
    grid_map.set_walkable_at(2, 1, True)
    assert grid_map.same_region((0, 0), (4, 0))

    # 4-连通：斜对角不算连通
    diagonal = GridMap.from_strings([
        ".#",
        "#.",
    ])
    assert not diagonal.same_region((0, 0), (1, 1))


def test_generator_is_reproducible():
    a, b = GridMap(20, 20), GridMap(20, 20)
    MapGenerator(obstacle_density=0.3, max_weight=3.0, seed=7).generate(a, (1, 1), (18, 18))
    MapGenerator(obstacle_density=0.3, max_weight=3.0, seed=7).generate(b, (1, 1), (18, 18))
    assert np.array_equal(a.data, b.data)
    assert np.array_equal(a.weights, b.weights)
    assert a.weights.min() >= 1.0 and a.weights.max() <= 3.0


@pytest.mark.parametrize("seed", range(5))
def test_generator_connects_start_and_goal(seed):
    grid_map = GridMap(25, 25)
    MapGenerator(obstacle_density=0.45, seed=seed).generate(grid_map, (1, 1), (23, 20))

    assert grid_map.is_walkable_at(1, 1)
    assert grid_map.is_walkable_at(23, 20)
    assert grid_map.same_region((1, 1), (23, 20))
    # 围墙
    assert grid_map.data[0, :].all()
    assert grid_map.data[:, -1].all()


def test_generator_rejects_bad_density():
    with pytest.raises(ValueError):
        MapGenerator(obstacle_density=1.0)
    with pytest.raises(ValueError):
        MapGenerator(max_weight=0.5)
