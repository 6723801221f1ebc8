# tests/heuristics/test_heuristic_comparison.py
import sys
import os
import time

import pandas as pd
import pytest

sys.path.append(os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from jps_lab.config import JPSConfig
from jps_lab.map.grid_map import GridMap
from jps_lab.map.generator import MapGenerator
from jps_lab.planning.planners import create_minimize_turns_planner
from jps_lab.planning.path_utils import is_path_walkable, path_length
from jps_lab.planning.heuristics import (
    EuclideanHeuristic, OctileHeuristic, ZeroHeuristic, ManhattanHeuristic, ChebyshevHeuristic,
    CallableHeuristic, as_heuristic
)

HEURISTICS = {
    "Manhattan": ManhattanHeuristic(),
    "Euclidean": EuclideanHeuristic(),
    "Octile": OctileHeuristic(),
    "Chebyshev": ChebyshevHeuristic(),
    "Zero": ZeroHeuristic(),
}


def test_estimates():
    assert ManhattanHeuristic().estimate(3, 4) == 7
    assert EuclideanHeuristic().estimate(3, 4) == pytest.approx(5.0)
    assert OctileHeuristic().estimate(3, 4) == pytest.approx(4 + 0.41421356 * 3)
    assert ChebyshevHeuristic().estimate(3, 4) == 4
    assert ZeroHeuristic().estimate(3, 4) == 0
    # 支持直接调用
    assert ManhattanHeuristic()(1, 2) == 3


def test_as_heuristic():
    h = ManhattanHeuristic()
    assert as_heuristic(h) is h

    wrapped = as_heuristic(lambda dx, dy: 2 * dx)
    assert isinstance(wrapped, CallableHeuristic)
    assert wrapped.estimate(3, 1) == 6

    with pytest.raises(TypeError):
        as_heuristic(None)
    with pytest.raises(TypeError):
        as_heuristic(42)


def test_heuristics_agree_on_open_grid():
    """都不高估正交距离，空地图上得到的路径长度一致"""
    grid_map = GridMap(12, 9)
    for name, h in HEURISTICS.items():
        planner = create_minimize_turns_planner(JPSConfig(minimize_turns=False), h)
        path = planner.plan((1, 7), (10, 2), grid_map)
        assert path_length(path) == 14, name
        assert planner.last_state.goal_node.g == 14, name


def test_heuristic_comparison_table():
    rows = []
    for seed in range(4):
        grid_map = GridMap(40, 40)
        start, goal = (1, 1), (38, 38)
        MapGenerator(obstacle_density=0.15, seed=seed).generate(grid_map, start, goal)

        for name, h in HEURISTICS.items():
            planner = create_minimize_turns_planner(JPSConfig(), h)
            t0 = time.perf_counter()
            path = planner.plan(start, goal, grid_map)
            rows.append({
                "seed": seed,
                "heuristic": name,
                "success": bool(path),
                "walkable": is_path_walkable(path, grid_map) if path else False,
                "expanded": planner.last_state.expanded,
                "time": time.perf_counter() - t0,
            })

    df = pd.DataFrame(rows)
    summary = df.groupby("heuristic")[["success", "walkable", "expanded"]].mean()

    assert len(df) == 4 * len(HEURISTICS)
    assert summary["walkable"].eq(summary["success"]).all()
    assert (df["expanded"] > 0).all()
