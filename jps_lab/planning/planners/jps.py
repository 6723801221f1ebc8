# jps_lab/planning/planners/jps.py
from typing import List, Optional

from jps_lab.config import JPSConfig
from jps_lab.types import Cell
from jps_lab.map.base import MapBase
from jps_lab.planning.heuristics import Heuristic
from jps_lab.planning.interfaces import IPlannerObserver
from jps_lab.planning.strategies import MinimizeTurnsStrategy
from .best_first import BestFirstPlanner


def create_minimize_turns_planner(config: Optional[JPSConfig] = None,
                                  heuristic: Optional[Heuristic] = None) -> BestFirstPlanner:
    """组装：通用主循环 + 转弯最少化策略"""
    if config is None:
        config = JPSConfig()
    strategy = MinimizeTurnsStrategy(config)
    return BestFirstPlanner(strategy, heuristic, check_connectivity=config.check_connectivity)


def find_path(grid_map: MapBase,
              start: Cell,
              goal: Cell,
              heuristic: Optional[Heuristic] = None,
              debugger: Optional[IPlannerObserver] = None,
              **options) -> List[Cell]:
    """
    一次性查询的便捷入口，options 即 JPSConfig 的字段，例如:
        find_path(grid, (0, 0), (4, 4), minimize_turns=True, look_ahead_distance=4)
    """
    planner = create_minimize_turns_planner(JPSConfig(**options), heuristic)
    return planner.plan(start, goal, grid_map, debugger=debugger)
