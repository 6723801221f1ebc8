# jps_lab/__init__.py

from jps_lab.config import JPSConfig, GlobalConfig
from jps_lab.map import GridMap, MapGenerator
from jps_lab.planning.planners import BestFirstPlanner, create_minimize_turns_planner, find_path
from jps_lab.planning.strategies import MinimizeTurnsStrategy

__all__ = [
    "JPSConfig",
    "GlobalConfig",
    "GridMap",
    "MapGenerator",
    "BestFirstPlanner",
    "create_minimize_turns_planner",
    "find_path",
    "MinimizeTurnsStrategy",
]
