# jps_lab/planning/planners/__init__.py

from .base import PlannerBase
from .best_first import BestFirstPlanner
from .jps import create_minimize_turns_planner, find_path


__all__ = [
    "PlannerBase",
    "BestFirstPlanner",
    "create_minimize_turns_planner",
    "find_path",
]
