# jps_lab/planning/costs/__init__.py

from .base import CostFunction
from .distance_cost import WeightedManhattanCost
from .turn_cost import TurnPenaltyCost
from .model import TurnCostModel

__all__ = ['CostFunction', 'WeightedManhattanCost', 'TurnPenaltyCost', 'TurnCostModel']
