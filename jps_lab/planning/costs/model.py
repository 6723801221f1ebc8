# jps_lab/planning/costs/model.py
from typing import List, Optional

from jps_lab.types import Cell, Direction
from jps_lab.map.base import MapBase
from .base import CostFunction
from .distance_cost import WeightedManhattanCost
from .turn_cost import TurnPenaltyCost


class TurnCostModel:
    """
    边代价 = 加权曼哈顿距离 (+ 转弯惩罚)
    与 AStar 的 cost_functions/weights 组合方式一致：各项加权求和。
    """

    def __init__(self, minimize_turns: bool = True, turn_penalty: float = 0.5):
        self.cost_fns: List[CostFunction] = [WeightedManhattanCost()]
        self.weights: List[float] = [1.0]
        if minimize_turns:
            self.cost_fns.append(TurnPenaltyCost(turn_penalty))
            self.weights.append(1.0)

        assert len(self.cost_fns) == len(self.weights), "Cost functions and weights mismatch"

    def edge_cost(self, grid_map: MapBase, current: Cell, jump_point: Cell,
                  prev_direction: Optional[Direction] = None) -> float:
        cost = 0.0
        for fn, w in zip(self.cost_fns, self.weights):
            cost += w * fn.calculate(grid_map, current, jump_point, prev_direction)
        return cost
