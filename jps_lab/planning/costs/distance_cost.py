# jps_lab/planning/costs/distance_cost.py
from typing import Optional

from jps_lab.types import Cell, Direction
from jps_lab.map.base import MapBase
from .base import CostFunction

class WeightedManhattanCost(CostFunction):
    """
    跳跃距离代价。
    Cost = (|dx| + |dy|) * weight(jump_point)
    整段直线按跳点的地形权重计价，支持非均匀地形。
    """
    def calculate(self, grid_map: MapBase, current: Cell, jump_point: Cell,
                  prev_direction: Optional[Direction] = None) -> float:
        dist = abs(jump_point[0] - current[0]) + abs(jump_point[1] - current[1])
        return dist * grid_map.get_weight_at(jump_point[0], jump_point[1])
