# jps_lab/planning/costs/turn_cost.py
from typing import Optional

from jps_lab.types import Cell, Direction, direction_between, sign
from jps_lab.map.base import MapBase
from .base import CostFunction

class TurnPenaltyCost(CostFunction):
    """
    转弯惩罚：进入 current 的方向与离开 current 的方向 (逐轴符号) 不同时，附加固定代价。
    只加到 g 上，启发式不变。
    """
    def __init__(self, penalty: float = 0.5):
        if penalty < 0:
            raise ValueError(f"Turn penalty must be >= 0, got {penalty}")
        self.penalty = penalty

    def calculate(self, grid_map: MapBase, current: Cell, jump_point: Cell,
                  prev_direction: Optional[Direction] = None) -> float:
        if prev_direction is None:
            return 0.0
        new_direction = direction_between(current, jump_point)
        if sign(prev_direction[0]) != new_direction[0] or sign(prev_direction[1]) != new_direction[1]:
            return self.penalty
        return 0.0
