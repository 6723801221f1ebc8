# jps_lab/planning/costs/base.py
from abc import ABC, abstractmethod
from typing import Optional

from jps_lab.types import Cell, Direction
from jps_lab.map.base import MapBase

class CostFunction(ABC):
    """
    代价函数基类 (Strategy Interface)
    定义从当前节点跳到 jump point 的边代价。
    """
    @abstractmethod
    def calculate(self,
                  grid_map: MapBase,
                  current: Cell,
                  jump_point: Cell,
                  prev_direction: Optional[Direction] = None) -> float:
        """
        :param current: 当前节点坐标
        :param jump_point: 跳点坐标 (与 current 共线)
        :param prev_direction: 进入 current 时的方向，起点为 None
        :return: 代价数值 (必须 >= 0)
        """
        pass
